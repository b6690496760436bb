# mimetable:header:start
#
#   project      : MimeTable
#   file         : rendering.py
#   file_relpath : src/mimetable/cli/rendering.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Click-free rendering helpers shared by CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from mimetable.model.mimetype import MimeType


def mime_to_dict(mime: MimeType) -> dict[str, Any]:
    """Serialize a MIME type for JSON output."""
    return {
        "type": mime.type_name,
        "primary": mime.primary_type,
        "subtype": mime.sub_type,
        "suffix": mime.suffix,
        "extensions": list(mime.extensions),
        "registered": mime.registered,
    }


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers (Sequence[str]): Column headers.
        rows (Sequence[Sequence[str]]): Rows, each as long as ``headers``.
        align (Mapping[int, str] | None): Column index to ``"left"`` (default),
            ``"right"`` or ``"center"``.

    Returns:
        str: The table, ending with a newline.

    Raises:
        ValueError: If a row has the wrong number of cells.
    """
    if not headers:
        return ""
    ncols = len(headers)
    if any(len(r) != ncols for r in rows):
        raise ValueError("All rows must have the same number of columns as headers")

    widths = [max(len(h), 3) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def _rule(i: int) -> str:
        how = (align or {}).get(i, "left")
        w = widths[i]
        if how == "right":
            return "-" * (w - 1) + ":"
        if how == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{c:<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    lines = [_line(headers), "| " + " | ".join(_rule(i) for i in range(ncols)) + " |"]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"
