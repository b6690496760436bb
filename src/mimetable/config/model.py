# mimetable:header:start
#
#   project      : MimeTable
#   file         : model.py
#   file_relpath : src/mimetable/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MimeTable configuration model.

The configuration selects the dataset a registry is built from and adds
extension overrides on top of the built-in ones. It never changes the
grammar or the resolution rules.

TOML layout (``mimetable.toml``, or ``[tool.mimetable]`` in ``pyproject.toml``):

```toml
dataset = "data/mime.types"   # optional; relative to the config file

[overrides]                   # replace the extension list
"text/markdown" = ["md", "markdown"]

[append]                      # append to the extension list
"application/json" = ["jsonld"]
```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from mimetable.registry.overrides import DEFAULT_OVERRIDES, ExtensionOverride
from mimetable.registry.registry import MimeTypeRegistry

if TYPE_CHECKING:
    from pathlib import Path


class Toml:
    """TOML keys recognized in a MimeTable configuration."""

    KEY_DATASET: Final[str] = "dataset"
    SECTION_OVERRIDES: Final[str] = "overrides"
    SECTION_APPEND: Final[str] = "append"


@dataclass(frozen=True)
class MimeTableConfig:
    """Immutable, resolved configuration.

    Attributes:
        dataset (Path | None): Alternate dataset file; None uses the bundled one.
        overrides (tuple[ExtensionOverride, ...]): Configured overrides, applied
            after `DEFAULT_OVERRIDES` (replacements before appends).
        source (Path | None): File the configuration was read from, if any.
    """

    dataset: Path | None = None
    overrides: tuple[ExtensionOverride, ...] = ()
    source: Path | None = None

    @property
    def is_default(self) -> bool:
        """True when the configuration does not change the default registry."""
        return self.dataset is None and not self.overrides

    def effective_overrides(self) -> tuple[ExtensionOverride, ...]:
        """Built-in overrides followed by the configured ones."""
        return DEFAULT_OVERRIDES + self.overrides

    def build_registry(self) -> MimeTypeRegistry:
        """Build a registry according to this configuration.

        Raises:
            RegistryInitializationError: If the dataset cannot be loaded or an
                override names an unknown type.
        """
        if self.dataset is not None:
            return MimeTypeRegistry.from_file(self.dataset, self.effective_overrides())
        return MimeTypeRegistry.bundled(self.effective_overrides())
