# mimetable:header:start
#
#   project      : MimeTable
#   file         : test_grammar_property.py
#   file_relpath : tests/model/test_grammar_property.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Property-based tests for the MIME type-name grammar.

Generated names are formatted from components and parsed back; the parser must
return the same components and `MimeType` must accept them. Run with the
`property_test` nox session.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from mimetable.model.grammar import ParsedTypeName, format_type_name, parse_type_name
from mimetable.model.mimetype import MimeType

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

primaries = st.from_regex(r"[-a-z]{1,12}", fullmatch=True)
subtypes = st.from_regex(r"[-.a-z0-9]{1,20}", fullmatch=True)
suffixes = st.none() | st.from_regex(r"[a-z0-9_]{1,8}", fullmatch=True)


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=200,
)
@given(primary=primaries, sub=subtypes, suffix=suffixes)
def test_format_then_parse_returns_components(primary: str, sub: str, suffix: str | None) -> None:
    name = format_type_name(primary, sub, suffix)
    assert parse_type_name(name) == ParsedTypeName(primary, sub, suffix)


@settings(deadline=None, max_examples=100)
@given(primary=primaries, sub=subtypes, suffix=suffixes)
def test_constructed_value_round_trips_through_parse(
    primary: str, sub: str, suffix: str | None
) -> None:
    mime = MimeType(primary, sub, suffix)
    assert MimeType.parse(mime.type_name) == mime
    assert not mime.is_wildcard
