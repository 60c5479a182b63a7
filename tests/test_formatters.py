"""
Tests for cell formatting — format_value() rules and truncation

Collections up to the threshold are shown, larger ones are counted,
nested mappings are always counted, and booleans are colored only when
the context asks for it.
"""

import weakref
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from gridprint.presentation.colors import strip_styles
from gridprint.presentation.formatters import (
    FormatContext, PLAIN, TableFormattable,
    format_value, format_sequence, format_count_summary, summarize_record
)

from tests.factories import (
    ApiKey, EMITTED_AT, Item, Severity, Tag, Version,
    make_features, make_overloads
)


class Level(Enum):
    HIGH = "high"


@dataclass
class Named:
    name: str = field(metadata={"json": "name"})


@dataclass
class Nameless:
    id: str


@dataclass
class Toggle:
    name: str = field(metadata={"json": "name"})
    enabled: str = field(metadata={"json": "enabled"})


class TestScalars:
    """Scalar formatting."""

    def test_absent_is_empty(self):
        """None renders as an empty cell."""
        assert format_value(None) == ""

    def test_booleans_plain(self):
        """Booleans render lowercase without color."""
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_booleans_colored(self, color_context):
        """Booleans are wrapped in ANSI color when color is on."""
        rendered = format_value(True, color_context)
        assert rendered != "true"
        assert "\x1b[" in rendered
        assert strip_styles(rendered) == "true"
        assert strip_styles(format_value(False, color_context)) == "false"

    def test_numbers_and_strings(self):
        """Numbers and strings use their natural text."""
        assert format_value(42) == "42"
        assert format_value(1.5) == "1.5"
        assert format_value("test string") == "test string"
        assert format_value("") == ""

    def test_bytes_decoded(self):
        """Bytes are decoded as UTF-8."""
        assert format_value(b"abc") == "abc"

    def test_default_context_is_plain(self):
        """No context means no color."""
        assert format_value(True, None) == format_value(True, PLAIN) == "true"


class TestSequences:
    """Sequences nested in a cell."""

    def test_empty(self):
        """Empty sequences render as []."""
        assert format_value([]) == "[]"
        assert format_value(()) == "[]"

    def test_short_scalar_list_enumerated(self):
        """Up to three scalars are listed."""
        assert format_value(["a", "b", "c"]) == "[a, b, c]"
        assert format_value([1]) == "[1]"

    def test_long_scalar_list_counted(self):
        """More than three scalars are counted."""
        assert format_value(["a", "b", "c", "d"]) == "[4 items]"

    def test_elements_formatted_recursively(self):
        """Elements use the same rules (booleans, nested mappings)."""
        assert format_value([True, None, {"a": 1}]) == "[true, , {1 entries}]"

    def test_threshold_from_context(self):
        """The truncation threshold comes from the context."""
        context = FormatContext(max_items=5)
        assert format_value([1, 2, 3, 4, 5], context) == "[1, 2, 3, 4, 5]"
        assert format_value([1, 2], FormatContext(max_items=1)) == "[2 items]"

    def test_long_record_list_counted(self):
        """More than three records are counted."""
        assert format_value(make_features(5)) == "[5 items]"

    def test_records_summarized_by_name_and_status(self):
        """Records show name and enabled status."""
        assert format_value(make_features(2)) == "feature1 (enabled), feature2 (enabled)"

    def test_records_with_name_only(self):
        """Records without an enabled flag show the bare name."""
        tags = [Tag("beta"), Tag("internal")]
        assert format_value(tags) == "beta, internal"

    def test_non_boolean_enabled_ignored(self):
        """An enabled field that is not a boolean adds no status."""
        assert format_value([Toggle("x", "yes")]) == "x"

    def test_records_without_name_render_empty_marker(self):
        """Nothing extractable renders as []."""
        assert format_value([Nameless("1"), Nameless("2")]) == "[]"

    def test_records_with_blank_name_skipped(self):
        """Records with an empty name contribute nothing."""
        assert format_value([Named(""), Named("kept")]) == "kept"

    def test_non_records_skipped_in_record_list(self):
        """Elements that are not records are skipped."""
        assert format_value([Named("a"), None, 5]) == "a"

    def test_custom_capability_wins(self):
        """format_for_table() is used verbatim when present."""
        overloads = make_overloads("f1", "f2")
        assert isinstance(overloads[0], TableFormattable)
        assert format_value(overloads) == "f1 (enabled), f2 (disabled)"

    def test_status_colored(self, color_context):
        """Status words are colored with color on."""
        rendered = format_value(make_features(1, enabled=False), color_context)
        assert "\x1b[" in rendered
        assert strip_styles(rendered) == "feature1 (disabled)"

    def test_namedtuple_elements_are_records(self):
        """Named tuples inside a list are records, summarized by name."""
        assert format_value([Version(1, 2, 3)]) == "[]"

    def test_set_elements(self):
        """Sets format like other sequences."""
        assert format_value({7}) == "[7]"

    def test_format_sequence_direct(self):
        """format_sequence() applies the same rules to a list."""
        assert format_sequence(["x"]) == "[x]"


class TestMappings:
    """Mappings nested in a cell are never enumerated."""

    def test_empty_mapping(self):
        """Empty mappings render as {}."""
        assert format_value({}) == "{}"

    def test_small_mapping_counted(self):
        """Even small mappings are counted."""
        assert format_value({"a": 1}) == "{1 entries}"

    def test_five_entries(self):
        """A mapping with 5 entries renders as {5 entries}."""
        rights = {f"tenant{i}": "Read" for i in range(5)}
        assert format_value(rights) == "{5 entries}"


class TestObjects:
    """Records and opaque values nested in a cell."""

    def test_timestamp_uses_own_text(self):
        """Timestamps render via their own str()."""
        assert format_value(EMITTED_AT) == str(EMITTED_AT)

    def test_custom_str(self):
        """Objects with __str__ use it."""
        assert format_value(Severity("high")) == "severity:high"

    def test_record_uses_repr(self):
        """Records without __str__ fall back to their repr."""
        assert format_value(Item("a", True, 1)) == "Item(name='a', enabled=True, count=1)"

    def test_enum_by_value(self):
        """Enum members render their value."""
        assert format_value(Level.HIGH) == "high"

    def test_decimal(self):
        """Decimals keep their digits."""
        assert format_value(Decimal("1.10")) == "1.10"

    def test_weak_reference_followed(self):
        """Weak references render as their target."""
        target = Severity("low")
        assert format_value(weakref.ref(target)) == "severity:low"

    def test_dead_reference_empty(self):
        """Dead weak references render as empty cells."""
        target = Severity("low")
        ref = weakref.ref(target)
        del target
        assert format_value(ref) == ""


class TestSummaries:
    """Count summaries and record summaries."""

    def test_count_summary(self):
        """Counts render with their markers."""
        assert format_count_summary(0) == "[]"
        assert format_count_summary(4) == "[4 items]"
        assert format_count_summary(0, mapping=True) == "{}"
        assert format_count_summary(4, mapping=True) == "{4 entries}"

    def test_summarize_pydantic_record(self):
        """Pydantic models are summarized by their name field."""
        key = ApiKey(client_id="c1", name="ci-key", enabled=False, tenant="t1")
        assert summarize_record(key) == "ci-key (disabled)"

    def test_summarize_without_name(self):
        """Records without a name summarize to ""."""
        assert summarize_record(Nameless("1")) == ""
