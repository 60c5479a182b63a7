"""
Tests for header resolution — display names from serialization aliases

Aliases win over identifiers, tag options are stripped, internal fields
stay hidden, and names line up with values position by position.
"""

from dataclasses import dataclass, field

from gridprint.presentation.headers import (
    parse_tag, tag_options, resolve_fields,
    display_names, record_values, record_items
)

from tests.factories import ApiKey, Feature, Item, UserListItem, Version


@dataclass
class Untagged:
    first_name: str
    last_name: str


@dataclass
class EmptyAlias:
    value: int = field(metadata={"json": ",omitempty"})


class TestParseTag:
    """Serialization tag parsing."""

    def test_strips_options(self):
        """Everything after the first comma is dropped."""
        assert parse_tag("tenantRights,omitempty") == "tenantRights"

    def test_plain_alias(self):
        """A tag without options is the alias itself."""
        assert parse_tag("name") == "name"

    def test_empty_alias(self):
        """A tag with only options has an empty alias."""
        assert parse_tag(",omitempty") == ""

    def test_options(self):
        """Options are returned in order."""
        assert tag_options("id,omitempty,string") == ("omitempty", "string")
        assert tag_options("id") == ()


class TestDataclassHeaders:
    """Dataclass field resolution."""

    def test_aliases_are_used(self):
        """Tagged fields show their alias."""
        user = UserListItem("u", "u@example.com", True, "INTERNAL")
        assert display_names(user)[:5] == ["username", "email", "admin", "userType", "tenantRights"]

    def test_suppressed_alias_falls_back_to_identifier(self):
        """A "-" tag shows the identifier and skips JSON."""
        specs = {s.name: s for s in resolve_fields(UserListItem)}
        assert specs["password"].display == "password"
        assert specs["password"].skip_json is True

    def test_untagged_fields_use_identifier(self):
        """Fields without tags show their identifier."""
        assert display_names(Untagged("a", "b")) == ["first_name", "last_name"]

    def test_empty_alias_falls_back_to_identifier(self):
        """A tag with an empty alias shows the identifier."""
        assert display_names(EmptyAlias(1)) == ["value"]
        assert resolve_fields(EmptyAlias)[0].omit_empty is True

    def test_internal_fields_hidden(self):
        """Underscore fields are never visible."""
        names = display_names(Feature("1", "f", True))
        assert "_etag" not in names
        assert names == ["id", "name", "enabled", "project", "tags", "description"]

    def test_omitempty_option_recorded(self):
        """omitempty is carried on the field spec."""
        specs = {s.name: s for s in resolve_fields(Feature)}
        assert specs["project"].omit_empty is True
        assert specs["name"].omit_empty is False


class TestModelHeaders:
    """Pydantic model field resolution."""

    def test_serialization_alias_then_alias(self):
        """serialization_alias wins, then alias, then the field name."""
        key = ApiKey(client_id="c1", name="ci", tenant="t1")
        assert display_names(key) == ["clientId", "name", "enabled", "admin", "tenantName", "client_secret"]

    def test_excluded_field_skips_json(self):
        """Fields excluded from serialization are flagged."""
        specs = {s.name: s for s in resolve_fields(ApiKey)}
        assert specs["client_secret"].skip_json is True


class TestNamedTupleHeaders:
    """Named tuple field resolution."""

    def test_field_names(self):
        """Named tuple fields are shown by name."""
        assert display_names(Version(1, 2, 3)) == ["major", "minor", "patch"]


class TestAlignment:
    """Names and values are positional."""

    def test_values_align_with_names(self):
        """record_values()[i] belongs to display_names()[i]."""
        item = Item("feature1", True, 10)
        assert list(zip(display_names(item), record_values(item))) == [
            ("name", "feature1"), ("enabled", True), ("count", 10)
        ]

    def test_record_items_pairs(self):
        """record_items() pairs specs with values."""
        pairs = [(spec.display, value) for spec, value in record_items(Version(1, 2, 3))]
        assert pairs == [("major", 1), ("minor", 2), ("patch", 3)]

    def test_non_record_type_has_no_fields(self):
        """Types that are not records resolve to no fields."""
        assert resolve_fields(int) == ()
        assert resolve_fields(tuple) == ()

    def test_resolution_is_cached(self):
        """The same tuple is returned for repeated lookups."""
        assert resolve_fields(Item) is resolve_fields(Item)
