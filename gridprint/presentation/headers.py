"""
Headers — Display names for record fields

A record's fields are shown under their serialization alias when one is
declared, otherwise under their Python identifier:

- Dataclasses declare the alias as a serialization tag in field metadata:
      name: str = field(metadata={"json": "displayName,omitempty"})
  Options after the first comma are stripped. A tag of "-" suppresses the
  alias (and drops the field from JSON output).
- Pydantic models use serialization_alias, falling back to alias.
- Named tuples have no aliases.

Fields whose identifier starts with an underscore are internal and never
visible. Field resolution is computed once per record type.

Names and values are positional: display_names(r)[i] always describes
record_values(r)[i].
"""

import dataclasses
from functools import lru_cache
from typing import Any, List, NamedTuple, Tuple

from pydantic import BaseModel


TAG_KEY = "json"          # dataclass metadata key holding the tag
TAG_SEPARATOR = ","
TAG_SUPPRESSED = "-"
OMIT_EMPTY = "omitempty"


class FieldSpec(NamedTuple):
    """A visible record field and how it is presented."""
    name: str                 # Python attribute name
    display: str              # alias, or name when no alias applies
    omit_empty: bool = False  # drop from JSON when the value is empty
    skip_json: bool = False   # never written to JSON


def parse_tag(tag: str) -> str:
    """Return the bare alias from a serialization tag ("id,omitempty" -> "id")."""
    return tag.split(TAG_SEPARATOR, 1)[0]


def tag_options(tag: str) -> Tuple[str, ...]:
    """Return the options following the alias in a serialization tag."""
    return tuple(tag.split(TAG_SEPARATOR)[1:])


def _dataclass_fields(record_type: type) -> Tuple[FieldSpec, ...]:
    specs = []
    for f in dataclasses.fields(record_type):
        if f.name.startswith("_"):
            continue
        tag = f.metadata.get(TAG_KEY, "") or ""
        if tag == TAG_SUPPRESSED:
            specs.append(FieldSpec(f.name, f.name, skip_json=True))
            continue
        alias = parse_tag(tag)
        specs.append(FieldSpec(
            name=f.name,
            display=alias or f.name,
            omit_empty=OMIT_EMPTY in tag_options(tag),
        ))
    return tuple(specs)


def _model_fields(record_type: type) -> Tuple[FieldSpec, ...]:
    specs = []
    for name, info in record_type.model_fields.items():
        if name.startswith("_"):
            continue
        alias = info.serialization_alias or info.alias
        specs.append(FieldSpec(
            name=name,
            display=alias or name,
            skip_json=bool(info.exclude),
        ))
    return tuple(specs)


def _namedtuple_fields(record_type: type) -> Tuple[FieldSpec, ...]:
    return tuple(
        FieldSpec(name, name)
        for name in record_type._fields
        if not name.startswith("_")
    )


@lru_cache(maxsize=None)
def resolve_fields(record_type: type) -> Tuple[FieldSpec, ...]:
    """
    Resolve the visible fields of a record type, in declaration order.

    Args:
        record_type: A dataclass, pydantic model or named tuple class

    Returns:
        Tuple of FieldSpec (empty for types that are not records)
    """
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        return _model_fields(record_type)
    if dataclasses.is_dataclass(record_type):
        return _dataclass_fields(record_type)
    if isinstance(record_type, type) and issubclass(record_type, tuple) \
            and hasattr(record_type, "_fields"):
        return _namedtuple_fields(record_type)
    return ()


def display_names(record: Any) -> List[str]:
    """Display names of a record's visible fields."""
    return [spec.display for spec in resolve_fields(type(record))]


def record_values(record: Any) -> List[Any]:
    """Values of a record's visible fields, aligned with display_names()."""
    return [getattr(record, spec.name) for spec in resolve_fields(type(record))]


def record_items(record: Any) -> List[Tuple[FieldSpec, Any]]:
    """(FieldSpec, value) pairs for a record's visible fields."""
    return [(spec, getattr(record, spec.name)) for spec in resolve_fields(type(record))]


__all__ = [
    "FieldSpec", "parse_tag", "tag_options", "resolve_fields",
    "display_names", "record_values", "record_items",
]
