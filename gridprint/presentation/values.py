"""
Values — Shape classification for arbitrary render input

Every value handed to the renderer is sorted into one closed set of kinds
before anything is formatted:

    ABSENT    None, or a weak reference whose target is gone
    SCALAR    bool, int, float, complex, str, bytes
    SEQUENCE  list, tuple, set, frozenset and other non-string sequences
    MAPPING   dict and other Mapping implementations
    RECORD    dataclass instances, pydantic models, named tuples
    OPAQUE    anything else (datetimes, UUIDs, enums, plain objects)

Weak references are followed exactly once, so classification never loops.
Strings and bytes are scalars, never sequences. Named tuples are records,
never sequences.
"""

import dataclasses
import weakref
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any, NamedTuple

from pydantic import BaseModel


class Kind(Enum):
    """Shape of a classified value."""
    ABSENT = "absent"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"
    OPAQUE = "opaque"


class Classified(NamedTuple):
    """A value paired with its kind, after reference resolution."""
    kind: Kind
    value: Any


SCALAR_TYPES = (bool, int, float, complex, str, bytes, bytearray)


def deref(value: Any) -> Any:
    """Follow one level of weak reference; dead references become None."""
    if isinstance(value, weakref.ReferenceType):
        return value()
    return value


def is_namedtuple(value: Any) -> bool:
    """True for instances of collections.namedtuple / typing.NamedTuple."""
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def is_record(value: Any) -> bool:
    """True when value is a fixed-shape record instance (not a record class)."""
    if isinstance(value, BaseModel):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return is_namedtuple(value)


def classify(value: Any) -> Classified:
    """
    Classify a value into its Kind.

    Args:
        value: Any Python value

    Returns:
        Classified(kind, value) where value has been dereferenced once
    """
    value = deref(value)

    if value is None:
        return Classified(Kind.ABSENT, None)
    # IntEnum / StrEnum members are also ints and strs; they render by value
    if isinstance(value, Enum):
        return Classified(Kind.OPAQUE, value)
    if isinstance(value, SCALAR_TYPES):
        return Classified(Kind.SCALAR, value)
    if is_record(value):
        return Classified(Kind.RECORD, value)
    if isinstance(value, Mapping):
        return Classified(Kind.MAPPING, value)
    if isinstance(value, (Sequence, Set)):
        return Classified(Kind.SEQUENCE, value)
    return Classified(Kind.OPAQUE, value)


def holds_records(items: Sequence) -> bool:
    """
    Decide whether a sequence is a sequence of records.

    The first element decides, the same way a typed container's element
    type would. Empty sequences hold no records.
    """
    if not items:
        return False
    return classify(items[0]).kind is Kind.RECORD
