from enum import Enum
from dataclasses import dataclass, field


class SchemaExplorerError(Exception):
    """Base class for every failure surfaced by the schema explorer."""


class InvalidInputError(SchemaExplorerError, ValueError):
    """Top-level JSON value is neither an object nor an array."""


class ParseFailureError(SchemaExplorerError, ValueError):
    """Input text is not well-formed JSON."""


class IOFailureError(SchemaExplorerError, OSError):
    """Input could not be read."""


class FieldType(Enum):
    NULL = "NULL"
    BOOL = "BOOL"
    NUMBER = "NUMBER"
    STRING = "STRING"


def _same_variants(left, right):
    # Variant lists hold no duplicates, so this is set equality.
    return len(left) == len(right) and all(variant in right for variant in left)


@dataclass(frozen=True)
class PrimitiveType:

    kind: FieldType


@dataclass(frozen=True)
class StringRangeType:

    min_length: int
    max_length: int

    @classmethod
    def from_lengths(cls, lengths):
        return cls(min(lengths), max(lengths))


@dataclass(frozen=True, eq=False)
class ArrayType:

    variants: list = field(default_factory=list)

    def __eq__(self, other):
        if not isinstance(other, ArrayType):
            return NotImplemented
        return _same_variants(self.variants, other.variants)

    def __hash__(self):
        return hash(frozenset(map(hash, self.variants)))


@dataclass(frozen=True)
class ObjectType:

    schema: "Schema"


@dataclass(frozen=True, eq=False)
class Schema:
    """Merged description of the fields seen across a batch of objects.

    ``map`` goes from field name to the distinct variants observed for that
    field. ``name`` is a diagnostic label and takes no part in equality.
    """

    name: str
    map: dict = field(default_factory=dict)

    def field_names(self):
        return list(self.map.keys())

    def types(self, field_name):
        return list(self.map.get(field_name, []))

    def __contains__(self, field_name):
        return field_name in self.map

    def __len__(self):
        return len(self.map)

    def __eq__(self, other):
        if not isinstance(other, Schema):
            return NotImplemented
        if self.map.keys() != other.map.keys():
            return False
        return all(
            _same_variants(variants, other.map[field_name])
            for field_name, variants in self.map.items()
        )

    def __hash__(self):
        return hash(
            frozenset(
                (field_name, frozenset(map(hash, variants)))
                for field_name, variants in self.map.items()
            )
        )
