from enum import Enum
from dataclasses import dataclass, field

from .schema_core import FieldType, InvalidInputError
from .fingerprint import FingerprintGrouper


class ShapeKind(Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"


SCALAR_FIELD_TYPES = {
    ShapeKind.NULL: FieldType.NULL,
    ShapeKind.BOOL: FieldType.BOOL,
    ShapeKind.NUMBER: FieldType.NUMBER,
}


@dataclass
class ValueShape:
    """Classified form of one sampled JSON value, before any merging."""

    kind: ShapeKind
    length: int = None
    descriptor: "ObjectDescriptor" = None
    items: list = field(default_factory=list)

    @property
    def is_scalar(self):
        return self.kind in SCALAR_FIELD_TYPES

    @property
    def is_string(self):
        return self.kind == ShapeKind.STRING

    @property
    def is_object(self):
        return self.kind == ShapeKind.OBJECT

    @property
    def is_array(self):
        return self.kind == ShapeKind.ARRAY

    @property
    def field_type(self):
        if self.is_string:
            return FieldType.STRING
        return SCALAR_FIELD_TYPES.get(self.kind)


@dataclass
class ObjectDescriptor:
    """The (field name, shape) pairs of a single JSON object, in key order."""

    fields: list = field(default_factory=list)

    @classmethod
    def from_json(cls, value):
        if not isinstance(value, dict):
            raise InvalidInputError(
                f"Expected a JSON object, got {type(value).__name__}"
            )
        return cls(
            fields=[
                (str(key), ValueClassifier.classify(inner))
                for key, inner in value.items()
            ]
        )

    def field_names(self):
        return [name for name, _ in self.fields]

    def shape_of(self, field_name):
        for name, shape in self.fields:
            if name == field_name:
                return shape
        return None

    def fingerprint(self):
        return FingerprintGrouper.fingerprint(self)


class ValueClassifier:

    @staticmethod
    def classify(value) -> ValueShape:
        if value is None:
            return ValueShape(ShapeKind.NULL)
        elif isinstance(value, bool):
            return ValueShape(ShapeKind.BOOL)
        elif isinstance(value, (int, float)):
            return ValueShape(ShapeKind.NUMBER)
        elif isinstance(value, str):
            return ValueShape(ShapeKind.STRING, length=len(value))
        elif isinstance(value, dict):
            return ValueShape(
                ShapeKind.OBJECT, descriptor=ObjectDescriptor.from_json(value)
            )
        elif isinstance(value, list):
            return ValueShape(
                ShapeKind.ARRAY,
                items=[ValueClassifier.classify(item) for item in value],
            )
        else:
            raise TypeError(f"Not a JSON value: {type(value).__name__}")


def classify(value) -> ValueShape:
    return ValueClassifier.classify(value)
