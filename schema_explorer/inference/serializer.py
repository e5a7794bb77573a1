import json

from .schema_core import (
    ArrayType,
    ObjectType,
    PrimitiveType,
    Schema,
    StringRangeType,
)


class SchemaSerializer:

    @classmethod
    def serialize(cls, schema: Schema) -> dict:
        """Render a schema as plain dicts/lists/strings, ready for json.dump."""
        document = {}
        for field_name, variants in schema.map.items():
            document[field_name] = {
                "types": [cls.serialize_variant(variant) for variant in variants]
            }
        return document

    @classmethod
    def serialize_variant(cls, variant):
        if isinstance(variant, PrimitiveType):
            return variant.kind.value
        elif isinstance(variant, StringRangeType):
            if variant.min_length == variant.max_length:
                return f"STRING({variant.min_length})"
            return f"STRING({variant.min_length}, {variant.max_length})"
        elif isinstance(variant, ArrayType):
            return {"ARRAY": [cls.serialize_variant(v) for v in variant.variants]}
        elif isinstance(variant, ObjectType):
            return cls.serialize(variant.schema)
        else:
            raise TypeError(f"Unknown schema value type: {type(variant).__name__}")

    @classmethod
    def to_json(cls, schema: Schema, compact=False, sort_keys=False) -> str:
        document = cls.serialize(schema)
        if compact:
            return json.dumps(
                document, ensure_ascii=False, separators=(",", ":"), sort_keys=sort_keys
            )
        return json.dumps(document, ensure_ascii=False, indent=2, sort_keys=sort_keys)


def serialize(schema: Schema) -> dict:
    return SchemaSerializer.serialize(schema)
