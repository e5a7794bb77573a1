"""
Reduced-feature typed-object view of a JSON array of objects.

For each field it reports the coarse type tags observed (NULL, BOOL, NUMBER,
STRING), with arrays tagged element by element and objects tagged field by
field. There are no string lengths, no "types" wrapper and no key-set
clustering: a tag structure is listed once per field however many records
share it.
"""

from schema_explorer.inference.schema_core import FieldType, InvalidInputError
from schema_explorer.inference.utils import JSONLoader


def tag_value(value):
    if value is None:
        return FieldType.NULL.value
    elif isinstance(value, bool):
        return FieldType.BOOL.value
    elif isinstance(value, (int, float)):
        return FieldType.NUMBER.value
    elif isinstance(value, str):
        return FieldType.STRING.value
    elif isinstance(value, dict):
        return tag_object(value)
    elif isinstance(value, list):
        return [tag_value(item) for item in value]
    else:
        raise TypeError(f"Not a JSON value: {type(value).__name__}")


def tag_object(obj):
    return {str(key): tag_value(value) for key, value in obj.items()}


def typed_object(records):
    if not isinstance(records, list):
        raise InvalidInputError(
            f"Expected a JSON array of objects, got {type(records).__name__}"
        )

    result = {}
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise InvalidInputError(
                f"Element {index} is {type(record).__name__}, expected an object"
            )
        for key, tags in tag_object(record).items():
            seen = result.setdefault(key, [])
            if tags not in seen:
                seen.append(tags)
    return result


def create_typed_object(raw_text):
    """Parse ``raw_text`` and return field -> list of distinct tag structures."""
    return typed_object(JSONLoader.load_text(raw_text))
