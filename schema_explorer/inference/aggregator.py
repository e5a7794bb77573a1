import logging
from collections import defaultdict

from .schema_core import (
    ArrayType,
    ObjectType,
    PrimitiveType,
    Schema,
    StringRangeType,
)
from .fingerprint import FingerprintGrouper

logger = logging.getLogger(__name__)


class SchemaAggregator:
    """Merges sibling object descriptors into a single Schema.

    Every shape observed for a field is split four ways:

    - scalars (null/bool/number) become deduplicated ``PrimitiveType``s
    - strings collapse into one ``StringRangeType`` over all their lengths
    - nested objects become ``ObjectType`` variants, either one merged child
      schema or one child schema per key-set cluster
    - arrays become one ``ArrayType`` whose variants come from running the
      same split over every element of every array seen for the field

    ``merge_objects`` is passed down explicitly so it applies at every nesting
    level, arrays included.
    """

    @classmethod
    def aggregate(cls, name, descriptors, merge_objects=False) -> Schema:
        shapes_by_field = defaultdict(list)
        for descriptor in descriptors:
            for field_name, shape in descriptor.fields:
                shapes_by_field[field_name].append(shape)

        field_map = {
            field_name: cls.aggregate_shapes(field_name, shapes, merge_objects)
            for field_name, shapes in shapes_by_field.items()
        }

        logger.debug(
            f"Aggregated {len(descriptors)} objects into schema '{name}' "
            f"with {len(field_map)} fields"
        )
        return Schema(name=name, map=field_map)

    @classmethod
    def aggregate_shapes(cls, name, shapes, merge_objects=False):
        """Return the distinct variants describing ``shapes``."""
        scalars = []
        string_lengths = []
        objects = []
        arrays = []

        for shape in shapes:
            if shape.is_scalar:
                variant = PrimitiveType(shape.field_type)
                if variant not in scalars:
                    scalars.append(variant)
            elif shape.is_string:
                string_lengths.append(shape.length)
            elif shape.is_object:
                objects.append(shape.descriptor)
            elif shape.is_array:
                arrays.append(shape)
            else:
                raise TypeError(f"Unhandled shape kind: {shape.kind}")

        variants = list(scalars)

        if string_lengths:
            variants.append(StringRangeType.from_lengths(string_lengths))

        if objects:
            variants.extend(cls._object_variants(name, objects, merge_objects))

        if arrays:
            variants.append(cls._array_variant(name, arrays, merge_objects))

        return variants

    @classmethod
    def _object_variants(cls, name, descriptors, merge_objects):
        if merge_objects:
            return [ObjectType(cls.aggregate(name, descriptors, True))]

        variants = []
        for cluster in FingerprintGrouper.group(descriptors):
            variant = ObjectType(cls.aggregate(name, cluster, False))
            if variant not in variants:
                variants.append(variant)
        return variants

    @classmethod
    def _array_variant(cls, name, arrays, merge_objects):
        elements = [item for array in arrays for item in array.items]
        return ArrayType(cls.aggregate_shapes(f"{name}[]", elements, merge_objects))


def aggregate(name, descriptors, merge_objects=False) -> Schema:
    return SchemaAggregator.aggregate(name, descriptors, merge_objects)
