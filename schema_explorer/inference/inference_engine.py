import logging

from .schema_core import InvalidInputError, Schema
from .shapes import ObjectDescriptor
from .aggregator import SchemaAggregator
from .serializer import SchemaSerializer
from .utils import JSONLoader

logger = logging.getLogger(__name__)

ROOT_SCHEMA_NAME = "root"


class SchemaInferenceEngine:

    def __init__(self, merge_objects=False):
        self.merge_objects = merge_objects

        logger.info(
            f"Initialized schema inference engine (merge_objects={merge_objects})"
        )

    def infer(self, json_value) -> Schema:
        descriptors = self.collect_descriptors(json_value)
        schema = SchemaAggregator.aggregate(
            ROOT_SCHEMA_NAME, descriptors, self.merge_objects
        )

        logger.info(
            f"Inferred schema with {len(schema)} fields from {len(descriptors)} objects"
        )
        return schema

    def analyze_text(self, text) -> Schema:
        return self.infer(JSONLoader.load_text(text))

    def analyze_file(self, filepath) -> Schema:
        return self.infer(JSONLoader.load_file(filepath))

    def to_document(self, schema) -> dict:
        return SchemaSerializer.serialize(schema)

    @staticmethod
    def collect_descriptors(json_value):
        if isinstance(json_value, dict):
            return [ObjectDescriptor.from_json(json_value)]

        if isinstance(json_value, list):
            descriptors = [
                ObjectDescriptor.from_json(element)
                for element in json_value
                if isinstance(element, dict)
            ]
            dropped = len(json_value) - len(descriptors)
            if dropped:
                logger.debug(f"Dropped {dropped} non-object elements from the sample")
            return descriptors

        raise InvalidInputError(
            f"Expected a JSON object or array at the top level, "
            f"got {type(json_value).__name__}"
        )


def infer(json_value, merge_objects=False) -> Schema:
    return SchemaInferenceEngine(merge_objects).infer(json_value)
