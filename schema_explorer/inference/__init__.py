"""
JSON Schema Inference Engine

Discovers the structure of a sample of JSON documents: for every field seen
anywhere in the sample it reports the distinct value shapes that occur.

This package provides:
- Value classification of raw JSON into per-instance shapes
- Per-field aggregation of shapes into deduplicated type variants
- String length ranges per field
- Nested object schemas, either merged or split by key set
- Element type variants for arrays, recursively
- Support for compressed files (.gz, .bz2, .xz, .lzma)

Basic usage:
    from schema_explorer.inference.inference_engine import SchemaInferenceEngine

    engine = SchemaInferenceEngine(merge_objects=True)
    schema = engine.infer([{"name": "Ada", "age": 36}])

    Or from file:
    schema = engine.analyze_file("path/to/sample.json")

    for field_name in schema.field_names():
        print(f"  {field_name}: {schema.types(field_name)}")
"""
