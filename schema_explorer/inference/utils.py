import gzip
import bz2
import json
import lzma
import zlib
from pathlib import Path

from .schema_core import IOFailureError, ParseFailureError

import logging

logger = logging.getLogger(__name__)


class CompressionHandler:

    COMPRESSION_MAP = {".gz": "gzip", ".bz2": "bz2", ".xz": "xz", ".lzma": "lzma"}

    @classmethod
    def detect_compression(cls, filepath):
        suffix = filepath.suffix.lower()
        return cls.COMPRESSION_MAP.get(suffix)

    @classmethod
    def read_text(cls, filepath):
        filepath = Path(filepath)
        compression = cls.detect_compression(filepath)

        if compression == "gzip":
            with gzip.open(filepath, "rt", encoding="utf-8") as f:
                return f.read()
        elif compression == "bz2":
            with bz2.open(filepath, "rt", encoding="utf-8") as f:
                return f.read()
        elif compression in ("xz", "lzma"):
            with lzma.open(filepath, "rt", encoding="utf-8") as f:
                return f.read()
        else:
            with open(filepath, "r", encoding="utf-8") as f:
                return f.read()


class JSONLoader:

    @staticmethod
    def load_text(text):
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON: {e}")
            raise ParseFailureError(f"Invalid JSON: {e}") from e

    @staticmethod
    def load_file(filepath):
        filepath = Path(filepath)

        if not filepath.exists():
            logger.error(f"File not found: {filepath}")
            raise IOFailureError(f"File not found: {filepath}")

        if not filepath.is_file():
            logger.error(f"Path is not a file: {filepath}")
            raise IOFailureError(f"Path is not a file: {filepath}")

        try:
            text = CompressionHandler.read_text(filepath)
        except (OSError, EOFError, UnicodeDecodeError, lzma.LZMAError, zlib.error) as e:
            logger.error(f"Error reading file {filepath}: {e}")
            raise IOFailureError(f"Unable to read {filepath}: {e}") from e

        logger.info(f"Read {len(text)} characters from {filepath}")
        return JSONLoader.load_text(text)
