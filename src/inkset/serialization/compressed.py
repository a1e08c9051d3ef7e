# src/inkset/serialization/compressed.py
import json
from typing import Any

import lzstring

from inkset.exceptions import DecodeError
from inkset.models import Sketch, Stroke
from inkset.serialization.decoder import JsonObject, sketch_from_value, stroke_from_value


def compress_stroke(stroke: Stroke) -> str:
    """Pack a stroke into an LZString base64 string."""
    return _compress(stroke.to_dict())


def compress_sketch(sketch: Sketch) -> str:
    return _compress(sketch.to_dict())


def decompress_stroke(data: str) -> Stroke:
    return stroke_from_value(_decompress(data))


def decompress_sketch(data: str) -> Sketch:
    return sketch_from_value(_decompress(data))


def _compress(data: dict[str, Any]) -> str:
    """Compact canonical JSON packed with LZString."""
    json_str = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    lz = lzstring.LZString()
    return lz.compressToBase64(json_str)


def _decompress(data: str) -> Any:
    lz = lzstring.LZString()
    try:
        json_str = lz.decompressFromBase64(data)
    except (KeyError, IndexError, TypeError) as e:
        raise DecodeError(f"Failed to decompress data: {e!r}") from e

    if not json_str:
        raise DecodeError("Failed to decompress data: empty result")

    try:
        return json.loads(json_str, object_pairs_hook=JsonObject)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Failed to parse decompressed JSON: {e}") from e
