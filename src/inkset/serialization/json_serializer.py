import json
from pathlib import Path
from typing import Any

from loguru import logger

from inkset.exceptions import DecodeError
from inkset.models import Sketch, Stroke
from inkset.serialization.decoder import JsonObject, sketch_from_value, stroke_from_value

JSON_INDENT = 2


def stroke_to_dict(stroke: Stroke) -> dict[str, Any]:
    """Canonical JSON object of a stroke, ready to embed in metadata."""
    return stroke.to_dict()


def sketch_to_dict(sketch: Sketch) -> dict[str, Any]:
    return sketch.to_dict()


def dumps_stroke(stroke: Stroke) -> str:
    return _dumps(stroke.to_dict())


def dumps_sketch(sketch: Sketch) -> str:
    return _dumps(sketch.to_dict())


def loads_stroke(text: str | bytes) -> Stroke:
    """Decode a stroke given as a JSON object or positional array."""
    return stroke_from_value(_parse(text))


def loads_strokes(text: str | bytes) -> list[Stroke]:
    """Decode a JSON array of strokes. The first bad element fails the batch."""
    return _decode_batch(_parse(text), stroke_from_value, "strokes")


def loads_sketch(text: str | bytes) -> Sketch:
    return sketch_from_value(_parse(text))


def loads_sketches(text: str | bytes) -> list[Sketch]:
    return _decode_batch(_parse(text), sketch_from_value, "sketches")


def dump_stroke(stroke: Stroke, path: Path | str) -> None:
    _write(dumps_stroke(stroke), path)


def dump_sketch(sketch: Sketch, path: Path | str) -> None:
    _write(dumps_sketch(sketch), path)


def load_stroke(path: Path | str) -> Stroke:
    return loads_stroke(_read(path))


def load_strokes(path: Path | str) -> list[Stroke]:
    return loads_strokes(_read(path))


def load_sketch(path: Path | str) -> Sketch:
    return loads_sketch(_read(path))


def load_sketches(path: Path | str) -> list[Sketch]:
    return loads_sketches(_read(path))


def _dumps(data: dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=False, indent=JSON_INDENT)


def _parse(text: str | bytes) -> Any:
    try:
        return json.loads(text, object_pairs_hook=JsonObject)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Failed to parse JSON: {e}") from e


def _decode_batch(value: Any, decode, name: str) -> list:
    if not isinstance(value, list):
        raise DecodeError(f"expected a JSON array of {name}")

    result = []
    for i, item in enumerate(value):
        try:
            result.append(decode(item))
        except DecodeError as e:
            raise DecodeError(f"element {i}: {e}", field=e.field, index=i) from e
    return result


def _write(content: str, path: Path | str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug(f"Wrote {len(content)} characters to {path}")


def _read(path: Path | str) -> str:
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    logger.debug(f"Read {len(content)} characters from {path}")
    return content
