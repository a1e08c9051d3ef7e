"""Decoding of parsed JSON values into strokes and sketches.

Both entities are accepted in two shapes:

- a named object, e.g. ``{"type": ..., "meta": ..., "x": [...], ...}``
- a positional array in field order, e.g. ``[type, meta, x, y, timestamp, pressure]``

Whatever the shape, the fields end up in the same constructor.
"""

from typing import Any

from inkset.exceptions import DecodeError, MetadataError
from inkset.metadata import Meta, check_meta, to_plain
from inkset.models import Sketch, Stroke
from inkset.models.stroke import TIMESTAMP_LIMIT

STROKE_FIELDS = ("type", "meta", "x", "y", "timestamp", "pressure")
SKETCH_FIELDS = ("type", "meta", "strokes")


class JsonObject(dict):
    """JSON object that keeps every key/value pair in input order.

    Used as ``object_pairs_hook`` so that repeated keys, which a plain dict
    silently merges, can still be reported.
    """

    def __init__(self, pairs: list[tuple[str, Any]]):
        super().__init__(pairs)
        self.pairs = pairs


def stroke_from_value(value: Any) -> Stroke:
    """Build a Stroke from a parsed JSON array or object."""
    fields = _extract_fields(value, STROKE_FIELDS, "stroke")

    return Stroke(
        x=_float_list(fields["x"], "x"),
        y=_float_list(fields["y"], "y"),
        timestamp=_timestamp_list(fields["timestamp"]),
        pressure=_float_list(fields["pressure"], "pressure"),
        meta=_meta(fields["meta"]),
        type=_type(fields["type"]),
    )


def sketch_from_value(value: Any) -> Sketch:
    """Build a Sketch from a parsed JSON array or object."""
    fields = _extract_fields(value, SKETCH_FIELDS, "sketch")

    raw_strokes = fields["strokes"]
    if not isinstance(raw_strokes, list):
        raise DecodeError(
            f"invalid type for field `strokes`: expected array, got {_json_type(raw_strokes)}",
            field="strokes",
        )

    strokes = []
    for i, raw in enumerate(raw_strokes):
        try:
            strokes.append(stroke_from_value(raw))
        except DecodeError as e:
            raise DecodeError(f"strokes[{i}]: {e}", field=e.field, index=i) from e

    return Sketch(strokes=strokes, meta=_meta(fields["meta"]), type=_type(fields["type"]))


def _extract_fields(value: Any, names: tuple[str, ...], entity: str) -> dict[str, Any]:
    if isinstance(value, list):
        return _positional_fields(value, names, entity)
    if isinstance(value, dict):
        return _named_fields(value, names, entity)
    raise DecodeError(
        f"invalid type: expected {entity} as array or object, got {_json_type(value)}"
    )


def _positional_fields(value: list, names: tuple[str, ...], entity: str) -> dict[str, Any]:
    if len(value) < len(names):
        missing = len(value)
        raise DecodeError(
            f"invalid length {len(value)}, expected {len(names)} elements for {entity}: "
            f"missing index {missing} (`{names[missing]}`)",
            field=names[missing],
            index=missing,
        )
    if len(value) > len(names):
        raise DecodeError(
            f"invalid length {len(value)}, expected {len(names)} elements for {entity}",
            index=len(names),
        )
    return dict(zip(names, value))


def _named_fields(value: dict, names: tuple[str, ...], entity: str) -> dict[str, Any]:
    pairs = value.pairs if isinstance(value, JsonObject) else list(value.items())

    found: dict[str, Any] = {}
    for key, item in pairs:
        if key not in names:
            expected = ", ".join(f"`{n}`" for n in names)
            raise DecodeError(
                f"unknown field `{key}` in {entity}, expected one of {expected}", field=key
            )
        if key in found:
            raise DecodeError(f"duplicate field `{key}` in {entity}", field=key)
        found[key] = item

    for name in names:
        if name not in found:
            raise DecodeError(f"missing field `{name}` in {entity}", field=name)

    return found


def _type(value: Any) -> str:
    if not isinstance(value, str):
        raise DecodeError(
            f"invalid type for field `type`: expected string, got {_json_type(value)}",
            field="type",
        )
    return value


def _meta(value: Any) -> Meta:
    if not isinstance(value, dict):
        raise DecodeError(
            f"invalid type for field `meta`: expected object, got {_json_type(value)}",
            field="meta",
        )
    try:
        return check_meta(to_plain(value))
    except MetadataError as e:
        raise DecodeError(f"invalid value for field `meta`: {e}", field="meta") from e


def _float_list(value: Any, name: str) -> list[float]:
    if not isinstance(value, list):
        raise DecodeError(
            f"invalid type for field `{name}`: expected array, got {_json_type(value)}",
            field=name,
        )

    result = []
    for i, item in enumerate(value):
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise DecodeError(
                f"invalid value for `{name}[{i}]`: expected number, got {_json_type(item)}",
                field=name,
                index=i,
            )
        try:
            result.append(float(item))
        except OverflowError as e:
            raise DecodeError(
                f"invalid value for `{name}[{i}]`: {item} does not fit a float",
                field=name,
                index=i,
            ) from e
    return result


def _timestamp_list(value: Any) -> list[int]:
    if not isinstance(value, list):
        raise DecodeError(
            f"invalid type for field `timestamp`: expected array, got {_json_type(value)}",
            field="timestamp",
        )

    for i, item in enumerate(value):
        if isinstance(item, bool) or not isinstance(item, int):
            raise DecodeError(
                f"invalid value for `timestamp[{i}]`: expected unsigned integer, "
                f"got {_json_type(item)}",
                field="timestamp",
                index=i,
            )
        if not 0 <= item <= TIMESTAMP_LIMIT:
            raise DecodeError(
                f"invalid value for `timestamp[{i}]`: {item} is out of range for u64",
                field="timestamp",
                index=i,
            )
    return list(value)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
