import copy
from typing import Any, Union

from inkset.exceptions import MetadataError

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]
Meta = dict[str, JsonValue]


def check_json_value(value: Any, path: str = "meta") -> None:
    """Check that a value is made only of JSON types.

    Args:
        value: value to check, any nesting depth
        path: location used in the error message

    Raises:
        MetadataError: on the first value that is not JSON
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return

    if isinstance(value, list):
        for i, item in enumerate(value):
            check_json_value(item, f"{path}[{i}]")
        return

    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise MetadataError(f"{path}: object key {key!r} is not a string")
            check_json_value(item, f"{path}.{key}")
        return

    raise MetadataError(f"{path}: {type(value).__name__} is not a JSON value")


def check_meta(meta: Any) -> Meta:
    """Check that metadata is a JSON object and return it unchanged."""
    if not isinstance(meta, dict):
        raise MetadataError(f"meta must be a dict, got {type(meta).__name__}")
    check_json_value(meta)
    return meta


def copy_meta(meta: Meta) -> Meta:
    return copy.deepcopy(meta)


def to_plain(value: Any) -> JsonValue:
    """Rebuild a decoded JSON value with plain dict and list containers."""
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value
