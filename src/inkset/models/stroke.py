import copy
import json
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from inkset.exceptions import BuilderConsumedError, InvalidTimestampError
from inkset.metadata import Meta, check_meta, copy_meta
from inkset.models.bounding_box import BoundingBox

STROKE_TYPE = "stroke"

# Timestamps are unsigned 64-bit integers.
TIMESTAMP_LIMIT = 2**64 - 1

# Values returned by the extrema accessors of an empty channel.
EMPTY_FLOAT_MIN = sys.float_info.max
EMPTY_FLOAT_MAX = -sys.float_info.max
EMPTY_TIMESTAMP_MIN = TIMESTAMP_LIMIT
EMPTY_TIMESTAMP_MAX = 0


@dataclass
class Point:
    x: float
    y: float
    timestamp: int
    pressure: float = 0.0

    @classmethod
    def from_list(cls, data: list) -> "Point":
        pressure = float(data[3]) if len(data) > 3 else 0.0
        return cls(
            x=float(data[0]), y=float(data[1]), timestamp=int(data[2]), pressure=pressure
        )


@dataclass
class Stroke:
    x: list[float]
    y: list[float]
    timestamp: list[int]
    pressure: list[float]
    meta: Meta = field(default_factory=dict)
    type: str = STROKE_TYPE

    def __post_init__(self):
        self.x = [float(v) for v in self.x]
        self.y = [float(v) for v in self.y]
        self.timestamp = [_timestamp(v, i) for i, v in enumerate(self.timestamp)]
        self.pressure = [float(v) for v in self.pressure]
        self.meta = copy_meta(check_meta(self.meta if self.meta is not None else {}))

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Stroke":
        builder = StrokeBuilder()
        for point in points:
            builder.add_point(point.x, point.y, point.timestamp, point.pressure)
        return builder.build()

    def __len__(self) -> int:
        return len(self.x)

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def points(self) -> Iterator[Point]:
        """Iterate samples as Points, stopping at the shortest channel."""
        for x, y, ts, p in zip(self.x, self.y, self.timestamp, self.pressure):
            yield Point(x=x, y=y, timestamp=ts, pressure=p)

    def x_min(self) -> float:
        return min(self.x, default=EMPTY_FLOAT_MIN)

    def x_max(self) -> float:
        return max(self.x, default=EMPTY_FLOAT_MAX)

    def y_min(self) -> float:
        return min(self.y, default=EMPTY_FLOAT_MIN)

    def y_max(self) -> float:
        return max(self.y, default=EMPTY_FLOAT_MAX)

    def timestamp_min(self) -> int:
        return min(self.timestamp, default=EMPTY_TIMESTAMP_MIN)

    def timestamp_max(self) -> int:
        return max(self.timestamp, default=EMPTY_TIMESTAMP_MAX)

    def pressure_min(self) -> float:
        return min(self.pressure, default=EMPTY_FLOAT_MIN)

    def pressure_max(self) -> float:
        return max(self.pressure, default=EMPTY_FLOAT_MAX)

    def bounding_box(self) -> BoundingBox | None:
        return BoundingBox.from_points(self.x, self.y)

    def offset(self, x_offset: float | None = None, y_offset: float | None = None) -> None:
        """Shift x/y coordinates in place."""
        if x_offset:
            self.x[:] = [v + x_offset for v in self.x]
        if y_offset:
            self.y[:] = [v + y_offset for v in self.y]

    def scale(self, x_factor: float | None = None, y_factor: float | None = None) -> None:
        """Multiply x/y coordinates in place."""
        if x_factor is not None and x_factor != 1:
            self.x[:] = [v * x_factor for v in self.x]
        if y_factor is not None and y_factor != 1:
            self.y[:] = [v * y_factor for v in self.y]

    def remove_duplicate_dots(self) -> None:
        """Drop points that repeat the (x, y) of the point before them.

        Relative order of the remaining points is kept. Timestamp and
        pressure are not compared.
        """
        keep = [0] if self.x else []
        for i in range(1, len(self.x)):
            if i < len(self.y) and self.x[i] == self.x[i - 1] and self.y[i] == self.y[i - 1]:
                continue
            keep.append(i)

        if len(keep) == len(self.x):
            return

        self.x[:] = _take(self.x, keep)
        self.y[:] = _take(self.y, keep)
        self.timestamp[:] = _take(self.timestamp, keep)
        self.pressure[:] = _take(self.pressure, keep)

    def copy(self) -> "Stroke":
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "meta": copy_meta(self.meta),
            "x": list(self.x),
            "y": list(self.y),
            "timestamp": list(self.timestamp),
            "pressure": list(self.pressure),
        }


def _timestamp(value, index: int) -> int:
    """Integral value in the u64 range; integral floats such as 3.0 are accepted."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidTimestampError(
            f"timestamp[{index}]: expected an integer, got {type(value).__name__}"
        )
    if isinstance(value, float) and not value.is_integer():
        raise InvalidTimestampError(f"timestamp[{index}]: {value} is not an integer")

    value = int(value)
    if not 0 <= value <= TIMESTAMP_LIMIT:
        raise InvalidTimestampError(f"timestamp[{index}]: {value} is out of range for u64")
    return value


def _take(values: list, indices: list[int]) -> list:
    return [values[i] for i in indices if i < len(values)]


class StrokeBuilder:
    """Collects points one at a time and turns them into a Stroke."""

    def __init__(self):
        self.x: list[float] = []
        self.y: list[float] = []
        self.timestamp: list[int] = []
        self.pressure: list[float] = []
        self._built = False

    def __len__(self) -> int:
        return len(self.x)

    def add_point(self, x: float, y: float, timestamp: int, pressure: float) -> None:
        self._check_not_built()
        self.x.append(x)
        self.y.append(y)
        self.timestamp.append(timestamp)
        self.pressure.append(pressure)

    def build(self) -> Stroke:
        self._check_not_built()
        self._built = True
        return Stroke(x=self.x, y=self.y, timestamp=self.timestamp, pressure=self.pressure)

    def _check_not_built(self) -> None:
        if self._built:
            raise BuilderConsumedError("StrokeBuilder has already been built")
