import copy
import json
from collections.abc import Iterable
from dataclasses import dataclass, field

from loguru import logger

from inkset.exceptions import DegenerateSketchError
from inkset.metadata import Meta, check_meta, copy_meta
from inkset.models.bounding_box import BoundingBox
from inkset.models.stroke import (
    EMPTY_FLOAT_MAX,
    EMPTY_FLOAT_MIN,
    EMPTY_TIMESTAMP_MAX,
    EMPTY_TIMESTAMP_MIN,
    STROKE_TYPE,
    Stroke,
)


@dataclass
class Sketch:
    strokes: list[Stroke] = field(default_factory=list)
    meta: Meta = field(default_factory=dict)
    type: str = STROKE_TYPE

    def __post_init__(self):
        self.strokes = list(self.strokes)
        self.meta = copy_meta(check_meta(self.meta if self.meta is not None else {}))

    def __len__(self) -> int:
        return len(self.strokes)

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def add_stroke(self, stroke: Stroke) -> None:
        self.strokes.append(stroke)

    def x_min(self) -> float:
        return min((s.x_min() for s in self.strokes), default=EMPTY_FLOAT_MIN)

    def x_max(self) -> float:
        return max((s.x_max() for s in self.strokes), default=EMPTY_FLOAT_MAX)

    def y_min(self) -> float:
        return min((s.y_min() for s in self.strokes), default=EMPTY_FLOAT_MIN)

    def y_max(self) -> float:
        return max((s.y_max() for s in self.strokes), default=EMPTY_FLOAT_MAX)

    def timestamp_min(self) -> int:
        return min((s.timestamp_min() for s in self.strokes), default=EMPTY_TIMESTAMP_MIN)

    def timestamp_max(self) -> int:
        return max((s.timestamp_max() for s in self.strokes), default=EMPTY_TIMESTAMP_MAX)

    def pressure_min(self) -> float:
        return min((s.pressure_min() for s in self.strokes), default=EMPTY_FLOAT_MIN)

    def pressure_max(self) -> float:
        return max((s.pressure_max() for s in self.strokes), default=EMPTY_FLOAT_MAX)

    def bounding_box(self) -> BoundingBox | None:
        """Box around every stroke that has points, or None."""
        box = None
        for stroke in self.strokes:
            stroke_box = stroke.bounding_box()
            if stroke_box is None:
                continue
            box = stroke_box if box is None else box.merge(stroke_box)
        return box

    def offset(self, x_offset: float | None = None, y_offset: float | None = None) -> None:
        for stroke in self.strokes:
            stroke.offset(x_offset, y_offset)

    def scale(self, x_factor: float | None = None, y_factor: float | None = None) -> None:
        for stroke in self.strokes:
            stroke.scale(x_factor, y_factor)

    def normalize(self, new_size: float, keep_aspect_ratio: bool) -> None:
        """Move the sketch to the origin and scale it to fit new_size.

        The sketch is first translated so that its smallest x and y become 0.
        Scale factors are then taken from the translated maxima. With
        keep_aspect_ratio, the factor of the larger axis is used for both
        axes; otherwise each axis is scaled on its own. Both factors are
        checked before any coordinate moves, so a failed call leaves the
        sketch as it was.

        Args:
            new_size: target size of the largest coordinate on each scaled axis
            keep_aspect_ratio: scale both axes by the same factor

        Raises:
            DegenerateSketchError: a scaled axis has zero extent
        """
        if not self.strokes:
            return

        x_min = self.x_min()
        y_min = self.y_min()
        # Same values the maxima take once the sketch is moved to the origin.
        x_max = self.x_max() - x_min
        y_max = self.y_max() - y_min

        if keep_aspect_ratio:
            axis, extent = ("x", x_max) if x_max >= y_max else ("y", y_max)
            factor = self._factor(new_size, axis, extent)
            x_factor = y_factor = factor
        else:
            x_factor = self._factor(new_size, "x", x_max)
            y_factor = self._factor(new_size, "y", y_max)

        logger.debug(f"Normalizing sketch to {new_size}: x_factor={x_factor}, y_factor={y_factor}")
        self.offset(-x_min, -y_min)
        self.scale(x_factor, y_factor)

    @staticmethod
    def _factor(new_size: float, axis: str, extent: float) -> float:
        if extent == 0:
            raise DegenerateSketchError(f"Cannot normalize sketch: {axis} extent is zero")
        return new_size / extent

    def remove_duplicate_dots(self) -> None:
        for stroke in self.strokes:
            stroke.remove_duplicate_dots()

    def remove_single_dot_strokes(self) -> None:
        """Drop strokes with one point or fewer, keeping order."""
        before = len(self.strokes)
        self.strokes[:] = [s for s in self.strokes if len(s) > 1]
        logger.debug(f"Removed {before - len(self.strokes)} single dot strokes")

    def copy(self) -> "Sketch":
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "meta": copy_meta(self.meta),
            "strokes": [s.to_dict() for s in self.strokes],
        }
