from collections.abc import Sequence
from dataclasses import dataclass, field

from inkset.exceptions import InvalidBoundingBoxError


@dataclass(frozen=True)
class BoundingBox:
    x_min: float
    y_min: float
    x_max: float
    y_max: float
    width: float = field(init=False)
    height: float = field(init=False)

    def __post_init__(self):
        if self.x_min > self.x_max:
            raise InvalidBoundingBoxError(
                f"x_min value ({self.x_min}) should be less than x_max value ({self.x_max})"
            )
        if self.y_min > self.y_max:
            raise InvalidBoundingBoxError(
                f"y_min value ({self.y_min}) should be less than y_max value ({self.y_max})"
            )

        object.__setattr__(self, "width", self.x_max - self.x_min)
        object.__setattr__(self, "height", self.y_max - self.y_min)

    @classmethod
    def from_points(
        cls, xs: Sequence[float], ys: Sequence[float]
    ) -> "BoundingBox | None":
        """Smallest box around the given coordinates, or None when there are none."""
        if not xs or not ys:
            return None
        return cls(min(xs), min(ys), max(xs), max(ys))

    def merge(self, other: "BoundingBox") -> "BoundingBox":
        """Union of both boxes."""
        return BoundingBox(
            min(self.x_min, other.x_min),
            min(self.y_min, other.y_min),
            max(self.x_max, other.x_max),
            max(self.y_max, other.y_max),
        )

    def contains(self, x: float, y: float) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def intersects(self, other: "BoundingBox") -> bool:
        """True if a corner of either box lies inside the other one."""
        return any(self.contains(x, y) for x, y in other.corners()) or any(
            other.contains(x, y) for x, y in self.corners()
        )

    def get_intersection(self, other: "BoundingBox") -> "BoundingBox | None":
        """Overlapping rectangle, or None when the boxes do not intersect."""
        if not self.intersects(other):
            return None

        return BoundingBox(
            max(self.x_min, other.x_min),
            max(self.y_min, other.y_min),
            min(self.x_max, other.x_max),
            min(self.y_max, other.y_max),
        )

    def corners(self) -> list[tuple[float, float]]:
        return [
            (self.x_min, self.y_max),
            (self.x_min, self.y_min),
            (self.x_max, self.y_max),
            (self.x_max, self.y_min),
        ]

    def area(self) -> float:
        return self.width * self.height

    def to_dict(self) -> dict[str, float]:
        return {
            "x_min": self.x_min,
            "y_min": self.y_min,
            "x_max": self.x_max,
            "y_max": self.y_max,
            "width": self.width,
            "height": self.height,
        }
