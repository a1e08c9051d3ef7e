"""inkset - digital ink strokes and sketches with exact JSON round-tripping."""

from loguru import logger

from inkset.exceptions import (
    BuilderConsumedError,
    DecodeError,
    DegenerateSketchError,
    InksetError,
    InvalidBoundingBoxError,
    InvalidTimestampError,
    MetadataError,
)
from inkset.models import BoundingBox, Point, Sketch, Stroke, StrokeBuilder
from inkset.serialization import (
    dumps_sketch,
    dumps_stroke,
    loads_sketch,
    loads_sketches,
    loads_stroke,
    loads_strokes,
)

logger.disable("inkset")

__version__ = "0.1.0"
__all__ = [
    "BoundingBox",
    "BuilderConsumedError",
    "DecodeError",
    "DegenerateSketchError",
    "InksetError",
    "InvalidBoundingBoxError",
    "InvalidTimestampError",
    "MetadataError",
    "Point",
    "Sketch",
    "Stroke",
    "StrokeBuilder",
    "dumps_sketch",
    "dumps_stroke",
    "loads_sketch",
    "loads_sketches",
    "loads_stroke",
    "loads_strokes",
]
