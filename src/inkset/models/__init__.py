from inkset.models.bounding_box import BoundingBox
from inkset.models.sketch import Sketch
from inkset.models.stroke import Point, Stroke, StrokeBuilder

__all__ = ["BoundingBox", "Point", "Sketch", "Stroke", "StrokeBuilder"]
