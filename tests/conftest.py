import pytest

from inkset.models import Sketch, Stroke


@pytest.fixture
def stroke() -> Stroke:
    return Stroke(
        x=[10.0, 20.0, 30.0, 40.0, 50.0],
        y=[1.0, 2.0, 3.0, 4.0, 5.0],
        timestamp=[1, 2, 3, 4, 5],
        pressure=[1.0, 2.0, 3.0, 4.0, 5.0],
    )


@pytest.fixture
def uneven_stroke() -> Stroke:
    """Channels of different lengths, accepted as-is."""
    return Stroke(
        x=[1.0, 2.0, 3.0, 4.0, 5.0, 32.0],
        y=[1.0, 2.0, 3.0, 4.0, 5.0],
        timestamp=[1, 2, 3, 4],
        pressure=[1.0, 2.0, 3.0, 4.0],
    )


@pytest.fixture
def meta_stroke(uneven_stroke) -> Stroke:
    stroke = uneven_stroke.copy()
    stroke.meta["someVal"] = 7.1
    stroke.meta["someArr"] = [1, 2, 3, 4]
    stroke.meta["someVec"] = [1.0, 2.0, 3.0, 4.0, 5.0, 32.0]
    stroke.meta["someObj"] = uneven_stroke.to_dict()
    stroke.meta["nested"] = {"pen": {"id": "a1", "tilt": [0.5, None, True]}}
    return stroke


@pytest.fixture
def two_stroke_sketch() -> Sketch:
    """x-range [1, 2], y-range [0.3, 0.9]."""
    s1 = Stroke(x=[1.0, 2.0], y=[0.9, 0.3], timestamp=[], pressure=[])
    s2 = Stroke(x=[1.2, 1.5], y=[0.6, 0.7], timestamp=[], pressure=[])
    return Sketch([s1, s2])
