from inkset.serialization.compressed import (
    compress_sketch,
    compress_stroke,
    decompress_sketch,
    decompress_stroke,
)
from inkset.serialization.decoder import sketch_from_value, stroke_from_value
from inkset.serialization.json_serializer import (
    dump_sketch,
    dump_stroke,
    dumps_sketch,
    dumps_stroke,
    load_sketch,
    load_sketches,
    load_stroke,
    load_strokes,
    loads_sketch,
    loads_sketches,
    loads_stroke,
    loads_strokes,
    sketch_to_dict,
    stroke_to_dict,
)

__all__ = [
    "compress_sketch",
    "compress_stroke",
    "decompress_sketch",
    "decompress_stroke",
    "dump_sketch",
    "dump_stroke",
    "dumps_sketch",
    "dumps_stroke",
    "load_sketch",
    "load_sketches",
    "load_stroke",
    "load_strokes",
    "loads_sketch",
    "loads_sketches",
    "loads_stroke",
    "loads_strokes",
    "sketch_from_value",
    "sketch_to_dict",
    "stroke_from_value",
    "stroke_to_dict",
]
