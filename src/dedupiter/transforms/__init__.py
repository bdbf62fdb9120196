from .dedupe import DedupeByKeyTransform, DedupeByTransform, DedupeTransform
from .interfaces import ObservedStreamTransformBase, StreamTransformBase

__all__ = [
    "DedupeTransform",
    "DedupeByTransform",
    "DedupeByKeyTransform",
    "ObservedStreamTransformBase",
    "StreamTransformBase",
]
