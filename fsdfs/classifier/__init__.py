"""
fsdfs Classifier - Feature-Sliced Design structure of a tree.

Public API:
-----------

Traversal:
    get_layers: Layers of an FSD root
    get_slices: Slices of a sliced layer
    get_segments: Segments of a slice or unsliced layer
    get_all_slices: Slices of every layer, tagged with the layer name
    get_all_segments: Flat list of every segment with its location

Predicates:
    is_sliced, is_slice, is_index, is_cross_import_public_api

Public API files:
    get_indexes: Index files of a slice, segment or layer

Usage Example:
--------------

    from fsdfs.classifier import get_layers, get_slices

    layers = get_layers(root)
    slices = get_slices(layers["features"])
"""

from fsdfs.classifier.public_api import get_indexes, is_cross_import_public_api, is_index
from fsdfs.classifier.traverse import (
    SegmentEntry,
    SliceFolder,
    get_all_segments,
    get_all_slices,
    get_layer_order,
    get_layers,
    get_segments,
    get_slices,
    is_slice,
    is_sliced,
)

__all__ = [
    # Data structures
    "SegmentEntry",
    "SliceFolder",
    # Traversal
    "get_layers",
    "get_layer_order",
    "get_slices",
    "get_segments",
    "get_all_slices",
    "get_all_segments",
    # Predicates
    "is_sliced",
    "is_slice",
    "is_index",
    "is_cross_import_public_api",
    # Public API files
    "get_indexes",
]
