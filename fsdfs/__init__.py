"""
fsdfs - Feature-Sliced Design utilities for in-memory file trees.

Public API:
-----------

Tree model:
    File, Folder: Immutable tree nodes
    node_from_dict: Build a tree from `{path, type, children?}` dictionaries
    tree_file_exists: Existence probe backed by a tree

Classifier:
    get_layers, get_slices, get_segments, get_all_slices, get_all_segments
    get_indexes, is_sliced, is_slice, is_index, is_cross_import_public_api

Resolver:
    resolve_import: Resolve an import specifier with baseUrl/paths mapping
    ImportResolver, CompilerOptions

Coordinator:
    FsdProject: Classify a root and resolve imports within it
    render_structure: Text report of a classified root

Usage Example:
--------------

    from fsdfs import node_from_dict, get_all_slices, resolve_import

    root = node_from_dict(walker_output)
    slices = get_all_slices(root)
    target = resolve_import("~/shared/ui", "src/pages/home/ui/HomePage.tsx",
                            {"baseUrl": ".", "paths": {"~/*": ["./src/*"]}},
                            tree_file_exists(root))
"""

from fsdfs.classifier import (
    SegmentEntry,
    SliceFolder,
    get_all_segments,
    get_all_slices,
    get_indexes,
    get_layer_order,
    get_layers,
    get_segments,
    get_slices,
    is_cross_import_public_api,
    is_index,
    is_slice,
    is_sliced,
)
from fsdfs.core.constants import (
    CONVENTIONAL_SEGMENT_NAMES,
    FSDFS_VERSION,
    LAYER_SEQUENCE,
    SOURCE_EXTENSIONS,
    UNSLICED_LAYERS,
)
from fsdfs.core.tree import File, FileSystemNode, Folder, node_from_dict, tree_file_exists, walk
from fsdfs.core.validators import MalformedTreeError, ValidationError, validate_tree
from fsdfs.project import FsdProject, NodeLocation
from fsdfs.report import ReportError, render_structure
from fsdfs.resolution import CompilerOptions, ImportResolver, resolve_import

__all__ = [
    # Tree model
    "File",
    "Folder",
    "FileSystemNode",
    "node_from_dict",
    "tree_file_exists",
    "walk",
    # Conventions
    "LAYER_SEQUENCE",
    "UNSLICED_LAYERS",
    "CONVENTIONAL_SEGMENT_NAMES",
    "SOURCE_EXTENSIONS",
    # Classifier
    "SegmentEntry",
    "SliceFolder",
    "get_layers",
    "get_layer_order",
    "get_slices",
    "get_segments",
    "get_all_slices",
    "get_all_segments",
    "get_indexes",
    "is_sliced",
    "is_slice",
    "is_index",
    "is_cross_import_public_api",
    # Resolver
    "CompilerOptions",
    "ImportResolver",
    "resolve_import",
    # Coordinator
    "FsdProject",
    "NodeLocation",
    "render_structure",
    # Errors
    "ValidationError",
    "MalformedTreeError",
    "ReportError",
]

__version__ = FSDFS_VERSION
