"""
fsdfs Classifier: FSD-aware traversal.

This module extracts the Feature-Sliced Design structure of a tree:

    src/                    <- FSD root
        shared/             <- unsliced layer
            ui/             <- segment
        entities/           <- sliced layer
            user/           <- slice (contains a segment)
                model/      <- segment
                index.ts    <- public API, not a segment
        features/
            auth/           <- slice group (no segments of its own)
                login/      <- slice "auth/login"
                    ui/

Every function is pure and total. Absence of a match yields an empty result.
Map-building follows dictionary semantics: when two entries share a key, the
one seen last wins.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from fsdfs.classifier.public_api import is_index
from fsdfs.core.constants import CONVENTIONAL_SEGMENT_NAMES, LAYER_SEQUENCE, UNSLICED_LAYERS
from fsdfs.core.tree import FileSystemNode, Folder


@dataclass(frozen=True)
class SliceFolder(Folder):
    """A slice folder tagged with the name of the layer it belongs to."""

    layer_name: str = ""


@dataclass(frozen=True)
class SegmentEntry:
    """A segment along with its location in the FSD root.

    Attributes:
        segment: The segment file or folder
        segment_name: Segment key (basename without extension)
        slice_name: Owning slice name, None for unsliced layers
        layer_name: Owning layer name
    """

    segment: FileSystemNode
    segment_name: str
    slice_name: Optional[str]
    layer_name: str


def get_layers(fsd_root: Folder) -> Dict[str, Folder]:
    """
    Extract layers from an FSD root.

    Args:
        fsd_root: Folder whose direct children may be layers

    Returns:
        Mapping of layer name to folder, in child order
    """
    return {
        child.name: child
        for child in fsd_root.children
        if child.is_folder and child.name in LAYER_SEQUENCE
    }


def get_layer_order(layer_name: str) -> Optional[int]:
    """Position of a layer in the dependency order, or None for unknown names."""
    try:
        return LAYER_SEQUENCE.index(layer_name)
    except ValueError:
        return None


def is_sliced(layer_or_name: Union[Folder, str]) -> bool:
    """
    Determine if a layer is sliced.

    Only Shared and App are unsliced, the rest are sliced.

    Args:
        layer_or_name: Layer folder, layer name or layer path
    """
    if isinstance(layer_or_name, str):
        name = layer_or_name.rstrip("/").rsplit("/", 1)[-1]
    else:
        name = layer_or_name.name
    return name not in UNSLICED_LAYERS


def is_slice(folder: Folder, additional_segment_names: Iterable[str] = ()) -> bool:
    """
    Determine if a folder is a slice.

    Slices are folders that contain at least one segment. Provide additional
    segment names if some slices only contain unconventional segments.

    Args:
        folder: Folder to check
        additional_segment_names: Extra names that count as segments
    """
    segment_names = set(CONVENTIONAL_SEGMENT_NAMES).union(additional_segment_names)
    return any(child.stem in segment_names for child in folder.children)


def get_slices(
    sliced_layer: Folder, additional_segment_names: Iterable[str] = ()
) -> Dict[str, Folder]:
    """
    Extract slices from a sliced layer.

    A folder without segments is treated as a group: its subfolders are
    searched and the group names are joined into the slice name with `/`.
    Search stops at the first slice along each branch.

    Args:
        sliced_layer: Layer folder
        additional_segment_names: Extra names that count as segments

    Returns:
        Mapping of slice name (possibly containing slashes) to folder
    """
    extra = tuple(additional_segment_names)
    slices: Dict[str, Folder] = {}

    def traverse(folder: Folder, prefix: str = "") -> None:
        name = f"{prefix}/{folder.name}" if prefix else folder.name
        if is_slice(folder, extra):
            slices[name] = folder
            return

        for child in folder.children:
            if child.is_folder:
                traverse(child, name)

    for child in sliced_layer.children:
        if child.is_folder:
            traverse(child)

    return slices


def get_segments(slice_or_unsliced_layer: Folder) -> Dict[str, FileSystemNode]:
    """
    Extract segments from a slice or an unsliced layer.

    Index files are the public API and are not segments.

    Returns:
        Mapping of segment name to file or folder
    """
    return {
        child.stem: child for child in slice_or_unsliced_layer.children if not is_index(child)
    }


def get_all_slices(
    fsd_root: Folder, additional_segment_names: Iterable[str] = ()
) -> Dict[str, SliceFolder]:
    """
    Extract slices from all layers of an FSD root.

    Slice names are not namespaced by layer: when two layers hold a slice
    with the same name, the later layer wins.

    Returns:
        Mapping of slice name to slice folder tagged with its layer name
    """
    extra = tuple(additional_segment_names)
    slices: Dict[str, SliceFolder] = {}

    for layer_name, layer in get_layers(fsd_root).items():
        if not is_sliced(layer):
            continue

        for slice_name, folder in get_slices(layer, extra).items():
            slices[slice_name] = SliceFolder(
                path=folder.path, children=folder.children, layer_name=layer_name
            )

    return slices


def get_all_segments(
    fsd_root: Folder, additional_segment_names: Iterable[str] = ()
) -> List[SegmentEntry]:
    """
    Extract segments from all slices and layers of an FSD root.

    Returns:
        Flat list of segments with their name and location (layer, slice)
    """
    extra = tuple(additional_segment_names)
    segments: List[SegmentEntry] = []

    for layer_name, layer in get_layers(fsd_root).items():
        if is_sliced(layer):
            for slice_name, folder in get_slices(layer, extra).items():
                segments.extend(
                    SegmentEntry(segment, segment_name, slice_name, layer_name)
                    for segment_name, segment in get_segments(folder).items()
                )
        else:
            segments.extend(
                SegmentEntry(segment, segment_name, None, layer_name)
                for segment_name, segment in get_segments(layer).items()
            )

    return segments
