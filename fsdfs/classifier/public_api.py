"""
fsdfs Classifier: Public API detection.

Slices, segments and layers expose their public API through index files.
A folder may have several platform-specific indexes side by side:

    ui/
        index.ts
        index.client.ts
        index.server.ts

Slices may also expose members to one specific sibling slice through a
cross-import public API, `<layer>/<inSlice>/@x/<forSlice>.ts`.
"""

import posixpath
from typing import List, Union

from fsdfs.core.constants import CROSS_IMPORT_FOLDER, INDEX_NAME
from fsdfs.core.tree import File, Folder, normalize_path


def is_index(file_or_folder: Union[File, Folder]) -> bool:
    """Determine if a node is an index file.

    The part of the basename before the first dot must be `index`.
    Folders are never indexes.
    """
    if not file_or_folder.is_file:
        return False

    return file_or_folder.stem.split(".")[0] == INDEX_NAME


def get_indexes(file_or_folder: Union[File, Folder]) -> List[File]:
    """
    Get the index (public API) of a slice or segment.

    A file is its own index. A folder yields its direct-child index files in
    child order.
    """
    if file_or_folder.is_file:
        return [file_or_folder]

    return [child for child in file_or_folder.children if is_index(child)]


def is_cross_import_public_api(
    file: File, *, in_slice: str, for_slice: str, layer_path: str
) -> bool:
    """
    Check if a file is a cross-import public API of `in_slice` for `for_slice`.

    Both the file's directory and `layer_path` are normalized before
    comparison, so `./src/entities` and `src/entities` are equivalent.

    Args:
        file: File to check
        in_slice: Slice that exposes the API
        for_slice: Slice the API is meant for
        layer_path: Path of the layer holding both slices

    Example:
        >>> file = File("src/entities/user/@x/product.ts")
        >>> is_cross_import_public_api(
        ...     file, in_slice="user", for_slice="product", layer_path="src/entities"
        ... )
        True
    """
    directory = normalize_path(posixpath.dirname(file.path) or ".")
    expected = normalize_path(posixpath.join(layer_path, in_slice, CROSS_IMPORT_FOLDER))
    return file.stem == for_slice and directory == expected
