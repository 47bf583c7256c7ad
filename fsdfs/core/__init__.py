"""fsdfs Core - Tree model, naming conventions and validation.

Import specific names from submodules:
    from fsdfs.core.tree import File, Folder, node_from_dict
    from fsdfs.core import constants
    from fsdfs.core import validators
"""

from fsdfs.core import constants, tree, validators

__all__ = [
    "constants",
    "tree",
    "validators",
]
