"""
fsdfs Core: Constants and Type Definitions

This module provides the Feature-Sliced Design naming conventions, resolver
defaults, error codes and configuration keys used across fsdfs.
"""
from enum import IntEnum
from typing import Literal, Tuple, TypeAlias

# Version information
FSDFS_VERSION = "1.0.0"


class ErrorCode(IntEnum):
    """Standardized error codes for fsdfs operations."""

    SUCCESS = 0  # Operation completed successfully
    INVALID_INPUT = 1  # Malformed tree, bad compiler options
    NOT_FOUND = 2  # Config file or resource doesn't exist
    INTERNAL_ERROR = 6  # Bug in fsdfs


# Type aliases for clarity
NodePath: TypeAlias = str
Specifier: TypeAlias = str
NodeType = Literal["file", "folder"]
LayerName = Literal["shared", "entities", "features", "widgets", "pages", "app"]

# Layers from the lowest (most reusable) to the highest
LAYER_SEQUENCE: Tuple[str, ...] = (
    "shared",
    "entities",
    "features",
    "widgets",
    "pages",
    "app",
)

# Layers whose children are segments rather than slices
UNSLICED_LAYERS: Tuple[str, ...] = ("shared", "app")

CONVENTIONAL_SEGMENT_NAMES: Tuple[str, ...] = ("ui", "api", "lib", "model", "config")

# Public API markers
INDEX_NAME = "index"
CROSS_IMPORT_FOLDER = "@x"

# Extension probing order for import resolution
SOURCE_EXTENSIONS: Tuple[str, ...] = (".ts", ".tsx", ".d.ts", ".js", ".jsx")

# Wildcard token in `paths` keys and templates
PATH_WILDCARD = "*"


class ConfigKey:
    """Configuration key constants."""

    ROOT = "fsdfs"

    # Classifier configuration
    ADDITIONAL_SEGMENT_NAMES = "fsdfs.classifier.additional_segment_names"

    # Resolver configuration
    EXTENSIONS = "fsdfs.resolver.extensions"

    # Logging configuration
    LOG_LEVEL = "fsdfs.logging.level"
    LOG_FILE = "fsdfs.logging.file"


# Default configuration values
DEFAULT_CONFIG = {
    ConfigKey.ROOT: {
        "classifier": {
            "additional_segment_names": [],
        },
        "resolver": {
            "extensions": list(SOURCE_EXTENSIONS),
        },
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }
}
