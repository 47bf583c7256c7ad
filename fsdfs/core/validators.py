"""
fsdfs Core: Input Validators.

This module provides validation for the inputs fsdfs receives from its
callers: loaded trees, compiler options and configuration.

The classifier and the resolver never call these themselves. A malformed tree
is the caller's responsibility; callers that cannot trust their loader run
validate_tree() before classifying.
"""
import posixpath
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Set

from fsdfs.core.constants import PATH_WILDCARD, ConfigKey, ErrorCode

if TYPE_CHECKING:
    from fsdfs.core.tree import FileSystemNode


class ValidationError(Exception):
    """Base exception for validation errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize ValidationError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        super().__init__(message)
        self.error_code = error_code


class MalformedTreeError(ValidationError):
    """Raised when a tree does not follow the File/Folder contract."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, ErrorCode.INVALID_INPUT)
        self.path = path


def _normalize(path: str) -> str:
    return posixpath.normpath(path.replace("\\", "/"))


def validate_tree(root: "FileSystemNode") -> bool:
    """Validate that a tree is well-formed.

    Checks that every child's path sits directly under its parent's path,
    that no folder holds two children with the same basename, and that no
    folder contains itself.

    Args:
        root: Root node of the tree

    Returns:
        True if valid

    Raises:
        MalformedTreeError: If the tree is malformed
    """
    _validate_node(root, set())
    return True


def _validate_node(node: "FileSystemNode", ancestors: Set[int]) -> None:
    if not node.is_folder:
        return

    if id(node) in ancestors:
        raise MalformedTreeError(f"Folder contains itself: {node.path}", node.path)

    parent_path = _normalize(node.path)
    seen: Set[str] = set()

    for child in node.children:
        child_dir = posixpath.dirname(_normalize(child.path)) or "."
        if child_dir != parent_path:
            raise MalformedTreeError(
                f"Child path {child.path} is not inside folder {node.path}", child.path
            )

        name = posixpath.basename(_normalize(child.path))
        if name in seen:
            raise MalformedTreeError(
                f"Duplicate name '{name}' in folder {node.path}", child.path
            )
        seen.add(name)

        _validate_node(child, ancestors | {id(node)})


def validate_path_pattern(pattern: Any) -> bool:
    """Validate a `paths` key or replacement template.

    Args:
        pattern: Pattern string

    Returns:
        True if valid

    Raises:
        ValidationError: If pattern is not a string or has several wildcards
    """
    if not isinstance(pattern, str):
        raise ValidationError(f"Path pattern must be a string: {pattern!r}")

    if pattern.count(PATH_WILDCARD) > 1:
        raise ValidationError(f"Path pattern may contain at most one '*': {pattern}")

    return True


def validate_compiler_options(options: Mapping[str, Any]) -> bool:
    """Validate the baseUrl/paths subset of TypeScript compiler options.

    Args:
        options: Compiler options mapping

    Returns:
        True if valid

    Raises:
        ValidationError: If options are invalid
    """
    if not isinstance(options, Mapping):
        raise ValidationError("Compiler options must be a mapping")

    if "baseUrl" not in options:
        raise ValidationError("Compiler options must have 'baseUrl' field")

    if not isinstance(options["baseUrl"], str):
        raise ValidationError(f"baseUrl must be a string: {options['baseUrl']!r}")

    paths = options.get("paths")
    if paths is None:
        return True

    if not isinstance(paths, Mapping):
        raise ValidationError("paths must be a mapping")

    for key, templates in paths.items():
        try:
            validate_path_pattern(key)
        except ValidationError as e:
            raise ValidationError(f"Invalid paths key: {e}")

        if isinstance(templates, str) or not isinstance(templates, (list, tuple)):
            raise ValidationError(f"Replacements for '{key}' must be a list of strings")

        for template in templates:
            try:
                validate_path_pattern(template)
            except ValidationError as e:
                raise ValidationError(f"Invalid replacement for '{key}': {e}")

    return True


def validate_config(config: Dict[str, Any]) -> bool:
    """Validate fsdfs configuration structure.

    Args:
        config: Merged configuration dictionary

    Returns:
        True if valid

    Raises:
        ValidationError: If configuration is invalid
    """
    if not isinstance(config, dict):
        raise ValidationError("Configuration must be a dictionary")

    section = config.get(ConfigKey.ROOT, {})
    if not isinstance(section, dict):
        raise ValidationError(f"'{ConfigKey.ROOT}' section must be a dictionary")

    classifier = section.get("classifier", {})
    names = classifier.get("additional_segment_names", [])
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise ValidationError("additional_segment_names must be a list of strings")

    resolver = section.get("resolver", {})
    extensions = resolver.get("extensions", [])
    if not isinstance(extensions, list):
        raise ValidationError("Resolver extensions must be a list")
    for ext in extensions:
        if not isinstance(ext, str) or not ext.startswith("."):
            raise ValidationError(f"Resolver extension must start with '.': {ext!r}")

    logging_section = section.get("logging", {})
    level = logging_section.get("level", "WARNING")
    if not isinstance(level, str) or level.upper() not in (
        "DEBUG",
        "INFO",
        "WARNING",
        "ERROR",
        "CRITICAL",
    ):
        raise ValidationError(f"Invalid log level: {level!r}")

    return True
