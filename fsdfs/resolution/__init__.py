"""fsdfs Resolution - Import specifiers to files.

This package resolves import specifiers the way TypeScript's `baseUrl` and
`paths` options describe:
- PathPattern / PathMapping: single-wildcard `paths` matching
- CompilerOptions: the baseUrl/paths subset of compiler options
- ImportResolver / resolve_import: candidate generation and probing
"""

from .compiler_options import CompilerOptions, coerce_compiler_options
from .patterns import PathMapping, PathMatch, PathPattern
from .resolver import ImportResolver, is_relative_specifier, probe_sequence, resolve_import

__all__ = [
    # Pattern exports
    "PathPattern",
    "PathMatch",
    "PathMapping",
    # Compiler options exports
    "CompilerOptions",
    "coerce_compiler_options",
    # Resolver exports
    "ImportResolver",
    "resolve_import",
    "is_relative_specifier",
    "probe_sequence",
]
