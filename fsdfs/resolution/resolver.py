#!/usr/bin/env python3
"""Import specifier resolution with baseUrl/paths mapping.

This module maps an import specifier to the file it refers to:
- Relative specifiers (./x, ../x) resolve from the importer's directory
- Other specifiers go through `paths` (first matching key wins)
- Unmapped specifiers resolve from `baseUrl`
- Each base candidate is probed as a file, with each extension, then as a
  directory index

Existence is checked through an injected `file_exists` predicate so that
resolution can run against a virtual tree. The predicate only ever receives
normalized candidate paths. Nothing is cached between calls.

Example:
    >>> options = {"baseUrl": ".", "paths": {"~/*": ["./src/*"]}}
    >>> resolve_import(
    ...     "~/shared/ui",
    ...     "src/pages/home/ui/HomePage.tsx",
    ...     options,
    ...     lambda p: p == "src/shared/ui/index.ts",
    ... )
    'src/shared/ui/index.ts'
"""

import posixpath
import re
from typing import Any, Callable, Iterator, List, Mapping, Optional, Sequence, Union

from fsdfs.core.constants import INDEX_NAME, SOURCE_EXTENSIONS
from fsdfs.core.tree import normalize_path
from fsdfs.infrastructure.logger import get_logger
from fsdfs.resolution.compiler_options import CompilerOptions, coerce_compiler_options
from fsdfs.resolution.patterns import PathMapping

FileExists = Callable[[str], bool]
OptionsLike = Union[CompilerOptions, Mapping[str, Any]]

RELATIVE_SPECIFIER = re.compile(r"^\.\.?(?:/|$)")


def is_relative_specifier(specifier: str) -> bool:
    """Check if a specifier starts with `./` or `../` (or is `.`/`..`)."""
    return bool(RELATIVE_SPECIFIER.match(specifier.replace("\\", "/")))


def probe_sequence(base: str, extensions: Sequence[str] = SOURCE_EXTENSIONS) -> Iterator[str]:
    """Yield the paths probed for one base candidate, in priority order.

    Args:
        base: Base candidate path
        extensions: Extensions to try, in priority order

    Yields:
        The literal path, the path with each extension, then the path's
        index file with each extension
    """
    base = normalize_path(base)
    yield base
    for ext in extensions:
        yield normalize_path(base + ext)
    for ext in extensions:
        yield normalize_path(posixpath.join(base, INDEX_NAME + ext))


class ImportResolver:
    """Resolves import specifiers against compiler options and a probe.

    Attributes:
        options: Compiler options (baseUrl and paths)
        file_exists: Existence probe for candidate paths
        extensions: Extension priority order
    """

    def __init__(
        self,
        options: Optional[OptionsLike],
        file_exists: FileExists,
        extensions: Sequence[str] = SOURCE_EXTENSIONS,
    ):
        """Initialize resolver.

        Args:
            options: CompilerOptions or a `{baseUrl, paths?}` mapping
            file_exists: Predicate telling whether a path is an existing file
            extensions: Extensions to try, in priority order

        Raises:
            ValidationError: If the compiler options are malformed
        """
        self.options = coerce_compiler_options(options)
        self.file_exists = file_exists
        self.extensions = tuple(extensions)
        self._mapping: PathMapping = self.options.path_mapping()

    def base_candidates(self, specifier: str, importer_path: str) -> List[str]:
        """Compute the ordered base candidates for a specifier.

        Args:
            specifier: Import specifier
            importer_path: Path of the importing file

        Returns:
            Normalized base paths, before extension and index fallback
        """
        if is_relative_specifier(specifier):
            importer_dir = posixpath.dirname(importer_path.replace("\\", "/"))
            return [normalize_path(posixpath.join(importer_dir, specifier))]

        match = self._mapping.find_match(specifier)
        if match is not None:
            return [
                normalize_path(posixpath.join(self.options.base_url, substitution))
                for substitution in match.substitutions()
            ]

        return [normalize_path(posixpath.join(self.options.base_url, specifier))]

    def resolve(self, specifier: str, importer_path: str) -> Optional[str]:
        """Resolve a specifier to an existing file.

        Args:
            specifier: Import specifier (e.g., "~/shared/ui", "./Button")
            importer_path: Path of the importing file

        Returns:
            Normalized path of the first existing candidate, or None if the
            import is unresolved
        """
        logger = get_logger()

        for base in self.base_candidates(specifier, importer_path):
            for candidate in probe_sequence(base, self.extensions):
                if self.file_exists(candidate):
                    logger.debug(
                        "Resolved import", specifier=specifier, importer=importer_path, path=candidate
                    )
                    return candidate

        logger.debug("Unresolved import", specifier=specifier, importer=importer_path)
        return None


def resolve_import(
    specifier: str,
    importer_path: str,
    options: Optional[OptionsLike],
    file_exists: FileExists,
    extensions: Sequence[str] = SOURCE_EXTENSIONS,
) -> Optional[str]:
    """Resolve an import specifier to a file path.

    Args:
        specifier: Import specifier
        importer_path: Path of the importing file
        options: CompilerOptions or a `{baseUrl, paths?}` mapping
        file_exists: Predicate telling whether a path is an existing file
        extensions: Extensions to try, in priority order

    Returns:
        Resolved path, or None if no candidate exists

    Raises:
        ValidationError: If the compiler options are malformed
    """
    return ImportResolver(options, file_exists, extensions).resolve(specifier, importer_path)
