#!/usr/bin/env python3
"""Single-wildcard path patterns for `paths` mapping.

This module provides the pattern matching used by TypeScript-style `paths`:
- Exact keys ("jquery")
- Keys with one wildcard ("~/*", "@app/*/public")
- Replacement templates with the same wildcard ("./src/*")
- Declaration-order lookup (the first matching key wins)

A wildcard pattern is a fixed prefix and a fixed suffix around `*`; it is not
a glob and never spans more than one `*`.

Example:
    >>> mapping = PathMapping({"~/*": ["./src/*"]})
    >>> match = mapping.find_match("~/shared/ui")
    >>> match.substitutions()
    ['./src/shared/ui']
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from fsdfs.core.constants import PATH_WILDCARD
from fsdfs.core.validators import validate_path_pattern


@dataclass(frozen=True)
class PathPattern:
    """A parsed key or template.

    Attributes:
        pattern: The raw pattern string
        prefix: Text before the wildcard (the whole pattern if there is none)
        suffix: Text after the wildcard
        has_wildcard: Whether the pattern contains `*`
    """

    pattern: str
    prefix: str
    suffix: str = ""
    has_wildcard: bool = False

    @classmethod
    def parse(cls, pattern: str) -> "PathPattern":
        """Parse a pattern string.

        Raises:
            ValidationError: If the pattern has more than one wildcard
        """
        validate_path_pattern(pattern)

        if PATH_WILDCARD not in pattern:
            return cls(pattern=pattern, prefix=pattern)

        prefix, suffix = pattern.split(PATH_WILDCARD, 1)
        return cls(pattern=pattern, prefix=prefix, suffix=suffix, has_wildcard=True)

    def match(self, specifier: str) -> Optional[str]:
        """Match a specifier against this pattern.

        Args:
            specifier: Import specifier

        Returns:
            The text captured by the wildcard (empty string for exact keys),
            or None if the specifier does not match
        """
        if not self.has_wildcard:
            return "" if specifier == self.pattern else None

        if len(specifier) < len(self.prefix) + len(self.suffix):
            return None
        if not specifier.startswith(self.prefix) or not specifier.endswith(self.suffix):
            return None

        return specifier[len(self.prefix) : len(specifier) - len(self.suffix)]

    def substitute(self, captured: str) -> str:
        """Fill the wildcard with captured text; patterns without one are returned as is."""
        if not self.has_wildcard:
            return self.pattern
        return f"{self.prefix}{captured}{self.suffix}"


@dataclass(frozen=True)
class PathMatch:
    """A matched `paths` entry."""

    key: PathPattern
    templates: Sequence[PathPattern]
    captured: str

    def substitutions(self) -> List[str]:
        """Templates filled with the captured text, in template order."""
        return [template.substitute(self.captured) for template in self.templates]


class PathMapping:
    """Ordered `paths` mapping.

    Keys are tried in declaration order; the first match wins.
    """

    def __init__(self, paths: Optional[Mapping[str, Sequence[str]]] = None):
        """Initialize path mapping.

        Args:
            paths: Mapping of key pattern to replacement templates
        """
        self._entries: Dict[str, List[PathPattern]] = {}
        self._keys: Dict[str, PathPattern] = {}

        for key, templates in (paths or {}).items():
            self.add_mapping(key, templates)

    def add_mapping(self, key: str, templates: Sequence[str]) -> None:
        """Add a key with its replacement templates.

        Args:
            key: Key pattern (e.g., "~/*")
            templates: Replacement templates (e.g., ["./src/*"])

        Raises:
            ValidationError: If the key or a template is invalid
        """
        self._keys[key] = PathPattern.parse(key)
        self._entries[key] = [PathPattern.parse(template) for template in templates]

    def find_match(self, specifier: str) -> Optional[PathMatch]:
        """Find the first key matching a specifier.

        Args:
            specifier: Import specifier

        Returns:
            The match, or None if no key matches
        """
        for key, pattern in self._keys.items():
            captured = pattern.match(specifier)
            if captured is not None:
                return PathMatch(key=pattern, templates=tuple(self._entries[key]), captured=captured)
        return None

    def get_keys(self) -> List[str]:
        """Get all keys in declaration order."""
        return list(self._keys)

    def __len__(self) -> int:
        """Return number of keys."""
        return len(self._keys)

    def __bool__(self) -> bool:
        """Return True if any keys are registered."""
        return bool(self._keys)
