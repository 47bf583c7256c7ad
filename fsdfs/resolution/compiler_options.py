"""Compiler options used for import resolution.

Only `baseUrl` and `paths` take part in resolution. Any other option found in
a tsconfig `compilerOptions` block is kept untouched in `extra`.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from fsdfs.core.validators import validate_compiler_options
from fsdfs.resolution.patterns import PathMapping


@dataclass(frozen=True)
class CompilerOptions:
    """The baseUrl/paths subset of TypeScript compiler options.

    Attributes:
        base_url: Directory that non-relative specifiers and templates resolve from
        paths: Ordered mapping of key pattern to replacement templates
        extra: Other compiler options, passed through untouched
    """

    base_url: str
    paths: Dict[str, List[str]] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "CompilerOptions":
        """Create options from a tsconfig-style `compilerOptions` mapping.

        Raises:
            ValidationError: If baseUrl is missing or paths are malformed
        """
        validate_compiler_options(options)

        paths = options.get("paths") or {}
        return cls(
            base_url=options["baseUrl"],
            paths={key: list(templates) for key, templates in paths.items()},
            extra={k: v for k, v in options.items() if k not in ("baseUrl", "paths")},
        )

    def to_dict(self) -> Dict[str, Any]:
        result = dict(self.extra)
        result["baseUrl"] = self.base_url
        if self.paths:
            result["paths"] = {key: list(templates) for key, templates in self.paths.items()}
        return result

    def path_mapping(self) -> PathMapping:
        return PathMapping(self.paths)


def coerce_compiler_options(
    options: Optional[Any],
) -> CompilerOptions:
    """Accept CompilerOptions or a plain mapping; None means `baseUrl: "."`."""
    if options is None:
        return CompilerOptions(base_url=".")
    if isinstance(options, CompilerOptions):
        return options
    return CompilerOptions.from_dict(options)
