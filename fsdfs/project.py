"""
fsdfs Project: Classifier and resolver coordinator.

This module provides FsdProject, the caller-side glue that lint and tooling
layers use to combine the two algorithms:
- Classifies an FSD root (layers, slices, segments)
- Resolves imports found in the tree's source files
- Locates any path inside the FSD structure

Usage:
    >>> project = FsdProject(root, {"baseUrl": ".", "paths": {"~/*": ["./src/*"]}})
    >>> target = project.resolve("~/shared/ui", "src/pages/home/ui/HomePage.tsx")
    >>> project.locate(target)
    NodeLocation(layer_name='shared', slice_name=None, segment_name='ui')
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from fsdfs.classifier import get_all_segments, get_all_slices, get_layers, get_segments, get_slices, is_sliced
from fsdfs.classifier.traverse import SegmentEntry, SliceFolder
from fsdfs.core.constants import SOURCE_EXTENSIONS, ConfigKey
from fsdfs.core.tree import Folder, normalize_path, tree_file_exists
from fsdfs.infrastructure.config_manager import ConfigManager, get_config_manager
from fsdfs.infrastructure.logger import Logger, get_logger
from fsdfs.resolution.resolver import ImportResolver, OptionsLike


@dataclass(frozen=True)
class NodeLocation:
    """Where a path sits in the FSD structure.

    Attributes:
        layer_name: Layer containing the path
        slice_name: Slice containing the path, None on unsliced layers or outside slices
        segment_name: Segment containing the path, None for public API files
    """

    layer_name: str
    slice_name: Optional[str] = None
    segment_name: Optional[str] = None


def _is_within(path: str, ancestor: str) -> bool:
    return path == ancestor or path.startswith(ancestor.rstrip("/") + "/")


class FsdProject:
    """
    Classified FSD root with import resolution.

    Classification is recomputed on each call; the tree is immutable, so
    results are stable for the lifetime of the project.

    Attributes:
        root: FSD root folder
        resolver: Import resolver bound to the compiler options and probe
        additional_segment_names: Extra names that count as segments
    """

    def __init__(
        self,
        root: Folder,
        compiler_options: Optional[OptionsLike] = None,
        additional_segment_names: Iterable[str] = (),
        extensions: Sequence[str] = SOURCE_EXTENSIONS,
        file_exists: Optional[Callable[[str], bool]] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the project.

        Args:
            root: FSD root folder
            compiler_options: CompilerOptions or a `{baseUrl, paths?}` mapping;
                None resolves from the current directory
            additional_segment_names: Extra names that count as segments
            extensions: Resolver extension priority order
            file_exists: Existence probe; defaults to the files of `root`
            logger: Logger; defaults to the global logger

        Raises:
            ValidationError: If the compiler options are malformed
        """
        self.root = root
        self.additional_segment_names = tuple(additional_segment_names)
        self.logger = logger or get_logger()
        self.resolver = ImportResolver(
            compiler_options,
            file_exists if file_exists is not None else tree_file_exists(root),
            extensions,
        )

    @classmethod
    def from_config(
        cls,
        root: Folder,
        compiler_options: Optional[OptionsLike] = None,
        config: Optional[ConfigManager] = None,
        file_exists: Optional[Callable[[str], bool]] = None,
    ) -> "FsdProject":
        """
        Create a project from fsdfs configuration.

        Reads additional segment names, resolver extensions and logging
        settings from the configuration.

        Raises:
            ConfigError: If the configuration is invalid
        """
        config = config or get_config_manager()
        config.validate()

        logger = get_logger()
        logger.set_level(config.get(ConfigKey.LOG_LEVEL, "WARNING"))

        log_file = config.get(ConfigKey.LOG_FILE)
        if log_file:
            logger.use_file_handler(log_file)

        return cls(
            root,
            compiler_options,
            additional_segment_names=config.get(ConfigKey.ADDITIONAL_SEGMENT_NAMES, []),
            extensions=config.get(ConfigKey.EXTENSIONS, list(SOURCE_EXTENSIONS)),
            file_exists=file_exists,
            logger=logger,
        )

    def layers(self) -> Dict[str, Folder]:
        return get_layers(self.root)

    def slices(self) -> Dict[str, SliceFolder]:
        slices = get_all_slices(self.root, self.additional_segment_names)
        self.logger.debug("Collected slices", root=self.root.path, count=len(slices))
        return slices

    def segments(self) -> List[SegmentEntry]:
        segments = get_all_segments(self.root, self.additional_segment_names)
        self.logger.debug("Collected segments", root=self.root.path, count=len(segments))
        return segments

    def resolve(self, specifier: str, importer_path: str) -> Optional[str]:
        """
        Resolve an import found in `importer_path`.

        Returns:
            Resolved file path, or None for an unresolved import
        """
        return self.resolver.resolve(specifier, importer_path)

    def locate(self, path: str) -> Optional[NodeLocation]:
        """
        Find the layer, slice and segment containing a path.

        Args:
            path: File or folder path inside the FSD root

        Returns:
            Location, or None if the path is outside every layer
        """
        path = normalize_path(path)

        for layer_name, layer in self.layers().items():
            if not _is_within(path, normalize_path(layer.path)):
                continue

            if not is_sliced(layer):
                return NodeLocation(layer_name, None, self._segment_of(path, layer))

            for slice_name, folder in get_slices(layer, self.additional_segment_names).items():
                if _is_within(path, normalize_path(folder.path)):
                    return NodeLocation(layer_name, slice_name, self._segment_of(path, folder))

            return NodeLocation(layer_name)

        return None

    def _segment_of(self, path: str, container: Folder) -> Optional[str]:
        for segment_name, segment in get_segments(container).items():
            if _is_within(path, normalize_path(segment.path)):
                return segment_name
        return None

    def locate_import(self, specifier: str, importer_path: str) -> Optional[NodeLocation]:
        """
        Resolve an import and locate its target.

        Returns:
            Location of the imported file, or None if unresolved or outside the layers
        """
        target = self.resolve(specifier, importer_path)
        if target is None:
            self.logger.debug("Import target not found", specifier=specifier, importer=importer_path)
            return None
        return self.locate(target)
