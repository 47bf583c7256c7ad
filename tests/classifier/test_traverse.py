"""
Tests for FSD-aware traversal.

Covers layers, slices (including grouped slices), segments and the
all-slices/all-segments aggregations.
"""

import pytest

from fsdfs.classifier.traverse import (
    SegmentEntry,
    SliceFolder,
    get_all_segments,
    get_all_slices,
    get_layer_order,
    get_layers,
    get_segments,
    get_slices,
    is_slice,
    is_sliced,
)
from fsdfs.core.tree import File, Folder


class TestGetLayers:
    """Test get_layers."""

    def test_finds_all_layers(self, fsd_root):
        """Every layer folder is found, in child order."""
        layers = get_layers(fsd_root)
        assert list(layers) == ["app", "pages", "widgets", "features", "entities", "shared"]
        assert layers["shared"].path == "src/shared"

    def test_ignores_files_named_like_layers(self, tree_builder):
        """A file called `shared` is not a layer."""
        root = tree_builder("src", {"shared": None, "entities": {}, "app.ts": None})
        assert list(get_layers(root)) == ["entities"]

    def test_ignores_unknown_folders(self, tree_builder):
        """Folders with other names are not layers."""
        root = tree_builder("src", {"components": {}, "Shared": {}, "processes": {}})
        assert get_layers(root) == {}

    def test_empty_root(self):
        """An empty root has no layers."""
        assert get_layers(Folder("src")) == {}

    def test_trailing_slash_paths(self):
        """Folder paths ending in `/` classify like their bare form."""
        root = Folder(
            "src/",
            [
                Folder("src/shared/", [Folder("src/shared/ui/")]),
                Folder(
                    "src/features/",
                    [Folder("src/features/auth/", [Folder("src/features/auth/model/")])],
                ),
            ],
        )
        assert list(get_layers(root)) == ["shared", "features"]
        assert list(get_segments(get_layers(root)["shared"])) == ["ui"]
        assert list(get_slices(get_layers(root)["features"])) == ["auth"]


class TestLayerOrder:
    """Test get_layer_order."""

    def test_order(self):
        assert get_layer_order("shared") == 0
        assert get_layer_order("app") == 5
        assert get_layer_order("entities") < get_layer_order("features")

    def test_unknown(self):
        assert get_layer_order("processes") is None


class TestIsSliced:
    """Test is_sliced."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("shared", False),
            ("app", False),
            ("entities", True),
            ("features", True),
            ("widgets", True),
            ("pages", True),
        ],
    )
    def test_by_name(self, name, expected):
        """Names and folders agree."""
        assert is_sliced(name) is expected
        assert is_sliced(Folder(f"src/{name}")) is expected

    def test_by_path_string(self):
        """A path string is reduced to its basename."""
        assert is_sliced("src/shared") is False
        assert is_sliced("src/pages/") is True


class TestIsSlice:
    """Test is_slice."""

    def test_segment_folder(self, tree_builder):
        """A folder with a `ui` folder is a slice."""
        assert is_slice(tree_builder("user", {"ui": {}}))

    def test_segment_file(self, tree_builder):
        """A segment may be a file; its extension is ignored."""
        assert is_slice(tree_builder("user", {"model.ts": None}))

    def test_index_only(self, tree_builder):
        """An index file alone does not make a slice."""
        assert not is_slice(tree_builder("user", {"index.ts": None}))

    def test_additional_segment_names(self, tree_builder):
        """Extra segment names are honoured."""
        folder = tree_builder("user", {"hooks": {}})
        assert not is_slice(folder)
        assert is_slice(folder, ["hooks"])

    def test_empty_folder(self):
        assert not is_slice(Folder("user"))


class TestGetSlices:
    """Test get_slices."""

    def test_flat_slices(self, fsd_root):
        """Direct slice folders are keyed by basename."""
        slices = get_slices(get_layers(fsd_root)["entities"])
        assert list(slices) == ["user", "product"]
        assert slices["user"].path == "src/entities/user"

    def test_grouped_slices(self, fsd_root):
        """Slices under a group folder get joined names."""
        slices = get_slices(get_layers(fsd_root)["features"])
        assert list(slices) == ["auth/login", "auth/logout"]
        assert slices["auth/login"].path == "src/features/auth/login"

    def test_nested_grandchild(self, tree_builder):
        """A slice two levels deep is reported as `parent/child`."""
        layer = tree_builder("pages", {"parent": {"child": {"ui": {}}}})
        assert list(get_slices(layer)) == ["parent/child"]

    def test_deeply_nested(self, tree_builder):
        """Group names accumulate at any depth."""
        layer = tree_builder("features", {"a": {"b": {"c": {"api": {}}}}})
        assert list(get_slices(layer)) == ["a/b/c"]

    def test_no_descent_below_slice(self, tree_builder):
        """Folders inside a slice are never slices themselves."""
        layer = tree_builder(
            "features",
            {"cart": {"ui": {"model": {}}, "inner": {"lib": {}}}},
        )
        slices = get_slices(layer)
        assert list(slices) == ["cart"]

    def test_branch_without_slice(self, fsd_root):
        """Groups with no slices contribute nothing."""
        slices = get_slices(get_layers(fsd_root)["features"])
        assert not any(name.startswith("empty-group") for name in slices)

    def test_files_in_layer_ignored(self, tree_builder):
        """Files directly in the layer are not slices."""
        layer = tree_builder("entities", {"index.ts": None, "ui.ts": None})
        assert get_slices(layer) == {}

    def test_additional_segment_names(self, tree_builder):
        """Extra segment names decide slices too."""
        layer = tree_builder("entities", {"user": {"hooks": {}}})
        assert get_slices(layer) == {}
        assert list(get_slices(layer, ["hooks"])) == ["user"]

    def test_every_slice_satisfies_is_slice(self, fsd_root):
        """No reported slice fails is_slice, no ancestor is also reported."""
        for layer in get_layers(fsd_root).values():
            if not is_sliced(layer):
                continue
            slices = get_slices(layer)
            for name, folder in slices.items():
                assert is_slice(folder)
                parts = name.split("/")
                for i in range(1, len(parts)):
                    assert "/".join(parts[:i]) not in slices

    def test_joined_name_collision_last_wins(self):
        """Identical joined names keep the later folder."""
        first = Folder("features/a/b", [Folder("features/a/b/ui")])
        second = Folder("features/a/b", [Folder("features/a/b/model")])
        layer = Folder(
            "features",
            [Folder("features/a", [first]), Folder("features/a", [second])],
        )
        assert get_slices(layer) == {"a/b": second}


class TestGetSegments:
    """Test get_segments."""

    def test_slice_segments(self, fsd_root):
        """Segments exclude the index file."""
        user = get_slices(get_layers(fsd_root)["entities"])["user"]
        segments = get_segments(user)
        assert list(segments) == ["model", "@x"]

    def test_unsliced_layer_segments(self, fsd_root):
        """File segments are keyed without extension."""
        segments = get_segments(get_layers(fsd_root)["shared"])
        assert list(segments) == ["ui", "lib", "config"]
        assert segments["config"] == File("src/shared/config.ts")

    def test_platform_indexes_excluded(self, tree_builder):
        """index.client.ts and index.server.ts are not segments."""
        folder = tree_builder(
            "shared", {"index.client.ts": None, "index.server.ts": None, "ui": {}}
        )
        assert list(get_segments(folder)) == ["ui"]

    def test_collision_last_wins(self, tree_builder):
        """A later child with the same key overwrites an earlier one."""
        folder = tree_builder("shared", {"ui": {}, "ui.ts": None})
        assert get_segments(folder) == {"ui": File("shared/ui.ts")}


class TestGetAllSlices:
    """Test get_all_slices."""

    def test_all_slices_tagged(self, fsd_root):
        """Slices of every sliced layer, tagged with the layer."""
        slices = get_all_slices(fsd_root)
        assert set(slices) == {"home", "header", "auth/login", "auth/logout", "user", "product"}
        assert slices["home"].layer_name == "pages"
        assert slices["auth/login"].layer_name == "features"
        assert slices["user"].layer_name == "entities"

    def test_slice_folder_keeps_content(self, fsd_root):
        """Tagged slices keep path and children."""
        slice_folder = get_all_slices(fsd_root)["product"]
        assert isinstance(slice_folder, SliceFolder)
        assert isinstance(slice_folder, Folder)
        original = get_slices(get_layers(fsd_root)["entities"])["product"]
        assert slice_folder.path == original.path
        assert slice_folder.children == original.children

    def test_unsliced_layers_skipped(self, tree_builder):
        """Folders in shared and app are never slices."""
        root = tree_builder("src", {"shared": {"ui": {"lib": {}}}, "app": {"store": {"model": {}}}})
        assert get_all_slices(root) == {}

    def test_cross_layer_collision_last_layer_wins(self, tree_builder):
        """A slice name used on two layers keeps the later layer."""
        root = tree_builder(
            "src",
            {"entities": {"user": {"ui": {}}}, "features": {"user": {"model": {}}}},
        )
        slices = get_all_slices(root)
        assert list(slices) == ["user"]
        assert slices["user"].layer_name == "features"
        assert slices["user"].path == "src/features/user"


class TestGetAllSegments:
    """Test get_all_segments."""

    def test_unsliced_have_no_slice(self, fsd_root):
        """Segments of shared and app have slice_name None."""
        entries = [e for e in get_all_segments(fsd_root) if e.layer_name == "shared"]
        assert [e.segment_name for e in entries] == ["ui", "lib", "config"]
        assert all(e.slice_name is None for e in entries)

    def test_sliced_have_slice(self, fsd_root):
        """Segments of slices name their slice."""
        entries = [e for e in get_all_segments(fsd_root) if e.layer_name == "features"]
        assert [(e.slice_name, e.segment_name) for e in entries] == [
            ("auth/login", "ui"),
            ("auth/login", "model"),
            ("auth/logout", "api"),
        ]

    def test_entry_shape(self, fsd_root):
        """Entries carry the segment node."""
        entry = next(e for e in get_all_segments(fsd_root) if e.slice_name == "home")
        assert entry == SegmentEntry(
            segment=Folder("src/pages/home/ui", [File("src/pages/home/ui/HomePage.tsx")]),
            segment_name="ui",
            slice_name="home",
            layer_name="pages",
        )

    def test_app_segments(self, fsd_root):
        """App segments exclude its index."""
        entries = [e for e in get_all_segments(fsd_root) if e.layer_name == "app"]
        assert [e.segment_name for e in entries] == ["providers", "styles"]

    def test_additional_segment_names(self, tree_builder):
        """Extra names let unconventional slices contribute segments."""
        root = tree_builder("src", {"entities": {"user": {"hooks": {}}}})
        assert get_all_segments(root) == []
        entries = get_all_segments(root, ["hooks"])
        assert [(e.slice_name, e.segment_name) for e in entries] == [("user", "hooks")]
