"""Shared pytest fixtures for fsdfs tests."""
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Generator, Optional

import pytest
import yaml

from fsdfs.core.tree import File, Folder
from fsdfs.infrastructure.config_manager import set_global_config
from fsdfs.infrastructure.logger import set_global_logger

TreeSpec = Dict[str, Optional[Dict[str, Any]]]


def build_folder(path: str, spec: TreeSpec) -> Folder:
    """Build a Folder from a nested dict; None values are files."""
    children = []
    for name, child in spec.items():
        child_path = f"{path}/{name}" if path else name
        if child is None:
            children.append(File(child_path))
        else:
            children.append(build_folder(child_path, child))
    return Folder(path, children)


@pytest.fixture
def tree_builder() -> Callable[[str, TreeSpec], Folder]:
    """Build trees from nested dicts: {"ui": {"index.ts": None}}."""
    return build_folder


@pytest.fixture
def fsd_root() -> Folder:
    """A small FSD root covering every layer kind."""
    return build_folder(
        "src",
        {
            "app": {
                "providers": {"index.ts": None},
                "styles.css": None,
                "index.tsx": None,
            },
            "pages": {
                "home": {
                    "ui": {"HomePage.tsx": None},
                    "index.ts": None,
                },
            },
            "widgets": {
                "header": {
                    "ui": {"Header.tsx": None},
                    "index.ts": None,
                },
            },
            "features": {
                "auth": {
                    "login": {
                        "ui": {"LoginForm.tsx": None},
                        "model": {"session.ts": None},
                        "index.ts": None,
                    },
                    "logout": {
                        "api": {"logout.ts": None},
                        "index.ts": None,
                    },
                },
                "empty-group": {
                    "nothing": {"README.md": None},
                },
            },
            "entities": {
                "user": {
                    "model": {"user.ts": None},
                    "@x": {"product.ts": None},
                    "index.ts": None,
                },
                "product": {
                    "ui": {"ProductCard.tsx": None},
                    "index.ts": None,
                },
            },
            "shared": {
                "ui": {
                    "index.ts": None,
                    "Button.tsx": None,
                },
                "lib": {"index.ts": None, "dates.ts": None},
                "config.ts": None,
                "index.ts": None,
            },
            "README.md": None,
            "main.ts": None,
        },
    )


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Temporary directory for config files."""
    return tmp_path


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Provide a sample fsdfs configuration."""
    return {
        "fsdfs": {
            "classifier": {
                "additional_segment_names": ["hooks"],
            },
            "resolver": {
                "extensions": [".tsx", ".ts"],
            },
            "logging": {
                "level": "DEBUG",
                "file": None,
            },
        }
    }


@pytest.fixture
def config_file(temp_dir: Path, sample_config: Dict[str, Any]) -> Path:
    """Create a configuration file."""
    config_path = temp_dir / "fsdfs.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config, f)
    return config_path


def _reset_stdlib_logger(name: str = "fsdfs") -> None:
    std_logger = logging.getLogger(name)
    for handler in list(std_logger.handlers):
        std_logger.removeHandler(handler)
        handler.close()
    std_logger.setLevel(logging.NOTSET)
    std_logger.propagate = True


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset global logger and config between tests."""
    set_global_logger(None)
    set_global_config(None)
    _reset_stdlib_logger()
    yield
    set_global_logger(None)
    set_global_config(None)
    _reset_stdlib_logger()
