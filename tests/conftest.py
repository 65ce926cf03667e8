"""Shared pytest fixtures for projection tests."""

import importlib.util
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def no_debug(monkeypatch):
    """Keep debug output off unless a test turns it on."""
    monkeypatch.delenv("FERRUX_DEBUG", raising=False)


@pytest.fixture
def default_builder():
    from ferrux_projection import ProjectionMatrixBuilder

    return ProjectionMatrixBuilder()


@pytest.fixture
def custom_builder():
    """1920x1080, fov 100, near 5, far 500."""
    from ferrux_projection import ProjectionMatrixBuilder

    return (ProjectionMatrixBuilder()
            .set_width(1920)
            .set_height(1080)
            .set_fov(100.0)
            .set_far(500.0)
            .set_near(5.0))


@pytest.fixture
def projection_yaml(tmp_path: Path) -> Path:
    """YAML file with a top-level projection section."""
    path = tmp_path / "projection.yaml"
    path.write_text(
        "projection:\n"
        "  near: 5.0\n"
        "  far: 500.0\n"
        "  fov: 100.0\n"
        "  width: 1920\n"
        "  height: 1080\n"
    )
    return path


@pytest.fixture(scope="session")
def run_module():
    """The root run.py script, loaded as a module."""
    spec = importlib.util.spec_from_file_location("run", PROJECT_ROOT / "run.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
