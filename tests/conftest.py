#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import pathlib

from typing import Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from awprint.inspector import Inspector
from awprint.options import reset_options


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def default_options():
    """Restore module-level options changed by configure()."""
    reset_options()
    yield
    reset_options()


@pytest.fixture
def make_inspector() -> Callable[..., Inspector]:
    """Factory for inspectors with plain output unless overridden."""

    def _make(**kwargs) -> Inspector:
        kwargs.setdefault("plain", True)
        return Inspector(**kwargs)

    return _make


@pytest.fixture
def formatter(make_inspector):
    """Formatter of a plain-text inspector with default indentation."""
    return make_inspector().formatter


@pytest.fixture
def temp_file(tmp_path: pathlib.Path):
    """Fixture to create a temporary file with specified size and content."""

    def _create_file(size: int = 0, content: bytes = b"\x00", name: str = "test.dat") -> pathlib.Path:
        file_path = tmp_path / name
        data = (content * (size // len(content) + 1))[:size]
        file_path.write_bytes(data)
        return file_path

    return _create_file
