"""Default marks and fixtures for tests under `tests/functional/`."""

from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=unused-argument

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "functional"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if FUNCTIONAL_ROOT in path.parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.functional)


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner: CliRunner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def _no_argus_env(monkeypatch):
    """Keep the developer's ARGUS_* environment out of CLI tests."""
    for name in ("ARGUS_SMB_USER", "ARGUS_SMB_PASS", "ARGUS_FORMAT_MAX_CAPACITY"):
        monkeypatch.delenv(name, raising=False)
