"""Pytest plugin providing a prettifier built from project configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from url_prettifier.config import PrettifierConfig, load_config_from_pyproject
from url_prettifier.prettifier import UrlPrettifier


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add pytest command line options."""
    group = parser.getgroup("url-prettifier")
    group.addoption(
        "--prettifier-config",
        action="store",
        default=None,
        help="Path to a TOML file with a [tool.url-prettifier] section (default: <rootdir>/pyproject.toml)",
    )


@pytest.fixture(scope="session")
def prettifier_config(request: pytest.FixtureRequest) -> PrettifierConfig:
    """Load the [tool.url-prettifier] configuration for the test session."""
    config = request.config

    if config_path := config.getoption("--prettifier-config", default=None):
        path = Path(config_path)
        if not path.exists():
            msg = f"--prettifier-config file not found: {path}"
            raise pytest.UsageError(msg)
    else:
        path = Path(config.rootpath) / "pyproject.toml"

    try:
        return load_config_from_pyproject(path)
    except ValueError as e:
        raise pytest.UsageError(str(e)) from e


@pytest.fixture(scope="session")
def url_prettifier(prettifier_config: PrettifierConfig) -> UrlPrettifier:
    """Provide a UrlPrettifier serving the configured routes."""
    return prettifier_config.build_prettifier()
