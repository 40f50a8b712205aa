"""Tests for pytest plugin integration."""

from __future__ import annotations

import pytest

PYPROJECT = """
[tool.pytest.ini_options]

[tool.url-prettifier]
query_string = "urlencoded"

[[tool.url-prettifier.routes]]
page = "article"
pretty_url = "/articles"
pretty_url_patterns = ["/articles/:id"]
"""


class TestPrettifierFixtures:
    """Tests for the prettifier_config and url_prettifier fixtures."""

    def test_fixture_reads_rootdir_pyproject(self, pytester: pytest.Pytester):
        """Test that routes are loaded from the project's pyproject.toml."""
        pytester.makepyprojecttoml(PYPROJECT)
        pytester.makepyfile(
            """
            def test_links(url_prettifier, prettifier_config):
                assert prettifier_config.query_string == "urlencoded"
                assert "article" in url_prettifier
                link = url_prettifier.link_page("article", {"q": "a b"})
                assert link.to_dict() == {"href": "/article?q=a+b", "as": "/articles"}
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)

    def test_fixture_without_configuration(self, pytester: pytest.Pytester):
        """Test that an unconfigured project gets an empty prettifier."""
        pytester.makeini("[pytest]\n")
        pytester.makepyfile(
            """
            def test_empty(url_prettifier):
                assert len(url_prettifier) == 0
                assert url_prettifier.link_page("home", {"id": 1}).to_dict() == {"href": "/home?id=1"}
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(passed=1)

    def test_config_option(self, pytester: pytest.Pytester):
        """Test that --prettifier-config points at another file."""
        pytester.makeini("[pytest]\n")
        pytester.makefile(".toml", routes=PYPROJECT)
        pytester.makepyfile(
            """
            def test_patterns(url_prettifier):
                assert list(url_prettifier.iter_patterns()) == [("article", "/articles/:id", None)]
            """
        )

        result = pytester.runpytest("--prettifier-config", str(pytester.path / "routes.toml"))

        result.assert_outcomes(passed=1)

    def test_missing_config_file(self, pytester: pytest.Pytester):
        """Test that a missing --prettifier-config file is a usage error."""
        pytester.makeini("[pytest]\n")
        pytester.makepyfile(
            """
            def test_uses_fixture(url_prettifier):
                pass
            """
        )

        result = pytester.runpytest("--prettifier-config", "does-not-exist.toml")

        result.assert_outcomes(errors=1)
        result.stdout.fnmatch_lines(["*--prettifier-config file not found*"])

    def test_malformed_config_is_usage_error(self, pytester: pytest.Pytester):
        """Test that a wrongly shaped routes section is reported as a usage error."""
        pytester.makepyprojecttoml(
            """
            [tool.pytest.ini_options]

            [tool.url-prettifier.routes]
            page = "about"
            pretty_url = "/about-us"
            """
        )
        pytester.makepyfile(
            """
            def test_uses_fixture(url_prettifier):
                pass
            """
        )

        result = pytester.runpytest()

        result.assert_outcomes(errors=1)
        result.stdout.fnmatch_lines(["*UsageError*must be an array of tables*"])


def test_library_import_does_not_need_pytest(pytester: pytest.Pytester):
    """Test that only the plugin module depends on pytest."""
    result = pytester.runpython_c(
        "import sys; import url_prettifier, url_prettifier.integrations; "
        "assert 'pytest' not in sys.modules and '_pytest' not in sys.modules"
    )

    assert result.ret == 0
