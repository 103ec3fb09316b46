"""
Tests for the command line entry point
"""

import json

import pytest

from recipe_parser import __main__ as cli
from recipe_parser.exceptions import FetchError


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda: True)


class TestCli:

    def test_html_file(self, tmp_path, json_ld_html, source_url, capsys):
        page = tmp_path / "page.html"
        page.write_text(json_ld_html, encoding="utf-8")

        assert cli.main([source_url, "--html-file", str(page)]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["title"] == "Lemon Chicken"
        assert output["source_url"] == source_url
        assert output["steps"][0]["step_number"] == 1

    def test_no_recipe(self, tmp_path, empty_html, source_url, capsys):
        page = tmp_path / "page.html"
        page.write_text(empty_html, encoding="utf-8")

        assert cli.main([source_url, "--html-file", str(page)]) == cli.EXIT_NO_RECIPE
        assert "No recipe found" in capsys.readouterr().err

    def test_fetch_failure(self, monkeypatch, source_url, capsys):
        async def unreachable(url, options):
            raise FetchError(url, "connection refused")

        monkeypatch.setattr(cli, "parse_recipe_from_url", unreachable)

        assert cli.main([source_url]) == cli.EXIT_FETCH_FAILED
        assert "connection refused" in capsys.readouterr().err

    def test_passes_fetch_options(self, monkeypatch, json_ld_html, source_url):
        received = {}

        async def fake_parse(url, options):
            received["options"] = options
            return None

        monkeypatch.setattr(cli, "parse_recipe_from_url", fake_parse)
        cli.main([source_url, "--timeout", "1500", "--user-agent", "CliBot/1.0"])

        assert received["options"].timeout == 1500
        assert received["options"].user_agent == "CliBot/1.0"

    def test_malformed_url(self, capsys):
        assert cli.main(["http://[::1"]) == cli.EXIT_FETCH_FAILED
        assert "http://[::1" in capsys.readouterr().err
