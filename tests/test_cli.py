"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from ogmeta.cli import main

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestCLI:
    """Test cases for the ogmeta command."""

    def test_emit_singular(self, capsys):
        main(["emit", str(FIXTURES / "singular.yaml")])

        assert capsys.readouterr().out.splitlines() == [
            '<meta property="fb:admins" content="1234567">',
            '<meta property="og:description" content="Our bluest widget yet &amp; counting.">',
            '<meta property="og:image" content="https://acme.example/uploads/widget-300x200.jpg">',
            '<meta property="og:locale" content="fr_FR">',
            '<meta property="og:site_name" content="Acme">',
            '<meta property="og:title" content="The Blue Widget">',
            '<meta property="og:type" content="article">',
            '<meta property="og:url" content="https://acme.example/2024/05/blue-widget/">',
        ]

    def test_emit_term(self, capsys):
        main(["emit", str(FIXTURES / "term.yaml")])
        out = capsys.readouterr().out

        assert '<meta property="og:url" content="https://acme.example/category/gadgets/">' in out
        assert '<meta property="og:image" content="https://acme.example/uploads/gadgets.png">' in out

    def test_resolve_json(self, capsys):
        main(["resolve", "--json", str(FIXTURES / "home.json")])
        record = json.loads(capsys.readouterr().out)

        assert record["title"] == "Acme"
        assert record["description"] == "Widgets"
        assert record["type"] == "website"
        assert record["locale"] == ""

    def test_resolve_text(self, capsys):
        main(["resolve", str(FIXTURES / "author.yaml")])
        out = capsys.readouterr().out

        assert "title" in out and "Ada Lovelace" in out
        assert "https://acme.example/author/ada/" in out

    def test_resolve_empty_record(self, capsys, tmp_path):
        path = tmp_path / "no-permalink.yaml"
        path.write_text("view:\n  kind: singular\n  post:\n    id: 1\n")

        main(["resolve", str(path)])

        assert capsys.readouterr().out.strip() == "(no meta for this view)"

    def test_preview_to_file(self, capsys, tmp_path):
        output = tmp_path / "preview.html"

        main(["preview", str(FIXTURES / "home.json"), "-o", str(output)])

        assert "Preview written to" in capsys.readouterr().out
        assert '<meta property="og:title" content="Acme">' in output.read_text(encoding="utf-8")

    def test_missing_fixture_exits(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["emit", str(tmp_path / "missing.yaml")])

        assert exc_info.value.code == 1
        assert "Fixture not found" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        main([])

        assert "usage:" in capsys.readouterr().out

    def test_log_level_case_insensitive(self, capsys):
        main(["--log-level", "debug", "emit", str(FIXTURES / "home.json")])

        assert 'content="Acme"' in capsys.readouterr().out

    def test_string_excerpt_length_in_fixture(self, capsys, tmp_path):
        path = tmp_path / "long.yaml"
        path.write_text(
            "site:\n"
            "  site_name: Acme\n"
            "  excerpt_length: '3'\n"
            "  excerpt_more: '...'\n"
            "view:\n"
            "  kind: singular\n"
            "  post:\n"
            "    id: 1\n"
            "    permalink: https://acme.example/x/\n"
            "    content: one two three four five\n"
        )

        main(["emit", str(path)])

        assert '<meta property="og:description" content="one two three...">' in capsys.readouterr().out

    def test_bad_excerpt_length_exits(self, capsys, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("site:\n  excerpt_length: lots\nview:\n  kind: home\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["emit", str(path)])

        assert exc_info.value.code == 1
        assert "excerpt_length" in capsys.readouterr().err

    def test_site_config_replaces_fixture_values(self, capsys, tmp_path):
        config = tmp_path / "site.yaml"
        config.write_text("site:\n  site_name: Other Co\n  tagline: Gears\n  locale: de_DE\n")

        main(["--site-config", str(config), "emit", str(FIXTURES / "home.json")])
        out = capsys.readouterr().out

        assert '<meta property="og:title" content="Other Co">' in out
        assert '<meta property="og:description" content="Gears">' in out
        assert '<meta property="og:locale" content="de_DE">' in out

    def test_missing_site_config_exits(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--site-config", str(tmp_path / "none.yaml"), "emit", str(FIXTURES / "home.json")])

        assert exc_info.value.code == 1
        assert "Site config not found" in capsys.readouterr().err
