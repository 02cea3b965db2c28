import json
import tempfile
from pathlib import Path
from click.testing import CliRunner
from webspeech.cli import cli


def test_speak_from_stdin(monkeypatch):
    """Markup piped on stdin is spoken with the default tables"""
    monkeypatch.delenv("WEBSPEECH_TABLES", raising=False)
    runner = CliRunner()
    result = runner.invoke(cli, ["speak"], input='<div><a href="/home">Home</a></div>')
    assert result.exit_code == 0
    assert result.output.strip() == "Home link"


def test_speak_xml_file_with_tables():
    with tempfile.TemporaryDirectory() as tmp:
        page = Path(tmp) / "page.xhtml"
        page.write_text('<ul><li>One</li></ul>')
        overrides = Path(tmp) / "tables.json"
        overrides.write_text(json.dumps({"tags": {"li": "bullet"}}))

        runner = CliRunner()
        result = runner.invoke(cli, ["speak", "--xml", "--tables", str(overrides), str(page)])
        assert result.exit_code == 0
        assert result.output == "One bullet list\n"


def test_speak_reports_bad_tables():
    with tempfile.TemporaryDirectory() as tmp:
        overrides = Path(tmp) / "tables.json"
        overrides.write_text('{"tags": ["li"]}')

        runner = CliRunner()
        result = runner.invoke(cli, ["speak", "--tables", str(overrides)], input="<p>x</p>")
        assert result.exit_code != 0
        assert "Error:" in result.output


def test_speak_reports_malformed_xml():
    runner = CliRunner()
    result = runner.invoke(cli, ["speak", "--xml"], input="<div><span></div>")
    assert result.exit_code != 0
    assert "Error:" in result.output


def test_tables_prints_json(monkeypatch):
    monkeypatch.delenv("WEBSPEECH_TABLES", raising=False)
    runner = CliRunner()
    result = runner.invoke(cli, ["tables"])
    assert result.exit_code == 0

    tables = json.loads(result.output)
    assert set(tables) == {"input_types", "aria_roles", "tags"}
    assert tables["input_types"]["checkbox"] == "check box"


def test_tables_reports_missing_file(monkeypatch):
    """A WEBSPEECH_TABLES path that does not exist is reported, not raised"""
    monkeypatch.setenv("WEBSPEECH_TABLES", "/nonexistent/tables.json")
    runner = CliRunner()
    result = runner.invoke(cli, ["tables"])
    assert result.exit_code != 0
    assert "Error:" in result.output
    assert not isinstance(result.exception, FileNotFoundError)


def test_tables_reports_undecodable_file(monkeypatch):
    with tempfile.TemporaryDirectory() as tmp:
        overrides = Path(tmp) / "tables.json"
        overrides.write_bytes(b'{"tags": {"a": "\xff\xfe"}}')
        monkeypatch.setenv("WEBSPEECH_TABLES", str(overrides))

        runner = CliRunner()
        result = runner.invoke(cli, ["tables"])
        assert result.exit_code != 0
        assert "Error:" in result.output


def test_bad_log_level_reported(monkeypatch):
    monkeypatch.setenv("WEBSPEECH_LOG_LEVEL", "chatty")
    runner = CliRunner()
    result = runner.invoke(cli, ["tables"])
    assert result.exit_code != 0
    assert "Error:" in result.output
    assert not isinstance(result.exception, ValueError)
