"""Smoke tests for the Typer CLI router."""
import json
import xml.etree.ElementTree as ET

from typer.testing import CliRunner

from svgnumeric.cli.main import app

runner = CliRunner()

_DOCUMENT = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="1in" viewBox="0 0 99.999999 50">'
    '<rect x="0.5000px" y="1.23456"/></svg>'
)


def test_help_shows_commands() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("value", "file", "config"):
        assert command in result.stdout


def test_version_option() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "svgnumeric" in result.stdout


def test_value_command_defaults() -> None:
    result = runner.invoke(app, ["value", "0.5000px"])
    assert result.exit_code == 0
    assert result.stdout.strip() == ".5"


def test_value_command_negative_number() -> None:
    result = runner.invoke(app, ["value", "--", "-0.5"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "-.5"


def test_value_command_options() -> None:
    result = runner.invoke(app, ["value", "1in", "--no-convert-to-px"])
    assert result.stdout.strip() == "1in"

    result = runner.invoke(app, ["value", "0.5", "--no-leading-zero"])
    assert result.stdout.strip() == "0.5"

    result = runner.invoke(app, ["value", "1.23456", "--precision", "1"])
    assert result.stdout.strip() == "1.2"


def test_value_command_named_attributes() -> None:
    result = runner.invoke(app, ["value", "1.1000", "--name", "version"])
    assert result.stdout.strip() == "1.1000"

    result = runner.invoke(app, ["value", "0 0 99.999999 50", "--name", "viewBox", "-p", "2"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "0 0 100 50"


def test_value_command_uses_config_file(tmp_path) -> None:
    config_file = tmp_path / "svgnumeric.toml"
    config_file.write_text("[normalization]\ndefaultPx = false\n", encoding="utf-8")

    result = runner.invoke(app, ["value", "10.0px", "--config-file", str(config_file)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "10px"


def test_value_command_rejects_invalid_config(tmp_path) -> None:
    config_file = tmp_path / "svgnumeric.toml"
    config_file.write_text("[normalization]\nfloatPrecision = -2\n", encoding="utf-8")

    result = runner.invoke(app, ["value", "1.5", "--config-file", str(config_file)])

    assert result.exit_code != 0


def test_file_command(tmp_path) -> None:
    source = tmp_path / "drawing.svg"
    source.write_text(_DOCUMENT, encoding="utf-8")
    output = tmp_path / "drawing.min.svg"
    log_file = tmp_path / "logs" / "events.jsonl"

    result = runner.invoke(
        app,
        ["file", str(source), "--output", str(output), "--log-file", str(log_file)],
    )

    assert result.exit_code == 0
    summary = json.loads(result.stdout)
    assert summary == {"output": str(output), "elements": 2, "changed": 4}

    root = ET.parse(output).getroot()
    assert root.attrib == {"width": "96", "viewBox": "0 0 100 50"}

    events = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert [event["event"] for event in events] == ["normalize.start", "normalize.completed"]
    assert events[0]["trace_id"] == events[1]["trace_id"]
    assert events[1]["changed"] == 4


def test_file_command_reports_parse_errors(tmp_path) -> None:
    source = tmp_path / "broken.svg"
    source.write_text("<svg><g></svg>", encoding="utf-8")

    result = runner.invoke(app, ["file", str(source)])

    assert result.exit_code == 1


def test_config_show(tmp_path) -> None:
    config_file = tmp_path / "svgnumeric.yaml"
    config_file.write_text("normalization:\n  floatPrecision: 2\n", encoding="utf-8")

    result = runner.invoke(app, ["config", "show", "--config-file", str(config_file)])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["config_source"] == str(config_file)
    assert payload["normalization"] == {
        "floatPrecision": 2,
        "leadingZero": True,
        "defaultPx": True,
        "convertToPx": True,
    }


def test_value_command_view_box_matches_element_normalization() -> None:
    result = runner.invoke(app, ["value", "0.5", "--name", "viewBox"])
    assert result.exit_code == 0
    assert result.stdout.strip() == ".5"

    result = runner.invoke(app, ["value", "5px", "--name", "viewBox"])
    assert result.stdout.strip() == "5"

    result = runner.invoke(app, ["value", "0.5000px", "--name", "height"])
    assert result.stdout.strip() == ".5"
