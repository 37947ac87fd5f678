"""End-to-end tests for the tasklist command."""

import json

import yaml
from click.testing import CliRunner

from tasklist.cli import main
from tasklist.version import VERSION


def _script(*lines):
    return "".join(f"{line}\n" for line in lines)


class TestMain:
    """Test the click entry point."""

    def test_add_and_end_persists(self, data_file):
        """A task added in one run is in the file and visible in the next."""
        runner = CliRunner()
        result = runner.invoke(
            main, ["-f", str(data_file), "--today", "2024-01-02", "--plain"],
            input=_script("add", "c", "2024-01-01", "9:30", "Buy milk", "", "end"),
        )
        assert result.exit_code == 0
        assert "Tasklist exiting!" in result.output
        assert json.loads(data_file.read_text()) == [
            {"description": "Buy milk", "priority": "C", "date": "2024-01-01", "time": "09:30"},
        ]

        result = runner.invoke(
            main, ["-f", str(data_file), "--today", "2024-01-01", "--plain"],
            input=_script("print", "end"),
        )
        assert result.exit_code == 0
        assert "| 1  | 2024-01-01 | 09:30 | C | T |" + "Buy milk".ljust(44) + "|" in result.output

    def test_color_output(self, data_file):
        """Colored cells are emitted as ANSI background escapes by default."""
        data_file.write_text(json.dumps([
            {"description": "x", "priority": "C", "date": "2020-01-01", "time": "09:30"},
        ]))
        result = CliRunner().invoke(main, ["-f", str(data_file)], input=_script("print", "end"))
        assert result.exit_code == 0
        assert "| \x1b[101m \x1b[0m | \x1b[101m \x1b[0m |" in result.output

    def test_corrupt_file_is_fatal(self, data_file):
        """A malformed data file stops startup and is left untouched."""
        data_file.write_text("[{oops")
        result = CliRunner().invoke(main, ["-f", str(data_file)], input=_script("end"))
        assert result.exit_code == 1
        assert "Error loading task list" in result.output
        assert data_file.read_text() == "[{oops"

    def test_end_of_input_exits_cleanly(self, data_file):
        """Input ending without 'end' exits 0 and writes nothing."""
        result = CliRunner().invoke(main, ["-f", str(data_file)], input=_script("print"))
        assert result.exit_code == 0
        assert "No tasks have been input" in result.output
        assert not data_file.exists()

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert VERSION in result.output


class TestConfiguration:
    """Test settings from config file and environment."""

    def test_config_file(self, tmp_path):
        """The config file chooses the data file and plain cells."""
        data_file = tmp_path / "from-config.json"
        config_file = tmp_path / "config.yml"
        config_file.write_text(yaml.safe_dump({"data_file": str(data_file), "color": False}))

        result = CliRunner().invoke(
            main, ["--config", str(config_file), "--today", "2024-01-02"],
            input=_script("add", "n", "2024-01-02", "12:00", "Lunch", "", "print", "end"),
        )
        assert result.exit_code == 0
        assert "| N | T |" in result.output
        assert json.loads(data_file.read_text())[0]["description"] == "Lunch"

    def test_environment_overrides(self, tmp_path, monkeypatch):
        data_file = tmp_path / "from-env.json"
        monkeypatch.setenv("TASKLIST_FILE", str(data_file))
        result = CliRunner().invoke(main, [], input=_script("end"))
        assert result.exit_code == 0
        assert json.loads(data_file.read_text()) == []

    def test_malformed_config(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("color: [unterminated")
        result = CliRunner().invoke(main, ["--config", str(config_file)], input=_script("end"))
        assert result.exit_code == 1
        assert "Error reading configuration" in result.output


class TestInputEncoding:
    """Test bytes that are not valid UTF-8."""

    def test_invalid_byte_is_replaced_and_saved(self, data_file):
        """An undecodable byte becomes U+FFFD and 'end' still saves."""
        result = CliRunner().invoke(
            main, ["-f", str(data_file), "--plain", "--today", "2024-01-02"],
            input=b"add\nc\n2024-01-01\n9:30\nBuy \xff milk\n\nend\n",
        )
        assert result.exit_code == 0
        assert "Tasklist exiting!" in result.output
        saved = json.loads(data_file.read_text(encoding="utf-8"))
        assert saved[0]["description"] == "Buy \ufffd milk"
