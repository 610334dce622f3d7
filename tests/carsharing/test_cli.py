"""Tests for the command-line entry point."""

import io

import pytest

from carsharing.cli import build_settings, main, parse_args
from carsharing.store import open_store


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test from an empty directory with no CARSHARING_* overrides."""
    for name in ["DB_DIR", "DATABASE_FILE_NAME", "DATABASE_URL", "LOG_LEVEL", "JSON_LOGS"]:
        monkeypatch.delenv(f"CARSHARING_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


def feed_stdin(monkeypatch, text: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = parse_args([])
        assert args.database_file_name is None
        assert args.log_level is None
        assert args.json_logs is None

    def test_database_file_name_flag(self):
        args = parse_args(["-databaseFileName", "fleet"])
        assert args.database_file_name == "fleet"

    def test_flags_override_settings(self):
        settings = build_settings(
            parse_args(["-databaseFileName", "fleet", "--log-level", "DEBUG", "--json-logs"])
        )
        assert settings.database_file_name == "fleet"
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True

    def test_absent_flags_keep_defaults(self):
        settings = build_settings(parse_args([]))
        assert settings.database_file_name == "carsharing"
        assert settings.database_url.endswith("/db/carsharing.db")


class TestMain:
    """Tests for a full run of the program."""

    def test_exit_immediately(self, monkeypatch, capsys, tmp_path):
        """Test that choosing 0 exits with status 0 and creates the database."""
        feed_stdin(monkeypatch, "0\n")

        assert main([]) == 0

        assert "1. Log in as a manager" in capsys.readouterr().out
        assert (tmp_path / "db" / "carsharing.db").exists()

    def test_companies_persist_between_runs(self, monkeypatch, capsys, tmp_path):
        """Test that a second run lists companies created by the first."""
        feed_stdin(monkeypatch, "1\n2\nHertz\n2\nAvis\n0\n0\n")
        assert main(["-databaseFileName", "fleet"]) == 0

        capsys.readouterr()
        feed_stdin(monkeypatch, "1\n1\n0\n0\n")
        assert main(["-databaseFileName", "fleet"]) == 0

        assert "Company list:\n1. Hertz\n2. Avis\n" in capsys.readouterr().out
        with open_store(f"sqlite:///{tmp_path}/db/fleet.db") as store:
            assert [c.name for c in store.list_companies()] == ["Hertz", "Avis"]

    def test_end_of_input_exits_cleanly(self, monkeypatch):
        """Test that closing stdin ends the program with status 0."""
        feed_stdin(monkeypatch, "")
        assert main([]) == 0

    def test_unavailable_store_exits_with_error(self, monkeypatch, capsys, tmp_path):
        """Test that a database that cannot be created is fatal."""
        blocker = tmp_path / "blocked"
        blocker.write_text("not a directory")
        monkeypatch.setenv("CARSHARING_DB_DIR", str(blocker))
        feed_stdin(monkeypatch, "0\n")

        assert main([]) == 1

        captured = capsys.readouterr()
        assert "Could not open the company database" in captured.err
        assert "Log in as a manager" not in captured.out
