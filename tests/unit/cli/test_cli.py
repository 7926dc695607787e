"""Tests for the lms command line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.cli import app
from src.lms.runtime.config.config_data import ConfigData, DatabaseConfig, LoggingConfig
from src.lms.runtime.context import AppContext, _app_context, set_context

runner = CliRunner()


@pytest.fixture(autouse=True)
def file_database(tmp_path: Path):
    """Point the CLI at a throwaway SQLite file."""
    config = ConfigData(
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'lms.db'}"),
        logging=LoggingConfig(file=None),
    )
    token = set_context(AppContext(config=config))
    result = runner.invoke(app, ["db", "init"])
    assert result.exit_code == 0, result.output
    yield
    _app_context.reset(token)


def test_db_init_is_idempotent():
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0
    assert "Database initialized" in result.output


def test_add_and_list_books():
    assert runner.invoke(app, ["catalog", "add-category", "Science Fiction"]).exit_code == 0
    assert runner.invoke(app, ["catalog", "add-location", "Shelf A"]).exit_code == 0

    added = runner.invoke(
        app,
        ["catalog", "add-book", "Dune", "--author", "Frank Herbert", "--category", "1", "--location", "1"],
    )
    assert added.exit_code == 0, added.output
    assert "Book 1 added" in added.output

    listing = runner.invoke(app, ["catalog", "books"])
    assert listing.exit_code == 0
    assert "Dune" in listing.output
    assert "Science" in listing.output
    assert "idle" in listing.output


def test_filtered_listing_without_matches():
    runner.invoke(app, ["catalog", "add-book", "Dune"])

    result = runner.invoke(app, ["catalog", "books", "--category", "7"])

    assert result.exit_code == 0
    assert "No books found" in result.output


def test_failure_exits_non_zero():
    result = runner.invoke(app, ["catalog", "add-book", "Dune", "--category", "42"])

    assert result.exit_code == 1
    assert "category 42 does not exist" in result.output


def test_delete_book():
    runner.invoke(app, ["catalog", "add-book", "Dune"])

    assert runner.invoke(app, ["catalog", "delete-book", "1"]).exit_code == 0
    assert runner.invoke(app, ["catalog", "delete-book", "1"]).exit_code == 1


def test_users_add_and_fines():
    added = runner.invoke(app, ["users", "add", "alice", "--password", "secret"])
    assert added.exit_code == 0
    assert "Registered user 1" in added.output

    fines = runner.invoke(app, ["users", "fines", "1"])
    assert fines.exit_code == 0
    assert "No fines for user 1" in fines.output


def test_db_drop_can_be_cancelled():
    result = runner.invoke(app, ["db", "drop"], input="n\n")

    assert "Cancelled" in result.output
    assert runner.invoke(app, ["catalog", "books"]).exit_code == 0
