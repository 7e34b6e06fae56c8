"""Tests for the bookshelf command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.bookshelf import cli
from src.bookshelf.core.services import DbSessionService
from src.bookshelf.entities.service.book import Book, BookRepository
from src.bookshelf.runtime.config.config_data import ConfigData
from src.bookshelf.runtime.context import with_context

runner = CliRunner()


@pytest.fixture
def file_database(tmp_path: Path):
    """Point the configuration at a SQLite file for the duration of a test."""
    test_config = ConfigData()
    test_config.database.url = f"sqlite:///{tmp_path / 'cli.db'}"
    with with_context(test_config):
        yield tmp_path / "cli.db"


def test_init_db_creates_tables(file_database: Path):
    result = runner.invoke(cli.app, ["init-db"])

    assert result.exit_code == 0, result.output
    assert "Tables created" in result.output
    assert file_database.exists()


def test_list_books_empty(file_database: Path):
    result = runner.invoke(cli.app, ["list-books"])

    assert result.exit_code == 0, result.output
    assert "No books found" in result.output


def test_list_books(file_database: Path):
    database_service = DbSessionService()
    database_service.create_all()
    with database_service.session_scope() as session:
        BookRepository(session).create(
            Book(title="Dune", author="Herbert", description="Spice")
        )
    database_service.dispose()

    result = runner.invoke(cli.app, ["list-books"])

    assert result.exit_code == 0, result.output
    assert "Dune" in result.output
    assert "Herbert" in result.output


def test_serve_uses_configured_address(monkeypatch):
    calls = {}

    def fake_run(app_path, **kwargs):
        calls["app"] = app_path
        calls.update(kwargs)

    monkeypatch.setattr("uvicorn.run", fake_run)

    result = runner.invoke(cli.app, ["serve", "--port", "8765"])

    assert result.exit_code == 0, result.output
    assert calls["app"] == "src.bookshelf.api.http.app:app"
    assert calls["port"] == 8765
    assert calls["host"] == "localhost"
    assert calls["reload"] is False


def test_serve_passes_explicit_port_zero(monkeypatch):
    calls = {}
    monkeypatch.setattr("uvicorn.run", lambda app_path, **kwargs: calls.update(kwargs))

    result = runner.invoke(cli.app, ["serve", "--port", "0", "--host", "0.0.0.0"])

    assert result.exit_code == 0, result.output
    assert calls["port"] == 0
    assert calls["host"] == "0.0.0.0"
