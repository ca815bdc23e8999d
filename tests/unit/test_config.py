"""Unit tests for caseflow.config."""

import io
from pathlib import Path

import pytest

from caseflow import config

# pylint: disable=magic-value-comparison


def test_get_db_url_reads_env(monkeypatch):
    """The URL comes straight from CASEFLOW_DB_URL."""
    monkeypatch.setenv("CASEFLOW_DB_URL", "sqlite:///cases.db")
    assert config.get_db_url() == "sqlite:///cases.db"


@pytest.mark.parametrize("value", [None, ""])
def test_get_db_url_missing(monkeypatch, value):
    """Unset or empty CASEFLOW_DB_URL raises DatabaseUrlNotSetError."""
    if value is None:
        monkeypatch.delenv("CASEFLOW_DB_URL", raising=False)
    else:
        monkeypatch.setenv("CASEFLOW_DB_URL", value)
    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()


def test_id_scheme_defaults_to_uuid4(monkeypatch):
    """Without CASEFLOW_ID_SCHEME ids are UUIDv4."""
    monkeypatch.delenv("CASEFLOW_ID_SCHEME", raising=False)
    assert config.get_id_scheme() == "uuid4"
    monkeypatch.setenv("CASEFLOW_ID_SCHEME", "ulid")
    assert config.get_id_scheme() == "ulid"


def test_alembic_config_points_at_packaged_scripts():
    """script_location is the package's alembic directory with env.py inside."""
    cfg = config.build_alembic_config()
    location = Path(cfg.get_main_option("script_location"))
    assert (location / "env.py").is_file()
    assert (location / "versions").is_dir()
    assert cfg.get_main_option("sqlalchemy.url") is None


def test_alembic_config_carries_url_and_stdout():
    """The URL and output stream are passed through."""
    out = io.StringIO()
    cfg = config.build_alembic_config("sqlite:///x.db", stdout=out)
    assert cfg.get_main_option("sqlalchemy.url") == "sqlite:///x.db"
    assert cfg.stdout is out
