"""Settings — defaults and environment overrides."""

from pathlib import Path

from munro_api.config import Settings
from munro_api.core.domain_types import RowRejectionPolicy


def test_defaults(monkeypatch):
    monkeypatch.delenv("MUNRO_CSV_PATH", raising=False)
    settings = Settings(_env_file=None)
    assert settings.munro_csv_path == Path("data/munrotab_sample.csv")
    assert settings.munro_csv_encoding == "utf-8-sig"
    assert settings.row_rejection_policy is RowRejectionPolicy.SKIP
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MUNRO_CSV_PATH", "/srv/munrotab_v6.2.csv")
    monkeypatch.setenv("ROW_REJECTION_POLICY", "ABORT")
    monkeypatch.setenv("CORS_ORIGINS", '["https://hills.example"]')
    settings = Settings(_env_file=None)
    assert settings.munro_csv_path == Path("/srv/munrotab_v6.2.csv")
    assert settings.row_rejection_policy is RowRejectionPolicy.ABORT
    assert settings.cors_origins == ["https://hills.example"]
