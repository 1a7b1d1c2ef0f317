import pytest

from esantiye.core.config import Settings, parse_origins


def test_db_path_builds_sqlite_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_PATH", "/var/lib/esantiye/site.db")
    settings = Settings(_env_file=None)
    assert settings.sqlalchemy_url == "sqlite:////var/lib/esantiye/site.db"


def test_database_url_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_PATH", "ignored.db")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///other.db")
    settings = Settings(_env_file=None)
    assert settings.sqlalchemy_url == "sqlite:///other.db"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("*", ["*"]),
        ("", ["*"]),
        ('["http://a", "http://b"]', ["http://a", "http://b"]),
        ("http://a, http://b", ["http://a", "http://b"]),
    ],
)
def test_cors_origins_parsing(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: list[str]
) -> None:
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", raw)
    settings = Settings(_env_file=None)
    assert settings.cors_allow_origins == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("[]", ["*"]),
        ("[not json", ["[not json"]),
        (["http://a ", ""], ["http://a"]),
        (None, ["*"]),
    ],
)
def test_parse_origins_edge_cases(raw: object, expected: list[str]) -> None:
    assert parse_origins(raw) == expected
