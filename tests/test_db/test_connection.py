"""Tests for connection string handling."""

from bytesummary.db.connection import build_conninfo


class TestBuildConninfo:
    def test_defaults(self) -> None:
        conninfo = build_conninfo({})

        assert "dbname=bytesummary" in conninfo
        assert "host=localhost" in conninfo
        assert "password" not in conninfo

    def test_password_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("BYTESUMMARY_DB_PASSWORD", "secret")

        conninfo = build_conninfo({"password": "literal", "password_env": "BYTESUMMARY_DB_PASSWORD"})

        assert "password=secret" in conninfo

    def test_literal_password(self) -> None:
        assert "password=literal" in build_conninfo({"password": "literal"})
