"""
Tests for configuration module.
"""

import pytest


class TestSettings:
    """Settings tests."""

    def test_defaults(self, monkeypatch):
        """Test defaults when no environment overrides are present."""
        from memtable.config import Settings

        for name in ("MEMTABLE_LOG_LEVEL", "MEMTABLE_THREAD_SAFE", "MEMTABLE_METRICS_ENABLED"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.thread_safe is True
        assert settings.metrics_enabled is True

    def test_env_overrides(self, monkeypatch):
        """Test MEMTABLE_ prefixed variables are honoured."""
        from memtable.config import Settings

        monkeypatch.setenv("MEMTABLE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MEMTABLE_THREAD_SAFE", "false")
        monkeypatch.setenv("MEMTABLE_METRICS_ENABLED", "0")

        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.thread_safe is False
        assert settings.metrics_enabled is False

    def test_get_settings_is_cached(self):
        """Test get_settings returns one shared instance."""
        from memtable.config import get_settings

        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestExceptions:
    """Exception tests."""

    def test_table_already_exists(self):
        from memtable.exceptions import MemtableException, TableAlreadyExistsException

        exc = TableAlreadyExistsException("users")
        assert isinstance(exc, MemtableException)
        assert exc.code == "TABLE_ALREADY_EXISTS"
        assert exc.message == "Table users already exists."
        assert exc.details == {"table": "users"}

    def test_table_does_not_exist(self):
        from memtable.exceptions import TableDoesNotExistException

        exc = TableDoesNotExistException("users")
        assert exc.code == "TABLE_DOES_NOT_EXIST"
        assert exc.table_name == "users"
        assert str(exc) == "Table users does not exist."

    def test_unknown_column(self):
        from memtable.exceptions import UnknownColumnException

        exc = UnknownColumnException("extra", "users")
        assert exc.code == "UNKNOWN_COLUMN"
        assert exc.details == {"column": "extra", "table": "users"}

    def test_type_mismatch(self):
        from memtable.exceptions import TypeMismatchException

        exc = TypeMismatchException("age", "users", "number")
        assert exc.code == "TYPE_MISMATCH"
        assert exc.details["expected_type"] == "number"
        assert "Expected number." in exc.message

    def test_schema_validation_without_errors(self):
        from memtable.exceptions import SchemaValidationException

        exc = SchemaValidationException("users")
        assert exc.code == "SCHEMA_VALIDATION_ERROR"
        assert exc.details == {"table": "users"}

    @pytest.mark.parametrize(
        "exc_name",
        [
            "TableAlreadyExistsException",
            "TableDoesNotExistException",
            "UnknownColumnException",
            "TypeMismatchException",
            "SchemaValidationException",
        ],
    )
    def test_exported_from_package(self, exc_name):
        import memtable

        assert issubclass(getattr(memtable, exc_name), memtable.MemtableException)
