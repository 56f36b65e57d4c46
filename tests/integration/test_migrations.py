import sqlite3

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator


@pytest.fixture
def temp_db_path(tmp_path):
    return str(tmp_path / "test_db.sqlite")


def table_names(db_path: str) -> set[str]:
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
        return {row[0] for row in rows}
    finally:
        conn.close()


def test_migrator_applies_initial(temp_db_path):
    applied = SQLiteMigrator(temp_db_path).run_migrations()

    assert applied == ["0001_initial.sql"]
    assert {"_migrations", "vehicles", "expenses"} <= table_names(temp_db_path)


def test_migrator_idempotent(temp_db_path):
    migrator = SQLiteMigrator(temp_db_path, "migrations")
    migrator.run_migrations()
    assert migrator.run_migrations() == []


def test_down_section_not_applied(temp_db_path, tmp_path):
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "0001_t.sql").write_text(
        "CREATE TABLE t (id INTEGER);\n-- Down\nDROP TABLE t;\n"
    )
    SQLiteMigrator(temp_db_path, str(migrations)).run_migrations()
    assert "t" in table_names(temp_db_path)


def test_failed_migration_raises(temp_db_path, tmp_path):
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "0001_bad.sql").write_text("CREATE TABLE (;")
    with pytest.raises(RuntimeError, match="0001_bad.sql"):
        SQLiteMigrator(temp_db_path, str(migrations)).run_migrations()
