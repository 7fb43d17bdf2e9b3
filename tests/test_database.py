import pytest

from srcm.database import Database, DatabaseError


def test_execute_and_list_tables(tmp_path):
    with Database(tmp_path / "db.sqlite") as db:
        db.execute("CREATE TABLE pacientes (id INTEGER); CREATE TABLE medicos (id INTEGER);")
        assert sorted(db.table_names()) == ["medicos", "pacientes"]


def test_empty_database_has_no_tables(tmp_path):
    with Database(tmp_path / "db.sqlite") as db:
        assert db.table_names() == []


def test_invalid_sql_raises(tmp_path):
    with Database(tmp_path / "db.sqlite") as db:
        with pytest.raises(DatabaseError):
            db.execute("NOT VALID SQL")


def test_execute_when_closed_raises(tmp_path):
    db = Database(tmp_path / "db.sqlite")
    with pytest.raises(DatabaseError):
        db.execute("CREATE TABLE t (id INTEGER)")


def test_open_in_missing_directory_raises(tmp_path):
    db = Database(tmp_path / "missing" / "db.sqlite")
    with pytest.raises(DatabaseError):
        db.open()


def test_close_reports_state(tmp_path):
    db = Database(tmp_path / "db.sqlite")
    assert db.close() is False
    db.open()
    assert db.is_open is True
    assert db.close() is True
    assert db.is_open is False


def test_context_manager_closes(tmp_path):
    with Database(tmp_path / "db.sqlite") as db:
        assert db.is_open is True
    assert db.is_open is False


def test_data_persists_between_connections(tmp_path):
    path = tmp_path / "db.sqlite"
    with Database(path) as db:
        db.execute("CREATE TABLE citas (id INTEGER); INSERT INTO citas VALUES (1);")
    with Database(path) as db:
        assert db.table_names() == ["citas"]