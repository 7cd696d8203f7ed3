from contextlib import closing
import sqlite3
import pandas as pd
import pytest
import subway_backend.database as db
from subwayModel.errors import SplitDistanceTooLong
from subwayModel.line import Line
from subwayModel.section import Section


@pytest.fixture
def database_path(tmp_path):
    path = str(tmp_path / "test.db")
    db.create_database(path)
    with db.write_transaction(path) as connection:
        for name in ["Gangnam", "Yeoksam", "Seolleung", "Samseong"]:
            db.add_station(connection, name)
    return path


def insert_line(database_path, name="Line 2"):
    with db.write_transaction(database_path) as connection:
        stations = db.get_stations_by_ids(connection, [1, 2])
        line = Line.create(name, "bg-green-600", stations[0], stations[1], 10)
        return db.insert_line(connection, line)


def test_get_stations_in_requested_order(database_path):
    with closing(db.connect(database_path)) as connection:
        stations = db.get_stations_by_ids(connection, [3, 1])

    assert([station.get_name() for station in stations] == ["Seolleung", "Gangnam"])


def test_get_unknown_station(database_path):
    with closing(db.connect(database_path)) as connection:
        with pytest.raises(db.RecordNotFound):
            db.get_stations_by_ids(connection, [1, 99])


def test_insert_and_load_line(database_path):
    line_id = insert_line(database_path)

    with db.write_transaction(database_path) as connection:
        line = db.load_line(connection, line_id)
        yeoksam, seolleung = db.get_stations_by_ids(connection, [2, 3])
        line.add_section(yeoksam, seolleung, 5)
        db.save_line_path(connection, line)

    with closing(db.connect(database_path)) as connection:
        line = db.load_line(connection, line_id)

    assert(line.get_name() == "Line 2")
    assert([station.get_id() for station in line.get_stations()] == [1, 2, 3])
    assert(line.get_sections()[1] == Section(line.get_stations()[1], line.get_stations()[2], 5))


def test_load_unknown_line(database_path):
    with closing(db.connect(database_path)) as connection:
        with pytest.raises(db.RecordNotFound):
            db.load_line(connection, 42)


def test_rejected_change_is_rolled_back(database_path):
    line_id = insert_line(database_path)

    with pytest.raises(SplitDistanceTooLong):
        with db.write_transaction(database_path) as connection:
            line = db.load_line(connection, line_id)
            line.rename("Changed", "bg-red-600")
            db.update_line(connection, line)
            gangnam, seolleung = db.get_stations_by_ids(connection, [1, 3])
            line.add_section(gangnam, seolleung, 10)
            db.save_line_path(connection, line)

    with closing(db.connect(database_path)) as connection:
        line = db.load_line(connection, line_id)

    assert(line.get_name() == "Line 2")
    assert(len(line.get_sections()) == 1)


def test_delete_line(database_path):
    line_id = insert_line(database_path)

    with db.write_transaction(database_path) as connection:
        db.delete_line(connection, line_id)

    with db.write_transaction(database_path) as connection:
        assert(db.load_lines(connection) == [])
        with pytest.raises(db.RecordNotFound):
            db.delete_line(connection, line_id)


def test_second_writer_waits_for_open_transaction(database_path):
    line_id = insert_line(database_path)

    with db.write_transaction(database_path) as connection:
        db.load_line(connection, line_id)

        with closing(sqlite3.connect(database_path, timeout=0)) as other_connection:
            with pytest.raises(sqlite3.OperationalError):
                other_connection.execute("BEGIN IMMEDIATE")

    # Lock is released once the first transaction commits
    with closing(sqlite3.connect(database_path, timeout=0)) as other_connection:
        other_connection.execute("BEGIN IMMEDIATE")
        other_connection.rollback()


def test_get_sections_frame(database_path):
    line_id = insert_line(database_path)
    result_set = db.get_sections_frame(database_path, line_id)

    assert(isinstance(result_set, pd.DataFrame))
    assert(list(result_set["up_station"]) == ["Gangnam"])
    assert(list(result_set["down_station"]) == ["Yeoksam"])
    assert(list(result_set["distance"]) == [10])

    with pytest.raises(db.RecordNotFound):
        db.get_sections_frame(database_path, 42)
