import os
import sqlite3
from contextlib import closing, contextmanager
import pandas

from subwayModel.line import Line
from subwayModel.line_path import LinePath
from subwayModel.section import Section
from subwayModel.station import Station


SQL_FILE_PATH = os.path.join(os.path.dirname(__file__), "skeleton.sql")

# Largest value an INTEGER column can hold
MAX_SQLITE_INTEGER = 2 ** 63 - 1


class RecordNotFound(LookupError):
    """Raised when a line or station id does not exist."""


def connect(database_path):
    connection = sqlite3.connect(database_path)
    connection.execute("PRAGMA foreign_keys = ON")
    return connection


def create_database(database_path, sql_file_path=SQL_FILE_PATH):
    """
    Creates (or empties) the database using the schema script
    """
    with open(sql_file_path, "r") as sql_file:
        sql = sql_file.read()

    with closing(connect(database_path)) as connection:
        connection.executescript(sql)


@contextmanager
def write_transaction(database_path):
    """
    Yields a connection that holds the database write lock until the block
    ends. Only one writer can be inside a block at a time, so a line is
    loaded, changed and saved without another change landing in between.
    Commits when the block succeeds and rolls back when it raises.
    """
    connection = connect(database_path)
    try:
        connection.execute("BEGIN IMMEDIATE")
        yield connection
        connection.commit()
    except Exception:
        connection.rollback()
        raise
    finally:
        connection.close()


def add_station(connection, name):
    cursor = connection.execute("INSERT INTO station (name) VALUES (?)", (name,))
    return Station(cursor.lastrowid, name)


def get_stations_by_ids(connection, station_ids):
    """
    Gets the stations for the given ids, in the order requested
    """
    placeholders = ", ".join("?" for _ in station_ids)
    rows = connection.execute(
        "SELECT id, name FROM station WHERE id IN (" + placeholders + ")",
        list(station_ids),
    ).fetchall()

    stations = {row[0]: Station(row[0], row[1]) for row in rows}
    for station_id in station_ids:
        if station_id not in stations:
            raise RecordNotFound(
                "Station with id, " + str(station_id) + ", did not exist."
            )

    return [stations[station_id] for station_id in station_ids]


def load_line(connection, line_id):
    row = connection.execute(
        "SELECT id, name, color FROM line WHERE id = ?", (line_id,)
    ).fetchone()
    if row is None:
        raise RecordNotFound("Line with id, " + str(line_id) + ", did not exist.")

    rows = connection.execute(
        """
        SELECT  section.up_station_id,
                up_station.name,
                section.down_station_id,
                down_station.name,
                section.distance
        FROM    section
                JOIN station AS up_station ON up_station.id = section.up_station_id
                JOIN station AS down_station ON down_station.id = section.down_station_id
        WHERE   section.line_id = ?
        ORDER BY section.position""",
        (line_id,),
    ).fetchall()

    sections = [
        Section(Station(up_id, up_name), Station(down_id, down_name), distance)
        for up_id, up_name, down_id, down_name, distance in rows
    ]

    return Line(row[1], row[2], LinePath(sections), line_id=row[0])


def load_lines(connection):
    line_ids = [row[0] for row in connection.execute("SELECT id FROM line ORDER BY id")]
    return [load_line(connection, line_id) for line_id in line_ids]


def insert_line(connection, line):
    cursor = connection.execute(
        "INSERT INTO line (name, color) VALUES (?, ?)",
        (line.get_name(), line.get_color()),
    )
    line.set_id(cursor.lastrowid)
    save_line_path(connection, line)

    return line.get_id()


def update_line(connection, line):
    cursor = connection.execute(
        "UPDATE line SET name = ?, color = ? WHERE id = ?",
        (line.get_name(), line.get_color(), line.get_id()),
    )
    if cursor.rowcount == 0:
        raise RecordNotFound(
            "Line with id, " + str(line.get_id()) + ", did not exist."
        )


def save_line_path(connection, line):
    """
    Replaces the stored sections of a line with its current path
    """
    connection.execute("DELETE FROM section WHERE line_id = ?", (line.get_id(),))
    connection.executemany(
        """
        INSERT INTO section (line_id, position, up_station_id, down_station_id, distance)
        VALUES (?, ?, ?, ?, ?)""",
        [
            (
                line.get_id(),
                position,
                section.get_up_station().get_id(),
                section.get_down_station().get_id(),
                section.get_distance(),
            )
            for position, section in enumerate(line.get_sections())
        ],
    )


def delete_line(connection, line_id):
    connection.execute("DELETE FROM section WHERE line_id = ?", (line_id,))
    cursor = connection.execute("DELETE FROM line WHERE id = ?", (line_id,))
    if cursor.rowcount == 0:
        raise RecordNotFound("Line with id, " + str(line_id) + ", did not exist.")


def get_sections_frame(database_path, line_id):
    """
    Gets the sections of a line in walk order, one row per section
    """
    with closing(connect(database_path)) as connection:
        load_line(connection, line_id)

        result_set = pandas.read_sql(
            """
            SELECT  section.position AS position,
                    section.up_station_id AS up_station_id,
                    up_station.name AS up_station,
                    section.down_station_id AS down_station_id,
                    down_station.name AS down_station,
                    section.distance AS distance
            FROM    section
                    JOIN station AS up_station ON up_station.id = section.up_station_id
                    JOIN station AS down_station ON down_station.id = section.down_station_id
            WHERE   section.line_id = ?
            ORDER BY section.position""",
            connection,
            params=(line_id,),
        )

    return result_set
