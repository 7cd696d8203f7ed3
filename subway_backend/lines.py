from contextlib import closing
from subway_backend.app import app
import subway_backend.database as db
from subwayModel.line import Line

# Every change to a line runs inside db.write_transaction, which lets one
# writer through at a time. A rejected change raises out of the block and the
# transaction is rolled back, so the stored line is left as it was.


def create_line(database_path, name, color, up_station_id, down_station_id, distance):
    with db.write_transaction(database_path) as connection:
        up_station, down_station = db.get_stations_by_ids(
            connection, [up_station_id, down_station_id]
        )
        line = Line.create(name, color, up_station, down_station, distance)
        db.insert_line(connection, line)

    app.logger.info("Created line %s (%s)", line.get_id(), name)
    return line


def add_section(database_path, line_id, up_station_id, down_station_id, distance):
    with db.write_transaction(database_path) as connection:
        line = db.load_line(connection, line_id)
        up_station, down_station = db.get_stations_by_ids(
            connection, [up_station_id, down_station_id]
        )
        section = line.add_section(up_station, down_station, distance)
        db.save_line_path(connection, line)

    app.logger.info(
        "Added section %s -> %s (%d) to line %s",
        up_station.get_name(),
        down_station.get_name(),
        distance,
        line_id,
    )
    return section


def remove_station(database_path, line_id, station_id):
    with db.write_transaction(database_path) as connection:
        line = db.load_line(connection, line_id)
        (station,) = db.get_stations_by_ids(connection, [station_id])
        line.remove_station(station)
        db.save_line_path(connection, line)

    app.logger.info("Removed station %s from line %s", station.get_name(), line_id)


def rename(database_path, line_id, name, color):
    with db.write_transaction(database_path) as connection:
        line = db.load_line(connection, line_id)
        line.rename(name, color)
        db.update_line(connection, line)

    app.logger.info("Renamed line %s to %s (%s)", line_id, name, color)


def delete_line(database_path, line_id):
    with db.write_transaction(database_path) as connection:
        db.delete_line(connection, line_id)

    app.logger.info("Deleted line %s", line_id)


def find_all_lines(database_path):
    with closing(db.connect(database_path)) as connection:
        return db.load_lines(connection)


def find_line(database_path, line_id):
    with closing(db.connect(database_path)) as connection:
        return db.load_line(connection, line_id)
