from contextlib import closing
from pathlib import Path
import subway_backend.database as db

DB_FILE_PATH = 'subway.db'
STATION_NAMES = ['Gangnam', 'Yeoksam', 'Seolleung', 'Samseong', 'Jamsil']

def create_skeleton_db():
    db_file = Path(DB_FILE_PATH)
    if db_file.is_file():
        db_file.unlink()

    db.create_database(DB_FILE_PATH)

    with closing(db.connect(DB_FILE_PATH)) as connection:
        with connection:
            for name in STATION_NAMES:
                db.add_station(connection, name)

if __name__ == "__main__":
    create_skeleton_db()
