from subwayModel.line_path import LinePath
from subwayModel.section import Section


class Line:
    _line_id = None
    _name = None
    _color = None
    _path = None

    def __init__(self, name, color, path, line_id=None):
        self._line_id = line_id
        self._name = name
        self._color = color
        self._path = path

    @classmethod
    def create(cls, name, color, up_station, down_station, distance):
        return cls(name, color, LinePath([Section(up_station, down_station, distance)]))

    def get_id(self):
        return self._line_id

    def set_id(self, line_id):
        self._line_id = line_id

    def get_name(self):
        return self._name

    def get_color(self):
        return self._color

    def get_path(self):
        return self._path

    def get_sections(self):
        return self._path.get_sections()

    def get_stations(self):
        return self._path.get_stations()

    def rename(self, name, color):
        self._name = name
        self._color = color

    def add_section(self, up_station, down_station, distance):
        return self._path.insert(up_station, down_station, distance)

    def remove_station(self, station):
        self._path.remove_station(station)

    def to_dict(self):
        return {
            "id": self._line_id,
            "name": self._name,
            "color": self._color,
            "stations": [station.to_dict() for station in self._path.get_stations()],
            "sections": [section.to_dict() for section in self._path.get_sections()],
            "distance": self._path.get_total_distance(),
        }
