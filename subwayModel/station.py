class Station:
    _station_id = None
    _name = None

    def __init__(self, station_id, name):
        self._station_id = station_id
        self._name = name

    def get_id(self):
        return self._station_id

    def get_name(self):
        return self._name

    def to_dict(self):
        return {"id": self._station_id, "name": self._name}

    def __eq__(self, other):
        if not isinstance(other, Station):
            return NotImplemented
        return self._station_id == other._station_id

    def __hash__(self):
        return hash(self._station_id)

    def __repr__(self):
        return "Station(%r, %r)" % (self._station_id, self._name)
