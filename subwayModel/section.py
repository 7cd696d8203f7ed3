from subwayModel.errors import DistanceOutOfRange, NonPositiveDistance, SameUpAndDownStation

# Distances are stored in 64-bit signed integer columns
MAX_DISTANCE = 2 ** 63 - 1


class Section:
    """
    A directed edge of a line between two stations.

    Sections have no setters: splitting or merging builds new Section values.
    A section holds no reference to its line; the Line that owns the path is
    its only owner.
    """

    _up_station = None
    _down_station = None
    _distance = None

    def __init__(self, up_station, down_station, distance):
        # bool is an int subclass but never a distance
        if isinstance(distance, bool) or not isinstance(distance, int) or distance <= 0:
            raise NonPositiveDistance()
        if distance > MAX_DISTANCE:
            raise DistanceOutOfRange()
        if up_station == down_station:
            raise SameUpAndDownStation()

        self._up_station = up_station
        self._down_station = down_station
        self._distance = distance

    def get_up_station(self):
        return self._up_station

    def get_down_station(self):
        return self._down_station

    def get_distance(self):
        return self._distance

    def get_stations(self):
        return (self._up_station, self._down_station)

    def to_dict(self):
        return {
            "up_station": self._up_station.to_dict(),
            "down_station": self._down_station.to_dict(),
            "distance": self._distance,
        }

    def __eq__(self, other):
        if not isinstance(other, Section):
            return NotImplemented
        return (
            self._up_station == other._up_station
            and self._down_station == other._down_station
            and self._distance == other._distance
        )

    def __hash__(self):
        return hash((self._up_station, self._down_station, self._distance))

    def __repr__(self):
        return "Section(%r, %r, %d)" % (
            self._up_station,
            self._down_station,
            self._distance,
        )
