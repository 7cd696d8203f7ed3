from subwayModel.errors import (
    BrokenPathError,
    CannotShrinkBelowOneSection,
    DisconnectedSection,
    DuplicateStationPair,
    SplitDistanceTooLong,
    StationNotOnPath,
)
from subwayModel.section import Section


def order_sections(sections):
    """
    Returns the sections in walk order, starting from the only section whose
    up station is not the down station of another section.

    Raises BrokenPathError when the sections do not form one simple path.
    """
    sections = list(sections)
    if not sections:
        raise BrokenPathError("A line needs at least one section.")

    # Format of sections_by_up is dict(up_station, Section())
    sections_by_up = {}
    down_stations = set()
    for section in sections:
        up_station = section.get_up_station()
        down_station = section.get_down_station()
        if up_station in sections_by_up:
            raise BrokenPathError("Line branches after " + up_station.get_name() + ".")
        if down_station in down_stations:
            raise BrokenPathError("Line merges before " + down_station.get_name() + ".")
        sections_by_up[up_station] = section
        down_stations.add(down_station)

    starts = [s for s in sections if s.get_up_station() not in down_stations]
    if len(starts) != 1:
        raise BrokenPathError("Line must have exactly one start station.")

    ordered = []
    current = starts[0]
    while current is not None:
        ordered.append(current)
        current = sections_by_up.get(current.get_down_station())

    # Sections left over sit on a loop that the walk never reaches.
    if len(ordered) != len(sections):
        raise BrokenPathError("Line is not connected.")

    return ordered


class LinePath:
    """
    The ordered chain of sections of one line.

    The chain is always one connected walk with no repeated station. Start,
    end and interior stations are derived from the section endpoints, and the
    walk order is rebuilt after every change. A failed insert or removal
    leaves the path as it was.
    """

    def __init__(self, sections):
        self._sections = order_sections(sections)

    def get_sections(self):
        return list(self._sections)

    def get_stations(self):
        stations = [self._sections[0].get_up_station()]
        stations.extend(section.get_down_station() for section in self._sections)
        return stations

    def get_start_station(self):
        return self._sections[0].get_up_station()

    def get_end_station(self):
        return self._sections[-1].get_down_station()

    def get_total_distance(self):
        return sum(section.get_distance() for section in self._sections)

    def contains_station(self, station):
        return station in self.get_stations()

    def __len__(self):
        return len(self._sections)

    def insert(self, up_station, down_station, distance):
        """
        Adds a section to the path, splitting an existing section when the
        new one starts or ends inside it. Returns the new section.
        """
        new_section = Section(up_station, down_station, distance)

        stations = set(self.get_stations())
        has_up = up_station in stations
        has_down = down_station in stations
        if has_up and has_down:
            raise DuplicateStationPair()
        if not has_up and not has_down:
            raise DisconnectedSection()

        # Extending at either end wins over splitting.
        if up_station == self.get_end_station() or down_station == self.get_start_station():
            sections = self._sections + [new_section]
        else:
            sections = self._split(new_section)

        self._sections = order_sections(sections)
        return new_section

    def _split(self, new_section):
        up_station = new_section.get_up_station()
        down_station = new_section.get_down_station()
        distance = new_section.get_distance()

        for index, section in enumerate(self._sections):
            matches_up = section.get_up_station() == up_station
            matches_down = section.get_down_station() == down_station
            if not (matches_up or matches_down):
                continue

            if distance >= section.get_distance():
                raise SplitDistanceTooLong()

            remainder = section.get_distance() - distance
            if matches_up:
                replacements = [
                    new_section,
                    Section(down_station, section.get_down_station(), remainder),
                ]
            else:
                replacements = [
                    Section(section.get_up_station(), up_station, remainder),
                    new_section,
                ]

            return self._sections[:index] + replacements + self._sections[index + 1 :]

        raise DisconnectedSection()

    def remove_station(self, station):
        """
        Removes a station from the path. An interior station merges its two
        sections into one covering both distances.
        """
        if not self.contains_station(station):
            raise StationNotOnPath()
        if len(self._sections) == 1:
            raise CannotShrinkBelowOneSection()

        if station == self.get_end_station():
            sections = self._sections[:-1]
        elif station == self.get_start_station():
            sections = self._sections[1:]
        else:
            index = [s.get_down_station() for s in self._sections].index(station)
            before = self._sections[index]
            after = self._sections[index + 1]
            merged = Section(
                before.get_up_station(),
                after.get_down_station(),
                before.get_distance() + after.get_distance(),
            )
            sections = self._sections[:index] + [merged] + self._sections[index + 2 :]

        self._sections = order_sections(sections)
