class LineError(Exception):
    """Base class for every error raised by the line model."""

    code = "LINE_ERROR"
    message = "Invalid line operation."

    def __init__(self, message=None):
        super().__init__(message or self.message)


class InvalidSectionError(LineError):
    """A section request that fails validation before the path is touched."""

    code = "INVALID_SECTION"


class NonPositiveDistance(InvalidSectionError):
    code = "NON_POSITIVE_DISTANCE"
    message = "Section distance must be a positive integer."


class DistanceOutOfRange(InvalidSectionError):
    code = "DISTANCE_OUT_OF_RANGE"
    message = "Section distance is larger than the line can store."


class SameUpAndDownStation(InvalidSectionError):
    code = "SAME_UP_AND_DOWN_STATION"
    message = "Up and down stations of a section must differ."


class SectionError(LineError):
    """An operation that would break the path of a line."""

    code = "SECTION_ERROR"


class DuplicateStationPair(SectionError):
    code = "DUPLICATE_STATION_PAIR"
    message = "Both stations are already on the line."


class DisconnectedSection(SectionError):
    code = "DISCONNECTED_SECTION"
    message = "Neither station is on the line."


class SplitDistanceTooLong(SectionError):
    code = "SPLIT_DISTANCE_TOO_LONG"
    message = "New section must be shorter than the section it splits."


class CannotShrinkBelowOneSection(SectionError):
    code = "CANNOT_SHRINK_BELOW_ONE_SECTION"
    message = "A line must keep at least one section."


class StationNotOnPath(SectionError):
    code = "STATION_NOT_ON_PATH"
    message = "Station is not on the line."


class BrokenPathError(LineError):
    """Stored sections do not form a single station-unique path."""

    code = "BROKEN_PATH"


SECTION_ERRORS = (
    DuplicateStationPair,
    DisconnectedSection,
    SplitDistanceTooLong,
    CannotShrinkBelowOneSection,
    StationNotOnPath,
)
