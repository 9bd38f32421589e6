"""
The line-by-line state machine for long format textgrid files.

Each Section is a kind of line the reader expects next.  A section is bound
to one pattern and one handler.  parseLine() matches the line against the
pattern of the current section; on a match the handler converts the
captured value, notifies the reader, and names the next section.  Lines
that don't match are skipped.

The interval and point sections loop until a line starts a new tier:

    FILE_START_TIME -> FILE_END_TIME -> FILE_TIER_COUNT -> TIER_START
    TIER_START -> TIER_CLASS -> TIER_NAME -> TIER_START_TIME -> TIER_END_TIME
    TIER_END_TIME -> TIER_INTERVAL_COUNT -> INTERVAL_START
                  -> TIER_POINT_COUNT -> POINT_START
    INTERVAL_START -> INTERVAL_START_TIME -> INTERVAL_END_TIME -> INTERVAL_DATA
    INTERVAL_DATA -> INTERVAL_START
    POINT_START -> POINT_TIME -> POINT_DATA -> POINT_START
"""
import enum
import re
from typing import TYPE_CHECKING, Callable, Dict, Match, Pattern

from typing_extensions import Final

from textgridreader.utilities import errors
from textgridreader.utilities.constants import TierClass

if TYPE_CHECKING:
    from textgridreader.textgrid_reader import TextgridReader


class Section(enum.Enum):
    FILE_START_TIME = "file start time"
    FILE_END_TIME = "file end time"
    FILE_TIER_COUNT = "file tier count"
    TIER_START = "tier start"
    TIER_CLASS = "tier class"
    TIER_NAME = "tier name"
    TIER_START_TIME = "tier start time"
    TIER_END_TIME = "tier end time"
    TIER_INTERVAL_COUNT = "tier interval count"
    TIER_POINT_COUNT = "tier point count"
    INTERVAL_START = "interval start"
    INTERVAL_START_TIME = "interval start time"
    INTERVAL_END_TIME = "interval end time"
    INTERVAL_DATA = "interval data"
    POINT_START = "point start"
    POINT_TIME = "point time"
    POINT_DATA = "point data"


# Sections between two complete nodes; input may end in any of these
RESTING_SECTIONS: Final = frozenset(
    [Section.TIER_START, Section.INTERVAL_START, Section.POINT_START]
)

# Accepts anything number-like; toFloat() rejects malformed values
_NUMBER = r"([-+]?[\d.]+(?:[eE][-+]?\d+)?)"
_INDEX = r"\s*\[\s*(\d+)\s*\]\s*:\s*"


def _field(name: str, valuePattern: str) -> Pattern[str]:
    return re.compile(r"\s*" + name + r"\s*=\s*" + valuePattern + r"\s*")


_START_TIME_PATTERN = _field("xmin", _NUMBER)
_END_TIME_PATTERN = _field("xmax", _NUMBER)

PATTERNS: Final[Dict[Section, Pattern[str]]] = {
    Section.FILE_START_TIME: _START_TIME_PATTERN,
    Section.FILE_END_TIME: _END_TIME_PATTERN,
    Section.FILE_TIER_COUNT: _field("size", r"(\d+)"),
    Section.TIER_START: re.compile(r"\s*item" + _INDEX),
    Section.TIER_CLASS: _field("class", r'"(.*)"'),
    Section.TIER_NAME: _field("name", r'"(.*)"'),
    Section.TIER_START_TIME: _START_TIME_PATTERN,
    Section.TIER_END_TIME: _END_TIME_PATTERN,
    Section.TIER_INTERVAL_COUNT: _field(r"intervals\s*:\s*size", r"(\d+)"),
    Section.TIER_POINT_COUNT: _field(r"points\s*:\s*size", r"(\d+)"),
    Section.INTERVAL_START: re.compile(r"\s*intervals" + _INDEX),
    Section.INTERVAL_START_TIME: _START_TIME_PATTERN,
    Section.INTERVAL_END_TIME: _END_TIME_PATTERN,
    Section.INTERVAL_DATA: _field("text", r'"(.*)"'),
    Section.POINT_START: re.compile(r"\s*points" + _INDEX),
    # Praat itself writes 'number = ...' for points
    Section.POINT_TIME: _field("(?:time|number)", _NUMBER),
    Section.POINT_DATA: _field("mark", r'"(.*)"'),
}


def toFloat(match: Match[str]) -> float:
    try:
        return float(match.group(1))
    except ValueError:
        raise errors.ParsingError(
            f"Could not read '{match.group(1)}' as a number in line '{match.string}'"
        )


def toInt(match: Match[str]) -> int:
    try:
        return int(match.group(1))
    except ValueError:
        raise errors.ParsingError(
            f"Could not read '{match.group(1)}' as an integer in line '{match.string}'"
        )


def _handleFileStartTime(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyFileStartTime(toFloat(match))
    return Section.FILE_END_TIME


def _handleFileEndTime(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyFileEndTime(toFloat(match))
    return Section.FILE_TIER_COUNT


def _handleFileTierCount(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyFileSize(toInt(match))
    return Section.TIER_START


def _handleTierStart(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyTierIndex(toInt(match))
    return Section.TIER_CLASS


def _handleTierClass(match: Match[str], reader: "TextgridReader") -> Section:
    reader.notifyTierClassName(match.group(1))
    return Section.TIER_NAME


def _handleTierName(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyTierName(match.group(1))
    return Section.TIER_START_TIME


def _handleTierStartTime(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyTierStartTime(toFloat(match))
    return Section.TIER_END_TIME


def _handleTierEndTime(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyTierEndTime(toFloat(match))

    tierClass = reader.currentTierClass
    if tierClass == TierClass.INTERVAL:
        return Section.TIER_INTERVAL_COUNT
    elif tierClass == TierClass.TEXT:
        return Section.TIER_POINT_COUNT
    else:
        raise errors.UnrecognizedTierClass(reader.currentTierClassName)


def _handleTierIntervalCount(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyTierIntervalCount(toInt(match))
    return Section.INTERVAL_START


def _handleTierPointCount(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyTierPointCount(toInt(match))
    return Section.POINT_START


def _handleIntervalStart(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyIntervalIndex(toInt(match))
    return Section.INTERVAL_START_TIME


def _handleIntervalStartTime(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyIntervalStartTime(toFloat(match))
    return Section.INTERVAL_END_TIME


def _handleIntervalEndTime(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyIntervalEndTime(toFloat(match))
    return Section.INTERVAL_DATA


def _handleIntervalData(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyIntervalData(reader.parseEntryData(match.group(1)))
    return Section.INTERVAL_START


def _handlePointStart(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyPointIndex(toInt(match))
    return Section.POINT_TIME


def _handlePointTime(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyPointTime(toFloat(match))
    return Section.POINT_DATA


def _handlePointData(match: Match[str], reader: "TextgridReader") -> Section:
    reader.listener.notifyPointData(reader.parseEntryData(match.group(1)))
    return Section.POINT_START


_HANDLERS: Final[Dict[Section, Callable[[Match[str], "TextgridReader"], Section]]] = {
    Section.FILE_START_TIME: _handleFileStartTime,
    Section.FILE_END_TIME: _handleFileEndTime,
    Section.FILE_TIER_COUNT: _handleFileTierCount,
    Section.TIER_START: _handleTierStart,
    Section.TIER_CLASS: _handleTierClass,
    Section.TIER_NAME: _handleTierName,
    Section.TIER_START_TIME: _handleTierStartTime,
    Section.TIER_END_TIME: _handleTierEndTime,
    Section.TIER_INTERVAL_COUNT: _handleTierIntervalCount,
    Section.TIER_POINT_COUNT: _handleTierPointCount,
    Section.INTERVAL_START: _handleIntervalStart,
    Section.INTERVAL_START_TIME: _handleIntervalStartTime,
    Section.INTERVAL_END_TIME: _handleIntervalEndTime,
    Section.INTERVAL_DATA: _handleIntervalData,
    Section.POINT_START: _handlePointStart,
    Section.POINT_TIME: _handlePointTime,
    Section.POINT_DATA: _handlePointData,
}

# A line that doesn't continue the tier may begin the next one
_REENTRY_SECTIONS: Final = frozenset([Section.INTERVAL_START, Section.POINT_START])


def parseLine(section: Section, line: str, reader: "TextgridReader") -> Section:
    """Parses one line in the given section and returns the section to expect next"""
    match = PATTERNS[section].fullmatch(line)
    if match:
        return _HANDLERS[section](match, reader)

    if section in _REENTRY_SECTIONS:
        tierMatch = PATTERNS[Section.TIER_START].fullmatch(line)
        if tierMatch:
            return _HANDLERS[Section.TIER_START](tierMatch, reader)

    return section
