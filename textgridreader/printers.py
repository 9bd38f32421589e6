"""
Tabular text output for textgrid data.

printTextgrid() writes a built TextgridFile; PrintingListener writes each
field as the reader finds it, without building anything.
"""
import sys
from typing import Any, Callable, Optional, TextIO

from textgridreader.data_classes.duration import Duration
from textgridreader.data_classes.entry import DataType, Entry
from textgridreader.data_classes.named_tier import NamedTier
from textgridreader.data_classes.textgrid_file import TextgridFile
from textgridreader.listener import TextgridListener
from textgridreader.utilities import my_math
from textgridreader.utilities.constants import TierClass

COLUMN_SEPARATOR = "\t"
ROW_SEPARATOR = "\n"


def _durationToStr(duration: Duration, columnSeparator: str) -> str:
    return columnSeparator.join(
        [my_math.numToStr(duration.start), my_math.numToStr(duration.end)]
    )


def printEntry(
    entry: Entry,
    out: TextIO,
    columnSeparator: str = COLUMN_SEPARATOR,
    dataPrinter: Callable[[Any], str] = str,
) -> None:
    out.write("Duration:" + columnSeparator)
    out.write(_durationToStr(entry.duration, columnSeparator) + ROW_SEPARATOR)
    out.write("Data:" + columnSeparator)
    out.write(dataPrinter(entry.data) + ROW_SEPARATOR)


def printTier(
    tier: NamedTier,
    out: TextIO,
    columnSeparator: str = COLUMN_SEPARATOR,
    dataPrinter: Callable[[Any], str] = str,
) -> None:
    out.write("Name:" + columnSeparator + tier.name + ROW_SEPARATOR)
    out.write("Class:" + columnSeparator + tier.tierClass.value + ROW_SEPARATOR)
    out.write("Duration:" + columnSeparator)
    out.write(_durationToStr(tier.duration, columnSeparator) + ROW_SEPARATOR)
    out.write("Entries:" + ROW_SEPARATOR)
    for index, entry in tier.children.items():
        out.write(f"Entry {index}" + ROW_SEPARATOR)
        printEntry(entry, out, columnSeparator, dataPrinter)


def printTextgrid(
    tgFile: TextgridFile,
    out: Optional[TextIO] = None,
    columnSeparator: str = COLUMN_SEPARATOR,
    dataPrinter: Callable[[Any], str] = str,
) -> None:
    """
    Writes a textgrid as rows of labelled, separated columns

    Args:
        tgFile: the textgrid to print
        out: a text stream; stdout if None
        columnSeparator: placed between a label and its values
        dataPrinter: converts entry data to text
    """
    if out is None:
        out = sys.stdout

    out.write("Duration:" + columnSeparator)
    out.write(_durationToStr(tgFile.duration, columnSeparator) + ROW_SEPARATOR)
    out.write("Tiers:" + ROW_SEPARATOR)
    for index, tier in tgFile.children.items():
        out.write(f"Tier {index}" + ROW_SEPARATOR)
        printTier(tier, out, columnSeparator, dataPrinter)


class PrintingListener(TextgridListener[DataType]):
    """Writes one row per field as a TextgridReader reports it"""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        columnSeparator: str = COLUMN_SEPARATOR,
        dataPrinter: Callable[[Any], str] = str,
    ):
        self.out = sys.stdout if out is None else out
        self.columnSeparator = columnSeparator
        self.dataPrinter = dataPrinter

    def _printRow(self, label: str, value: str) -> None:
        self.out.write(label + self.columnSeparator + value + ROW_SEPARATOR)

    def notifyFileStartTime(self, time: float) -> None:
        self._printRow("File start time:", my_math.numToStr(time))

    def notifyFileEndTime(self, time: float) -> None:
        self._printRow("File end time:", my_math.numToStr(time))

    def notifyFileSize(self, size: int) -> None:
        self._printRow("File size:", str(size))

    def notifyTierIndex(self, index: int) -> None:
        self._printRow("Tier:", str(index))

    def notifyTierClass(self, tierClass: Optional[TierClass]) -> None:
        self._printRow("Tier class:", "" if tierClass is None else tierClass.value)

    def notifyTierName(self, name: str) -> None:
        self._printRow("Tier name:", name)

    def notifyTierStartTime(self, time: float) -> None:
        self._printRow("Tier start time:", my_math.numToStr(time))

    def notifyTierEndTime(self, time: float) -> None:
        self._printRow("Tier end time:", my_math.numToStr(time))

    def notifyTierIntervalCount(self, count: int) -> None:
        self._printRow("Interval count:", str(count))

    def notifyTierPointCount(self, count: int) -> None:
        self._printRow("Point count:", str(count))

    def notifyIntervalIndex(self, index: int) -> None:
        self._printRow("Interval:", str(index))

    def notifyIntervalStartTime(self, time: float) -> None:
        self._printRow("Start time:", my_math.numToStr(time))

    def notifyIntervalEndTime(self, time: float) -> None:
        self._printRow("End time:", my_math.numToStr(time))

    def notifyIntervalData(self, data: DataType) -> None:
        self._printRow("Data:", self.dataPrinter(data))

    def notifyPointIndex(self, index: int) -> None:
        self._printRow("Point:", str(index))

    def notifyPointTime(self, time: float) -> None:
        self._printRow("Time:", my_math.numToStr(time))

    def notifyPointData(self, data: DataType) -> None:
        self._printRow("Data:", self.dataPrinter(data))
