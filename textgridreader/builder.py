"""
Builds a TextgridFile from the callbacks of a TextgridReader.

Fields are gathered by three factories (file, tier, entry).  Each factory
commits when the field that arrives last in the file format shows up:
the tier count for the file, the interval/point count for a tier, and the
data for an entry.  Committed nodes are attached to their parent at the
index declared in the file.

A builder is not safe for use by more than one reader at a time.
"""
from typing import Generic, Optional

from textgridreader.data_classes.duration import Duration
from textgridreader.data_classes.entry import DataType, Entry
from textgridreader.data_classes.named_tier import NamedTier
from textgridreader.data_classes.textgrid_file import TextgridFile
from textgridreader.listener import TextgridListener
from textgridreader.utilities import errors
from textgridreader.utilities.constants import TierClass

_NOT_SET = object()


def _require(fieldName: str, value, nodeName: str):
    if value is None:
        raise errors.TextgridStateError(
            f"Cannot create {nodeName}: no value was given for '{fieldName}'"
        )
    return value


class _FileFactory:
    def __init__(self):
        self.clear()

    def clear(self) -> None:
        self.startTime: Optional[float] = None
        self.endTime: Optional[float] = None
        self.size: Optional[int] = None

    def create(self) -> TextgridFile:
        duration = Duration(
            _require("xmin", self.startTime, "textgrid"),
            _require("xmax", self.endTime, "textgrid"),
        )
        return TextgridFile(duration, _require("size", self.size, "textgrid"))


class _TierFactory:
    def __init__(self):
        self.parent: Optional[TextgridFile] = None
        self.clear()

    def clear(self) -> None:
        self.index: Optional[int] = None
        self.tierClass: Optional[TierClass] = None
        self.name: Optional[str] = None
        self.startTime: Optional[float] = None
        self.endTime: Optional[float] = None
        self.size: Optional[int] = None

    def create(self) -> NamedTier:
        parent = _require("textgrid", self.parent, "tier")
        index = _require("item index", self.index, "tier")
        duration = Duration(
            _require("xmin", self.startTime, "tier"),
            _require("xmax", self.endTime, "tier"),
        )
        tier: NamedTier = NamedTier(
            _require("class", self.tierClass, "tier"),
            _require("name", self.name, "tier"),
            duration,
            _require("size", self.size, "tier"),
        )
        parent.insertTier(index, tier)
        self.clear()
        return tier


class _EntryFactory:
    def __init__(self):
        self.parent: Optional[NamedTier] = None
        self.clear()

    def clear(self) -> None:
        self.index: Optional[int] = None
        self.startTime: Optional[float] = None
        self.endTime: Optional[float] = None
        # None is a legitimate datum, so a sentinel marks "not given"
        self.data = _NOT_SET

    def create(self) -> Entry:
        parent = _require("tier", self.parent, "entry")
        index = _require("index", self.index, "entry")
        duration = Duration(
            _require("start time", self.startTime, "entry"),
            _require("end time", self.endTime, "entry"),
        )
        if self.data is _NOT_SET:
            raise errors.TextgridStateError(
                "Cannot create entry: no value was given for 'data'"
            )
        entry = Entry(duration, self.data)
        parent.insertEntry(index, entry)
        self.clear()
        return entry


class TextgridFileBuilder(TextgridListener[DataType], Generic[DataType]):
    """A TextgridListener that assembles the notifications into a TextgridFile"""

    def __init__(self):
        self._fileFactory = _FileFactory()
        self._tierFactory = _TierFactory()
        self._entryFactory = _EntryFactory()
        self._currentFile: Optional[TextgridFile[DataType]] = None

    @property
    def currentFile(self) -> Optional[TextgridFile[DataType]]:
        return self._currentFile

    @property
    def currentTier(self) -> Optional[NamedTier[DataType]]:
        return self._entryFactory.parent

    @property
    def isComplete(self) -> bool:
        """True once the file header has been committed"""
        return self._currentFile is not None

    def clear(self) -> None:
        self._currentFile = None
        self._fileFactory.clear()
        self._tierFactory.clear()
        self._tierFactory.parent = None
        self._entryFactory.clear()
        self._entryFactory.parent = None

    def create(self) -> TextgridFile[DataType]:
        """Hands over the built file and readies the builder for another one

        Raises:
            IncompleteTextgridError: the file header was never completed
        """
        result = self._currentFile
        self.clear()
        if result is None:
            raise errors.IncompleteTextgridError()
        return result

    # File
    def notifyFileStartTime(self, time: float) -> None:
        self._fileFactory.startTime = time

    def notifyFileEndTime(self, time: float) -> None:
        self._fileFactory.endTime = time

    def notifyFileSize(self, size: int) -> TextgridFile[DataType]:
        self._fileFactory.size = size
        newFile = self._fileFactory.create()
        self._tierFactory.parent = newFile
        self._entryFactory.parent = None
        self._currentFile = newFile
        return newFile

    # Tiers
    def notifyTierIndex(self, index: int) -> None:
        self._tierFactory.index = index

    def notifyTierClass(self, tierClass: Optional[TierClass]) -> None:
        self._tierFactory.tierClass = tierClass

    def notifyTierName(self, name: str) -> None:
        self._tierFactory.name = name

    def notifyTierStartTime(self, time: float) -> None:
        self._tierFactory.startTime = time

    def notifyTierEndTime(self, time: float) -> None:
        self._tierFactory.endTime = time

    def notifyTierIntervalCount(self, count: int) -> NamedTier[DataType]:
        return self._notifyTierEntryCount(count)

    def notifyTierPointCount(self, count: int) -> NamedTier[DataType]:
        return self._notifyTierEntryCount(count)

    def _notifyTierEntryCount(self, count: int) -> NamedTier[DataType]:
        self._tierFactory.size = count
        newTier = self._tierFactory.create()
        self._entryFactory.parent = newTier
        return newTier

    # Entries
    def notifyIntervalIndex(self, index: int) -> None:
        self._entryFactory.index = index

    def notifyIntervalStartTime(self, time: float) -> None:
        self._entryFactory.startTime = time

    def notifyIntervalEndTime(self, time: float) -> None:
        self._entryFactory.endTime = time

    def notifyIntervalData(self, data: DataType) -> Entry[DataType]:
        return self._notifyEntryData(data)

    def notifyPointIndex(self, index: int) -> None:
        self._entryFactory.index = index

    def notifyPointTime(self, time: float) -> None:
        self._entryFactory.startTime = time
        self._entryFactory.endTime = time

    def notifyPointData(self, data: DataType) -> Entry[DataType]:
        return self._notifyEntryData(data)

    def _notifyEntryData(self, data: DataType) -> Entry[DataType]:
        self._entryFactory.data = data
        return self._entryFactory.create()
