"""
A NamedTier is a named sequence of entries of a single tier class.

Interval tiers hold entries spanning a stretch of time; text tiers hold
point entries whose start and end times are equal.
"""
from typing import Any, Generic, Iterator, Optional, Tuple

from typing_extensions import Literal

from textgridreader.data_classes.child_list import ChildList
from textgridreader.data_classes.duration import Duration
from textgridreader.data_classes.entry import DataType, Entry
from textgridreader.utilities import constants
from textgridreader.utilities import errors
from textgridreader.utilities import utils
from textgridreader.utilities.constants import TierClass


class NamedTier(Generic[DataType]):
    def __init__(
        self,
        tierClass: TierClass,
        name: str,
        duration: Duration,
        declaredSize: Optional[int] = None,
    ):
        """
        Args:
            tierClass: interval or text (point) tier
            name: the tier name
            duration: the tier's (xmin, xmax)
            declaredSize: the entry count written in the file, if known
        """
        self._tierClass = tierClass
        self._name = name
        self._duration = duration
        self._declaredSize = declaredSize
        self._children: ChildList[Entry[DataType]] = ChildList()

    @property
    def tierClass(self) -> TierClass:
        return self._tierClass

    @property
    def name(self) -> str:
        return self._name

    @property
    def duration(self) -> Duration:
        return self._duration

    @property
    def declaredSize(self) -> Optional[int]:
        return self._declaredSize

    @property
    def children(self) -> ChildList[Entry[DataType]]:
        return self._children

    @property
    def entries(self) -> Tuple[Entry[DataType], ...]:
        return self._children.children

    def __len__(self):
        return self._children.populatedCount

    def __iter__(self) -> Iterator[Entry[DataType]]:
        return iter(self._children.children)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, NamedTier)
            and self._tierClass == other._tierClass
            and self._name == other._name
            and self._duration == other._duration
            and self._children == other._children
        )

    def __repr__(self):
        return (
            f"{type(self).__name__}"
            f"{(self._tierClass.value, self._name, self._duration, list(self.entries))}"
        )

    def getEntry(self, index: int) -> Optional[Entry[DataType]]:
        return self._children.get(index)

    def getIndex(self, entry: Entry[DataType]) -> int:
        return self._children.indexOf(entry)

    def insertEntry(
        self, index: int, entry: Entry[DataType]
    ) -> Optional[Entry[DataType]]:
        """Places an entry at its declared index, returning any replaced entry"""
        return self._children.setChild(index, entry)

    def sortKey(self) -> Tuple[Duration, int]:
        return (self._duration, len(self))

    def __lt__(self, other: "NamedTier") -> bool:
        return self.sortKey() < other.sortKey()

    def validate(
        self, reportingMode: Literal["silence", "warning", "error"] = "warning"
    ) -> bool:
        """
        Check the entries against the tier's invariants.

        - point entries (text tiers) start and end at the same time
        - interval entries don't end before they start
        - interval entries appear in non-decreasing order (they are never re-sorted)
        - entries sit within the tier's duration
        - the number of entries matches the declared size

        Returns:
            True if no problems were found
        """
        utils.validateOption(
            "reportingMode", reportingMode, constants.ErrorReportingMode
        )
        errorReporter = utils.getErrorReporter(reportingMode)

        isValid = True
        previous: Optional[Entry[DataType]] = None
        for index, entry in self._children.items():
            start, end = entry.duration
            if self._tierClass == TierClass.TEXT and start != end:
                isValid = False
                errorReporter(
                    errors.ArgumentError,
                    f"Point {index} in tier '{self._name}' has start time {start} "
                    f"and end time {end}",
                )
            elif start > end:
                isValid = False
                errorReporter(
                    errors.ArgumentError,
                    f"Interval {index} in tier '{self._name}' ends ({end}) "
                    f"before it starts ({start})",
                )

            if (
                self._tierClass == TierClass.INTERVAL
                and previous is not None
                and entry.duration < previous.duration
            ):
                isValid = False
                errorReporter(
                    errors.EntryOrderError,
                    f"Interval {index} in tier '{self._name}' {entry.duration} "
                    f"occurs before the interval preceding it {previous.duration}",
                )
            previous = entry

            if utils.checkIsUndershoot(start, self._duration.start, errorReporter):
                isValid = False
            if utils.checkIsOvershoot(end, self._duration.end, errorReporter):
                isValid = False

        if self._declaredSize is not None and self._declaredSize != len(self):
            isValid = False
            errorReporter(
                errors.EntryCountMismatch,
                f"Tier '{self._name}' declares {self._declaredSize} entries "
                f"but contains {len(self)}",
            )

        return isValid
