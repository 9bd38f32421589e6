"""
A TextgridFile is the root of the model: a duration plus its tiers.

Tiers are kept in declared-index slots with a name -> tier map alongside.
"""
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple

from typing_extensions import Literal

from textgridreader.data_classes.child_list import ChildList
from textgridreader.data_classes.duration import Duration
from textgridreader.data_classes.entry import DataType, Entry
from textgridreader.data_classes.named_tier import NamedTier
from textgridreader.utilities import constants
from textgridreader.utilities import errors
from textgridreader.utilities import utils


class TextgridFile(Generic[DataType]):
    """The annotation data of a single textgrid file.

    Attributes:
        duration(Duration): the (xmin, xmax) of the file
        declaredSize(int): the tier count written in the file, if known
        tierNames(Tuple[str]): the names of the populated tiers, in index order
        tiers(Tuple[NamedTier]): the populated tiers, in index order
    """

    def __init__(self, duration: Duration, declaredSize: Optional[int] = None):
        self._duration = duration
        self._declaredSize = declaredSize
        self._children: ChildList[NamedTier[DataType]] = ChildList()
        self._tierDict: Dict[str, NamedTier[DataType]] = {}

    @property
    def duration(self) -> Duration:
        return self._duration

    @property
    def declaredSize(self) -> Optional[int]:
        return self._declaredSize

    @property
    def children(self) -> ChildList[NamedTier[DataType]]:
        return self._children

    @property
    def tiers(self) -> Tuple[NamedTier[DataType], ...]:
        return self._children.children

    @property
    def tierNames(self) -> Tuple[str, ...]:
        return tuple(tier.name for tier in self.tiers)

    def __len__(self):
        return self._children.populatedCount

    def __iter__(self) -> Iterator[NamedTier[DataType]]:
        return iter(self.tiers)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, TextgridFile)
            and self._duration == other._duration
            and self._children == other._children
        )

    def __repr__(self):
        return f"{type(self).__name__}{(self._duration, list(self.tiers))}"

    def insertTier(
        self, index: int, tier: NamedTier[DataType]
    ) -> Optional[NamedTier[DataType]]:
        """Places a tier at its declared index.

        A tier already at that index is unlinked from the name map before the
        new tier takes its place.

        Returns:
            the replaced tier, if any

        Raises:
            DuplicateTierName: another slot already holds a tier with the same name
        """
        existing = self._tierDict.get(tier.name)
        if existing is not None and self._children.indexOf(existing) != index:
            raise errors.DuplicateTierName(
                f"Tier name '{tier.name}' is already used at index "
                f"{self._children.indexOf(existing)}"
            )

        replaced = self._children.setChild(index, tier)
        if replaced is not None:
            del self._tierDict[replaced.name]
        self._tierDict[tier.name] = tier

        return replaced

    def removeTier(self, name: str) -> NamedTier[DataType]:
        tier = self._tierDict.pop(name)
        self._children.removeChild(self._children.indexOf(tier))
        return tier

    def getTier(self, tierName: str) -> NamedTier[DataType]:
        """Get the tier with the specified name"""
        return self._tierDict[tierName]

    def getTierAt(self, index: int) -> Optional[NamedTier[DataType]]:
        return self._children.get(index)

    def getIndex(self, tier: NamedTier[DataType]) -> int:
        return self._children.indexOf(tier)

    def getName(self, tier: NamedTier[DataType]) -> str:
        name = tier.name
        if self._tierDict.get(name) is not tier:
            raise ValueError(f"{tier!r} is not in this textgrid")
        return name

    def timeOrderedEntries(self) -> List[Tuple[int, int, Entry[DataType]]]:
        """All entries across all tiers as (tierIndex, entryIndex, entry)

        Sorted by entry duration, then by tier index, then by entry index.
        """
        triples = [
            (tierIndex, entryIndex, entry)
            for tierIndex, tier in self._children.items()
            for entryIndex, entry in tier.children.items()
        ]
        triples.sort(key=lambda triple: (triple[2].duration, triple[0], triple[1]))
        return triples

    def sortedTiers(self) -> List[NamedTier[DataType]]:
        """Tiers ordered by duration, then declared index, then entry count"""
        return [
            tier
            for _, tier in sorted(
                self._children.items(),
                key=lambda item: (item[1].duration, item[0], len(item[1])),
            )
        ]

    @property
    def entryCount(self) -> int:
        return sum(len(tier) for tier in self.tiers)

    def sortKey(self) -> Tuple[Duration, int, int]:
        return (self._duration, self.entryCount, len(self))

    def __lt__(self, other: "TextgridFile") -> bool:
        return self.sortKey() < other.sortKey()

    def validate(
        self, reportingMode: Literal["silence", "warning", "error"] = "warning"
    ) -> bool:
        """Validates every tier and checks that tiers fit within the file.

        Returns:
            True if no problems were found
        """
        utils.validateOption(
            "reportingMode", reportingMode, constants.ErrorReportingMode
        )
        errorReporter = utils.getErrorReporter(reportingMode)

        isValid = True
        if self._declaredSize is not None and self._declaredSize != len(self):
            isValid = False
            errorReporter(
                errors.EntryCountMismatch,
                f"Textgrid declares {self._declaredSize} tiers but contains {len(self)}",
            )

        for tier in self.tiers:
            if utils.checkIsUndershoot(
                tier.duration.start, self._duration.start, errorReporter
            ):
                isValid = False
            if utils.checkIsOvershoot(
                tier.duration.end, self._duration.end, errorReporter
            ):
                isValid = False
            if not tier.validate(reportingMode):
                isValid = False

        return isValid
