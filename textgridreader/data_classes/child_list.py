"""
A ChildList is an index-addressable list of owned children.

Slots are addressed by the index declared in the textgrid file (1-based in
practice), so the list may contain None placeholders.  A reverse map from
child identity to slot index is kept alongside the slots; every insertion
and removal updates both or neither.
"""
from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from textgridreader.utilities import errors
from textgridreader.utilities import utils

ChildType = TypeVar("ChildType")


class ChildList(Generic[ChildType]):
    def __init__(self):
        self._slots: List[Optional[ChildType]] = []
        self._indices: Dict[int, int] = {}

    def __len__(self):
        return len(self._slots)

    def __iter__(self) -> Iterator[Optional[ChildType]]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> Optional[ChildType]:
        return self._slots[index]

    def __contains__(self, child: object) -> bool:
        return id(child) in self._indices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChildList):
            return False
        # Trailing placeholders carry no data
        return list(self.items()) == list(other.items())

    def __repr__(self):
        return f"{type(self).__name__}{dict(self.items())}"

    @property
    def children(self) -> Tuple[ChildType, ...]:
        """The populated slots, in index order"""
        return tuple(child for child in self._slots if child is not None)

    @property
    def populatedCount(self) -> int:
        return len(self._indices)

    def items(self) -> Iterator[Tuple[int, ChildType]]:
        for index, child in enumerate(self._slots):
            if child is not None:
                yield index, child

    def ensureIndex(self, index: int) -> bool:
        return utils.ensureIndex(self._slots, index)

    def get(self, index: int) -> Optional[ChildType]:
        if 0 <= index < len(self._slots):
            return self._slots[index]
        return None

    def indexOf(self, child: ChildType) -> int:
        """O(1) reverse lookup; raises ValueError for unknown children"""
        try:
            return self._indices[id(child)]
        except KeyError:
            raise ValueError(f"{child!r} is not in this list")

    def setChild(self, index: int, child: ChildType) -> Optional[ChildType]:
        """Places a child at index, returning whatever was there before"""
        if child is None:
            raise errors.ArgumentError("Use removeChild() to clear a slot")
        if id(child) in self._indices:
            raise errors.ArgumentError(
                f"{child!r} is already stored at index {self._indices[id(child)]}"
            )

        self.ensureIndex(index)
        replaced = self._slots[index]
        if replaced is not None:
            del self._indices[id(replaced)]
        self._slots[index] = child
        self._indices[id(child)] = index

        return replaced

    def removeChild(self, index: int) -> Optional[ChildType]:
        removed = self.get(index)
        if removed is not None:
            del self._indices[id(removed)]
            self._slots[index] = None
        return removed
