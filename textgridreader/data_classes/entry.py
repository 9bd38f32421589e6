"""An Entry is a single annotation on a tier: a duration plus its data."""
from typing import Any, Generic, TypeVar

from textgridreader.data_classes.duration import Duration

DataType = TypeVar("DataType")


class Entry(Generic[DataType]):
    __slots__ = ("_duration", "_data")

    def __init__(self, duration: Duration, data: DataType):
        self._duration = duration
        self._data = data

    @property
    def duration(self) -> Duration:
        return self._duration

    @property
    def data(self) -> DataType:
        return self._data

    @property
    def isPoint(self) -> bool:
        return self._duration.isPoint

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Entry)
            and self._duration == other._duration
            and self._data == other._data
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __lt__(self, other: "Entry") -> bool:
        return self._duration < other._duration

    def __hash__(self):
        return hash((self._duration, self._data))

    def __repr__(self):
        return f"{type(self).__name__}{(self._duration, self._data)}"
