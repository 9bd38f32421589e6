"""
The callbacks a TextgridReader makes while it walks a textgrid file.

Callbacks arrive in file order.  For a long format textgrid that is:

    file start time, file end time, file size
    per tier: index, class, name, start time, end time, interval/point count
    per interval: index, start time, end time, data
    per point: index, time, data
"""
from abc import ABC, abstractmethod
from typing import Generic, Optional

from textgridreader.data_classes.entry import DataType
from textgridreader.utilities.constants import TierClass


class TextgridListener(ABC, Generic[DataType]):
    @abstractmethod
    def notifyFileStartTime(self, time: float) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyFileEndTime(self, time: float) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyFileSize(self, size: int) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyTierIndex(self, index: int) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyTierClass(
        self, tierClass: Optional[TierClass]
    ) -> None:  # pragma: no cover
        """tierClass is None when the file names a class we don't know"""
        pass

    @abstractmethod
    def notifyTierName(self, name: str) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyTierStartTime(self, time: float) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyTierEndTime(self, time: float) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyTierIntervalCount(self, count: int) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyTierPointCount(self, count: int) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyIntervalIndex(self, index: int) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyIntervalStartTime(self, time: float) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyIntervalEndTime(self, time: float) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyIntervalData(self, data: DataType) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyPointIndex(self, index: int) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyPointTime(self, time: float) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def notifyPointData(self, data: DataType) -> None:  # pragma: no cover
        pass
