"""
Various generic utility functions
"""

from typing import Any, List, NoReturn, Optional, Type

from typing_extensions import Literal

from textgridreader.utilities import errors
from textgridreader.utilities import constants


def reportNoop(_exception: Type[BaseException], _text: str) -> None:
    pass


def reportException(exception: Type[BaseException], text: str) -> NoReturn:
    raise exception(text)


def reportWarning(_exception: Type[BaseException], text: str) -> None:
    print(text)


def getErrorReporter(reportingMode: Literal["silence", "warning", "error"]):
    modeToFunc = {
        constants.ErrorReportingMode.SILENCE: reportNoop,
        constants.ErrorReportingMode.WARNING: reportWarning,
        constants.ErrorReportingMode.ERROR: reportException,
    }

    return modeToFunc[reportingMode]


def validateOption(variableName, value, optionClass):
    if value not in optionClass.validOptions:
        raise errors.WrongOption(variableName, value, optionClass.validOptions)


def ensureIndex(slots: List[Optional[Any]], index: int) -> bool:
    """
    Pads a list with None until it can hold a value at the given index

    Returns:
        True if the list was extended
    """
    if index < 0:
        raise errors.ArgumentError(f"Index must not be negative; got {index}")

    size = index + 1
    if len(slots) >= size:
        return False

    slots.extend([None] * (size - len(slots)))
    return True


def checkIsUndershoot(time: float, referenceTime: float, errorReporter) -> bool:
    if time < referenceTime:
        errorReporter(
            errors.OutOfBounds,
            f"'{time}' occurs before minimum allowed time '{referenceTime}'",
        )
        return True
    else:
        return False


def checkIsOvershoot(time: float, referenceTime: float, errorReporter) -> bool:
    if time > referenceTime:
        errorReporter(
            errors.OutOfBounds,
            f"'{time}' occurs after maximum allowed time '{referenceTime}'",
        )
        return True
    else:
        return False
