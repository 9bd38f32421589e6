from typing import List


class TextgridReaderException(Exception):
    pass


class FileNotFound(TextgridReaderException):
    def __init__(self, fullPath: str):
        super(FileNotFound, self).__init__()
        self.fullPath = fullPath

    def __str__(self):
        return "File not found:\n%s" % self.fullPath


class ArgumentError(TextgridReaderException):
    pass


class WrongOption(TextgridReaderException):
    def __init__(self, argumentName: str, givenValue: str, availableOptions: List[str]):
        self.argumentName = argumentName
        self.givenValue = givenValue
        self.availableOptions = availableOptions

    def __str__(self):
        return (
            f"For argument '{self.argumentName}' was given the value '{self.givenValue}'. "
            f"However, expected one of [{', '.join(self.availableOptions)}]"
        )


class ParsingError(TextgridReaderException):
    pass


class UnrecognizedTierClass(ParsingError):
    def __init__(self, tierClassName: str):
        super(UnrecognizedTierClass, self).__init__()
        self.tierClassName = tierClassName

    def __str__(self):
        return (
            f"Unrecognized tier class '{self.tierClassName}'. "
            "Expected one of [IntervalTier, TextTier]"
        )


class IncompleteTextgridError(ParsingError):
    def __str__(self):
        return "Input ended before the declared textgrid structure was complete"


class TextgridStateError(TextgridReaderException):
    pass


class OutOfBounds(TextgridReaderException):
    pass


class EntryOrderError(TextgridReaderException):
    pass


class EntryCountMismatch(TextgridReaderException):
    pass


class DuplicateTierName(TextgridReaderException):
    pass
