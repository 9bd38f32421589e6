"""
Functions for reading long format textgrid files.

TextgridReader walks the lines of a textgrid and reports what it finds to a
TextgridListener.  readTextgrid() pairs a reader with a TextgridFileBuilder
and returns the resulting TextgridFile; openTextgrid() and readTextgrids()
do the same for a file on disk and for a folder of files.

https://www.fon.hum.uva.nl/praat/manual/TextGrid_file_formats.html
"""
import codecs
import io
import os
from typing import Callable, Dict, Generic, Iterable, Optional

from typing_extensions import Literal

from textgridreader import data_parsers
from textgridreader import sections
from textgridreader.builder import TextgridFileBuilder
from textgridreader.data_classes.entry import DataType
from textgridreader.data_classes.textgrid_file import TextgridFile
from textgridreader.listener import TextgridListener
from textgridreader.utilities import constants
from textgridreader.utilities import errors
from textgridreader.utilities import utils
from textgridreader.utilities.constants import TierClass

DataParser = Callable[[str], DataType]


class TextgridReader(Generic[DataType]):
    """Drives the section state machine over a stream of lines.

    The reader keeps only the current section and the last tier class it saw;
    everything else is the listener's business.
    """

    def __init__(
        self, dataParser: "DataParser[DataType]", listener: TextgridListener[DataType]
    ):
        """
        Args:
            dataParser: converts the raw text of each 'text'/'mark' line
                into the data stored in an entry
            listener: receives a callback for every field read
        """
        self.dataParser = dataParser
        self.listener = listener
        self.currentSection = sections.Section.FILE_START_TIME
        self.currentTierClass: Optional[TierClass] = None
        self.currentTierClassName: Optional[str] = None

    def read(self, lines: Iterable[str]) -> bool:
        """Parses every line in lines

        The stream is not closed; that is left to whoever opened it.

        Returns:
            True if the input ended between two complete tiers or entries
            (i.e. the declared structure was read in full)

        Raises:
            ParsingError: a field could not be converted or the tier class
                is unknown
        """
        self.currentSection = sections.Section.FILE_START_TIME
        self.currentTierClass = None
        self.currentTierClassName = None

        for line in lines:
            line = line.rstrip("\r\n")
            self.currentSection = sections.parseLine(self.currentSection, line, self)

        return self.currentSection in sections.RESTING_SECTIONS

    def notifyTierClassName(self, tierClassName: str) -> None:
        tierClass = TierClass.fromValue(tierClassName)
        self.currentTierClassName = tierClassName
        self.currentTierClass = tierClass
        self.listener.notifyTierClass(tierClass)

    def parseEntryData(self, text: str) -> DataType:
        try:
            return self.dataParser(text)
        except errors.ParsingError:
            raise
        except Exception as e:
            raise errors.ParsingError(f"Could not parse entry data '{text}': {e}") from e


def readTextgrid(
    lines: Iterable[str],
    dataParser: "DataParser[DataType]" = data_parsers.identity,
    reportingMode: Literal["silence", "warning", "error"] = "warning",
) -> TextgridFile[DataType]:
    """
    Reads a long format textgrid from an iterable of lines

    Args:
        lines: a text stream or any other iterable of lines
        dataParser: converts each entry's text into the stored data;
            by default the text is kept as is
        reportingMode: what to do when the textgrid read doesn't match its
            own declarations (counts, ordering, bounds)

    Returns:
        TextgridFile

    Raises:
        IncompleteTextgridError: the input ended before the declared
            structure was complete, including fewer tiers or entries than
            declared (raised in every reportingMode)
        ParsingError: the input could not be parsed
    """
    utils.validateOption("reportingMode", reportingMode, constants.ErrorReportingMode)

    builder: TextgridFileBuilder[DataType] = TextgridFileBuilder()
    reader = TextgridReader(dataParser, builder)
    finishedReading = reader.read(lines)
    if not finishedReading or not builder.isComplete:
        builder.clear()
        raise errors.IncompleteTextgridError()

    tgFile = builder.create()
    if _isMissingNodes(tgFile):
        raise errors.IncompleteTextgridError()
    tgFile.validate(reportingMode)

    return tgFile


def _isMissingNodes(tgFile: TextgridFile) -> bool:
    if tgFile.declaredSize is not None and len(tgFile) < tgFile.declaredSize:
        return True
    return any(
        tier.declaredSize is not None and len(tier) < tier.declaredSize
        for tier in tgFile
    )


def openTextgrid(
    fnFullPath: str,
    dataParser: "DataParser[DataType]" = data_parsers.identity,
    reportingMode: Literal["silence", "warning", "error"] = "warning",
) -> TextgridFile[DataType]:
    """
    Opens a long format textgrid file

    Praat writes textgrids as utf-16 or utf-8; both are accepted.

    Args:
        fnFullPath: the path to the textgrid to open
        dataParser: converts each entry's text into the stored data
        reportingMode: see readTextgrid()

    Returns:
        TextgridFile
    """
    utils.validateOption("reportingMode", reportingMode, constants.ErrorReportingMode)
    if not os.path.exists(fnFullPath):
        raise errors.FileNotFound(fnFullPath)

    with io.open(fnFullPath, "rb") as fd:
        rawData = fd.read()

    if rawData.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        data = rawData.decode("utf-16")
    else:
        data = rawData.decode("utf-8-sig")

    # Only \n, \r and \r\n end a line; U+2028 and friends may appear in labels
    return readTextgrid(io.StringIO(data, newline=None), dataParser, reportingMode)


def readTextgrids(
    folder: str,
    dataParser: "DataParser[DataType]" = data_parsers.identity,
    extension: str = constants.DEFAULT_EXTENSION,
    reportingMode: Literal["silence", "warning", "error"] = "warning",
) -> Dict[str, TextgridFile[DataType]]:
    """
    Opens every textgrid in a folder

    Args:
        folder: the folder to search (not recursively)
        dataParser: converts each entry's text into the stored data
        extension: only files ending in this are read (case insensitive)
        reportingMode: see readTextgrid()

    Returns:
        a dictionary mapping file names to TextgridFiles, sorted by name
    """
    if not os.path.isdir(folder):
        raise errors.FileNotFound(folder)

    extension = extension.lower()
    tgFiles: Dict[str, TextgridFile[DataType]] = {}
    for fn in sorted(os.listdir(folder)):
        fnFullPath = os.path.join(folder, fn)
        if not fn.lower().endswith(extension) or not os.path.isfile(fnFullPath):
            continue
        tgFiles[fn] = openTextgrid(fnFullPath, dataParser, reportingMode)

    return tgFiles
