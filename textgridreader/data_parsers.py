"""
Parsers for the text of interval and point entries.

A data parser takes the raw text between the quotes of a 'text = "..."' or
'mark = "..."' line and returns whatever should be stored in the entry.
"""
from xml.etree import ElementTree

from textgridreader.utilities import errors


def identity(text: str) -> str:
    """Keeps the text exactly as written"""
    return text


def unescapeQuotes(text: str) -> str:
    """Praat escapes a quote mark inside a label by doubling it"""
    return text.replace('""', '"')


def xmlParser(text: str) -> ElementTree.Element:
    """Reads the text as an xml fragment

    Labels are written with praat's doubled quote escaping, so that is
    undone first.

    Raises:
        ParsingError: the text is not well-formed xml
    """
    try:
        return ElementTree.fromstring(unescapeQuotes(text))
    except ElementTree.ParseError as e:
        raise errors.ParsingError(f"Entry text is not well-formed xml: '{text}'") from e
