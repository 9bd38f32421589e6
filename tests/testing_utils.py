import io
import contextlib

from textgridreader.data_classes.duration import Duration
from textgridreader.data_classes.entry import Entry
from textgridreader.data_classes.named_tier import NamedTier
from textgridreader.data_classes.textgrid_file import TextgridFile
from textgridreader.utilities.constants import TierClass


def captureStdout(func, *args, **kargs) -> str:
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        func(*args, **kargs)
    return buffer.getvalue()


def makeIntervalLines(tiers, minT=0.0, maxT=2.0):
    """Writes long format textgrid lines for interval tiers

    tiers: [(name, [(start, end, label), ...]), ...]
    """
    lines = [
        'File type = "ooTextFile"',
        'Object class = "TextGrid"',
        "",
        f"xmin = {minT} ",
        f"xmax = {maxT} ",
        "tiers? <exists> ",
        f"size = {len(tiers)} ",
        "item []: ",
    ]
    for tierNum, (name, intervals) in enumerate(tiers, 1):
        lines.extend(
            [
                f"    item [{tierNum}]:",
                '        class = "IntervalTier" ',
                f'        name = "{name}" ',
                f"        xmin = {minT} ",
                f"        xmax = {maxT} ",
                f"        intervals: size = {len(intervals)} ",
            ]
        )
        for intervalNum, (start, end, label) in enumerate(intervals, 1):
            lines.extend(
                [
                    f"        intervals [{intervalNum}]:",
                    f"            xmin = {start} ",
                    f"            xmax = {end} ",
                    f'            text = "{label}" ',
                ]
            )
    return lines


def makeIntervalTier(name="words", intervals=None, minT=0.0, maxT=5.0):
    if intervals is None:
        intervals = [(1.0, 2.0, "hello"), (3.5, 4.0, "world")]
    tier = NamedTier(TierClass.INTERVAL, name, Duration(minT, maxT), len(intervals))
    for i, (start, end, label) in enumerate(intervals, 1):
        tier.insertEntry(i, Entry(Duration(start, end), label))
    return tier


def makePointTier(name="pitch_values", points=None, minT=0.0, maxT=5.0):
    if points is None:
        points = [(1.3, "55"), (3.7, "99")]
    tier = NamedTier(TierClass.TEXT, name, Duration(minT, maxT), len(points))
    for i, (time, label) in enumerate(points, 1):
        tier.insertEntry(i, Entry(Duration(time, time), label))
    return tier


def makeTextgridFile(tiers=None, minT=0.0, maxT=5.0):
    if tiers is None:
        tiers = [makeIntervalTier(), makePointTier()]
    tgFile = TextgridFile(Duration(minT, maxT), len(tiers))
    for i, tier in enumerate(tiers, 1):
        tgFile.insertTier(i, tier)
    return tgFile
