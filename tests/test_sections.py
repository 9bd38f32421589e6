import unittest
from unittest import mock

from textgridreader import data_parsers
from textgridreader import sections
from textgridreader.listener import TextgridListener
from textgridreader.sections import Section
from textgridreader.textgrid_reader import TextgridReader
from textgridreader.utilities import errors
from textgridreader.utilities.constants import TierClass

from tests.textgridreader_test_case import TextgridReaderTestCase


def makeReader(dataParser=data_parsers.identity):
    listener = mock.Mock(spec=TextgridListener)
    return TextgridReader(dataParser, listener), listener


class TestSections(TextgridReaderTestCase):
    def test_every_section_has_a_pattern(self):
        self.assertEqual(set(Section), set(sections.PATTERNS.keys()))

    def test_file_header_lines_move_to_the_next_section(self):
        reader, listener = makeReader()

        section = sections.parseLine(Section.FILE_START_TIME, "xmin = 0 ", reader)
        self.assertEqual(Section.FILE_END_TIME, section)
        section = sections.parseLine(section, "xmax = 2.5 ", reader)
        self.assertEqual(Section.FILE_TIER_COUNT, section)
        section = sections.parseLine(section, "size = 3 ", reader)
        self.assertEqual(Section.TIER_START, section)

        listener.notifyFileStartTime.assert_called_once_with(0.0)
        listener.notifyFileEndTime.assert_called_once_with(2.5)
        listener.notifyFileSize.assert_called_once_with(3)

    def test_unmatched_lines_are_skipped(self):
        reader, listener = makeReader()

        for line in ['File type = "ooTextFile"', "", "tiers? <exists> "]:
            section = sections.parseLine(Section.FILE_START_TIME, line, reader)
            self.assertEqual(Section.FILE_START_TIME, section)

        self.assertEqual([], listener.method_calls)

    def test_whitespace_around_equals_is_tolerated(self):
        reader, listener = makeReader()

        section = sections.parseLine(Section.TIER_NAME, '\tname="words"', reader)
        self.assertEqual(Section.TIER_START_TIME, section)
        section = sections.parseLine(section, "   xmin   =   1.25   ", reader)
        self.assertEqual(Section.TIER_END_TIME, section)

        listener.notifyTierName.assert_called_once_with("words")
        listener.notifyTierStartTime.assert_called_once_with(1.25)

    def test_tier_start_does_not_match_the_item_list_header(self):
        reader, listener = makeReader()

        section = sections.parseLine(Section.TIER_START, "item []: ", reader)

        self.assertEqual(Section.TIER_START, section)
        listener.notifyTierIndex.assert_not_called()

    def test_tier_class_is_looked_up_by_exact_name(self):
        reader, listener = makeReader()

        sections.parseLine(Section.TIER_CLASS, 'class = "TextTier" ', reader)
        self.assertEqual(TierClass.TEXT, reader.currentTierClass)
        listener.notifyTierClass.assert_called_with(TierClass.TEXT)

        sections.parseLine(Section.TIER_CLASS, 'class = "texttier" ', reader)
        self.assertIsNone(reader.currentTierClass)
        listener.notifyTierClass.assert_called_with(None)

    def test_tier_end_time_branches_on_tier_class(self):
        reader, _ = makeReader()

        sections.parseLine(Section.TIER_CLASS, 'class = "IntervalTier"', reader)
        section = sections.parseLine(Section.TIER_END_TIME, "xmax = 2", reader)
        self.assertEqual(Section.TIER_INTERVAL_COUNT, section)

        sections.parseLine(Section.TIER_CLASS, 'class = "TextTier"', reader)
        section = sections.parseLine(Section.TIER_END_TIME, "xmax = 2", reader)
        self.assertEqual(Section.TIER_POINT_COUNT, section)

    def test_tier_end_time_raises_error_for_unknown_tier_class(self):
        reader, _ = makeReader()

        sections.parseLine(Section.TIER_CLASS, 'class = "BogusTier"', reader)
        with self.assertRaises(errors.UnrecognizedTierClass) as cm:
            sections.parseLine(Section.TIER_END_TIME, "xmax = 2", reader)

        self.assertIsInstance(cm.exception, errors.ParsingError)
        self.assertEqual("BogusTier", cm.exception.tierClassName)

    def test_interval_start_falls_back_to_tier_start(self):
        reader, listener = makeReader()

        section = sections.parseLine(Section.INTERVAL_START, "    item [2]:", reader)

        self.assertEqual(Section.TIER_CLASS, section)
        listener.notifyTierIndex.assert_called_once_with(2)
        listener.notifyIntervalIndex.assert_not_called()

    def test_point_start_falls_back_to_tier_start(self):
        reader, listener = makeReader()

        section = sections.parseLine(Section.POINT_START, "    item [4]:", reader)

        self.assertEqual(Section.TIER_CLASS, section)
        listener.notifyTierIndex.assert_called_once_with(4)

    def test_other_sections_do_not_fall_back_to_tier_start(self):
        reader, listener = makeReader()

        section = sections.parseLine(Section.INTERVAL_DATA, "    item [2]:", reader)

        self.assertEqual(Section.INTERVAL_DATA, section)
        listener.notifyTierIndex.assert_not_called()

    def test_interval_lines(self):
        reader, listener = makeReader()

        section = sections.parseLine(Section.INTERVAL_START, "intervals [7]:", reader)
        self.assertEqual(Section.INTERVAL_START_TIME, section)
        section = sections.parseLine(section, "xmin = 1.5", reader)
        self.assertEqual(Section.INTERVAL_END_TIME, section)
        section = sections.parseLine(section, "xmax = 2", reader)
        self.assertEqual(Section.INTERVAL_DATA, section)
        section = sections.parseLine(section, 'text = "say "hi" now" ', reader)
        self.assertEqual(Section.INTERVAL_START, section)

        listener.notifyIntervalIndex.assert_called_once_with(7)
        listener.notifyIntervalStartTime.assert_called_once_with(1.5)
        listener.notifyIntervalEndTime.assert_called_once_with(2.0)
        listener.notifyIntervalData.assert_called_once_with('say "hi" now')

    def test_point_time_accepts_time_and_number(self):
        reader, listener = makeReader()

        section = sections.parseLine(Section.POINT_TIME, "time = 0.5", reader)
        self.assertEqual(Section.POINT_DATA, section)
        section = sections.parseLine(Section.POINT_TIME, "number = 0.75", reader)
        self.assertEqual(Section.POINT_DATA, section)

        self.assertEqual(
            [mock.call(0.5), mock.call(0.75)],
            listener.notifyPointTime.call_args_list,
        )

    def test_numbers_with_sign_and_exponent_are_read(self):
        reader, listener = makeReader()

        sections.parseLine(Section.FILE_START_TIME, "xmin = -0 ", reader)
        sections.parseLine(Section.FILE_END_TIME, "xmax = 1e-05 ", reader)

        listener.notifyFileStartTime.assert_called_once_with(0.0)
        listener.notifyFileEndTime.assert_called_once_with(0.00001)

    def test_malformed_number_raises_parsing_error(self):
        reader, _ = makeReader()

        with self.assertRaises(errors.ParsingError) as cm:
            sections.parseLine(Section.FILE_START_TIME, "xmin = 1.2.3", reader)

        self.assertIn("1.2.3", str(cm.exception))

    def test_number_without_digits_raises_parsing_error(self):
        reader, listener = makeReader()

        for line in ["xmin = .", "xmin = -.", "xmin = +.e5"]:
            with self.assertRaises(errors.ParsingError):
                sections.parseLine(Section.FILE_START_TIME, line, reader)
        with self.assertRaises(errors.ParsingError):
            sections.parseLine(Section.POINT_TIME, "number = .", reader)

        listener.notifyFileStartTime.assert_not_called()
        listener.notifyPointTime.assert_not_called()

    def test_sign_alone_is_not_a_number(self):
        reader, listener = makeReader()

        section = sections.parseLine(Section.FILE_START_TIME, "xmin = - ", reader)

        self.assertEqual(Section.FILE_START_TIME, section)
        listener.notifyFileStartTime.assert_not_called()

    def test_data_parser_errors_become_parsing_errors(self):
        def failingParser(text):
            raise ValueError("no good")

        reader, listener = makeReader(failingParser)

        with self.assertRaises(errors.ParsingError):
            sections.parseLine(Section.POINT_DATA, 'mark = "x"', reader)
        listener.notifyPointData.assert_not_called()


if __name__ == "__main__":
    unittest.main()
