"""
Test per la fusione di sequenze di sottotitoli
"""
import unittest

from subtitle_toolkit.core import Subtitle, merge_subtitles, parse_srt
from subtitle_toolkit.core.merger import calculate_offset, renumber
from subtitle_toolkit.services.errors import ValidationError


FIRST = "1\n00:00:01,000 --> 00:00:04,000\nFirst subtitle\n"
SECOND = "1\n00:00:01,000 --> 00:00:05,000\nSecond file subtitle\n"
THIRD = "1\n00:00:01,000 --> 00:00:03,000\nThird subtitle\n"


class TestMergeSubtitles(unittest.TestCase):
    """Fusione sequenziale con buffer"""

    def test_empty_input(self):
        self.assertEqual(merge_subtitles([], 100), [])

    def test_single_sequence_passes_through(self):
        result = merge_subtitles([parse_srt(FIRST)], 100)
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].text, "First subtitle")
        self.assertEqual(result[0].start_time, 1.0)
        self.assertEqual(result[0].end_time, 4.0)

    def test_single_sequence_only_renumbered(self):
        seq = [
            Subtitle(7, 0.5, 1.5, "a"),
            Subtitle(3, 2.0, 3.25, "b"),
        ]
        result = merge_subtitles([seq], 100)
        self.assertEqual([(s.start_time, s.end_time, s.text) for s in result],
                         [(s.start_time, s.end_time, s.text) for s in seq])
        self.assertEqual([s.index for s in result], [1, 2])

    def test_two_files_are_sequential_with_buffer(self):
        result = merge_subtitles([parse_srt(FIRST), parse_srt(SECOND)], 100)
        self.assertEqual(len(result), 2)
        self.assertEqual(result[0].start_time, 1.0)
        self.assertEqual(result[0].end_time, 4.0)
        self.assertAlmostEqual(result[1].start_time, 4.1)
        self.assertAlmostEqual(result[1].end_time, 8.1)
        self.assertEqual(result[1].text, "Second file subtitle")
        self.assertAlmostEqual(result[-1].end_time - result[0].start_time, 7.1)

    def test_three_files_keep_spacing(self):
        result = merge_subtitles([parse_srt(FIRST), parse_srt(SECOND), parse_srt(THIRD)], 100)
        times = [(s.start_time, s.end_time) for s in result]
        expected = [(1.0, 4.0), (4.1, 8.1), (8.2, 10.2)]
        for (start, end), (exp_start, exp_end) in zip(times, expected):
            self.assertAlmostEqual(start, exp_start)
            self.assertAlmostEqual(end, exp_end)
        self.assertAlmostEqual(result[-1].end_time - result[0].start_time, 9.2)

    def test_no_overlap_between_adjacent_subtitles(self):
        sequences = [parse_srt(FIRST), parse_srt(SECOND), parse_srt(THIRD)]
        result = merge_subtitles(sequences, 250)
        for prev, nxt in zip(result, result[1:]):
            self.assertGreaterEqual(nxt.start_time, prev.end_time)

    def test_late_starting_file_is_not_shifted(self):
        late = [Subtitle(1, 20.0, 22.0, "late")]
        result = merge_subtitles([parse_srt(FIRST), late], 100)
        self.assertEqual(result[1].start_time, 20.0)
        self.assertEqual(result[1].end_time, 22.0)

    def test_intra_file_timing_is_preserved(self):
        second = [Subtitle(1, 0.0, 1.0, "x"), Subtitle(2, 3.0, 4.5, "y")]
        result = merge_subtitles([parse_srt(FIRST), second], 500)
        self.assertAlmostEqual(result[1].start_time, 4.5)
        self.assertAlmostEqual(result[2].start_time - result[1].start_time, 3.0)
        self.assertAlmostEqual(result[2].duration, 1.5)

    def test_empty_sequences_are_skipped(self):
        result = merge_subtitles([[], parse_srt(FIRST), [], parse_srt(SECOND)], 100)
        self.assertEqual(len(result), 2)
        self.assertEqual(result[0].start_time, 1.0)
        self.assertAlmostEqual(result[1].start_time, 4.1)

    def test_renumbers_regardless_of_input_indices(self):
        sequences = [
            [Subtitle(5, 0.0, 1.0, "a")],
            [Subtitle(12, 0.0, 1.0, "b")],
            [Subtitle(3, 0.0, 1.0, "c")],
        ]
        result = merge_subtitles(sequences, 0)
        self.assertEqual([s.index for s in result], [1, 2, 3])

    def test_inputs_are_not_mutated(self):
        seq = parse_srt(SECOND)
        original = list(seq)
        merge_subtitles([parse_srt(FIRST), seq], 100)
        self.assertEqual(seq, original)
        self.assertEqual(seq[0].start_time, 1.0)

    def test_negative_buffer_rejected(self):
        with self.assertRaises(ValidationError):
            merge_subtitles([parse_srt(FIRST)], -1)

    def test_non_numeric_buffer_rejected(self):
        for buffer_ms in ('200', None, True):
            with self.subTest(buffer_ms=buffer_ms):
                with self.assertRaises(ValidationError):
                    merge_subtitles([parse_srt(FIRST)], buffer_ms)


class TestMergeHelpers(unittest.TestCase):

    def test_offset_zero_before_first_sequence(self):
        self.assertEqual(calculate_offset(0.0, 5.0, 100), 0.0)

    def test_offset_is_never_negative(self):
        self.assertEqual(calculate_offset(4.0, 10.0, 100), 0.0)

    def test_offset_positive_when_needed(self):
        self.assertAlmostEqual(calculate_offset(4.0, 1.0, 100), 3.1)

    def test_renumber_returns_new_instances(self):
        subs = [Subtitle(9, 0.0, 1.0, "a")]
        result = renumber(subs)
        self.assertEqual(result[0].index, 1)
        self.assertEqual(subs[0].index, 9)


if __name__ == "__main__":
    unittest.main()
