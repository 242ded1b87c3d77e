import tempfile
import unittest
from pathlib import Path

from cube_fold.engine import Marker
from cube_fold.errors import ParseError
from cube_fold.net import Tile
from cube_fold.reader import parse_input, parse_instructions, read_input
from cube_fold.space import Direction, Point, Rotation
from tests.fixtures import CROSS_LAYOUT, SAMPLE_FACE_SIZE, SAMPLE_INPUT, layout_text


class TestInstructions(unittest.TestCase):
    def test_alternating_runs_and_turns(self):
        self.assertEqual(
            parse_instructions("10R5L5R10L4R5L5"),
            [10, Rotation.RIGHT, 5, Rotation.LEFT, 5, Rotation.RIGHT, 10, Rotation.LEFT, 4, Rotation.RIGHT, 5, Rotation.LEFT, 5],
        )

    def test_leading_and_trailing_turns(self):
        self.assertEqual(parse_instructions("L12R"), [Rotation.LEFT, 12, Rotation.RIGHT])

    def test_zero_run_is_kept(self):
        self.assertEqual(parse_instructions("0L0"), [0, Rotation.LEFT, 0])

    def test_invalid_characters(self):
        for text in ("10X5", "10H5", "1 2", "5-1"):
            with self.assertRaises(ParseError, msg=text):
                parse_instructions(text)


class TestParseInput(unittest.TestCase):
    def test_sample(self):
        parsed = parse_input(SAMPLE_INPUT, SAMPLE_FACE_SIZE)
        self.assertEqual(len(parsed.net.faces), 6)
        self.assertEqual(parsed.start, Marker(Point(9, 1), Direction.RIGHT))
        self.assertEqual(len(parsed.instructions), 13)
        self.assertIs(parsed.net.get_tile(Point(12, 1)), Tile.STONE)
        self.assertIs(parsed.net.get_tile(Point(9, 1)), Tile.CLEAR)
        self.assertIsNone(parsed.net.get_tile(Point(1, 1)))

    def test_start_skips_leading_stone(self):
        text = layout_text(CROSS_LAYOUT, 2, stones={(3, 1)})
        self.assertEqual(parse_input(text, 2).start.position, Point(4, 1))

    def test_wrong_face_size_is_rejected(self):
        with self.assertRaises(ParseError):
            parse_input(SAMPLE_INPUT, 3)

    def test_ragged_face_is_rejected(self):
        text = layout_text(CROSS_LAYOUT, 2).replace("  ..\n", "  .\n", 1)
        with self.assertRaises(ParseError):
            parse_input(text, 2)

    def test_invalid_tile_character(self):
        with self.assertRaises(ParseError):
            parse_input(SAMPLE_INPUT.replace("...#", "..x#", 1), SAMPLE_FACE_SIZE)

    def test_missing_instructions(self):
        with self.assertRaises(ParseError):
            parse_input(SAMPLE_INPUT.split("\n\n")[0], SAMPLE_FACE_SIZE)
        with self.assertRaises(ParseError):
            parse_input(SAMPLE_INPUT.split("\n\n")[0] + "\n\n", SAMPLE_FACE_SIZE)

    def test_invalid_face_size(self):
        with self.assertRaises(ParseError):
            parse_input(SAMPLE_INPUT, 0)

    def test_read_input_from_file(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "input.txt"
            path.write_text(SAMPLE_INPUT, encoding="utf-8")
            parsed = read_input(path, SAMPLE_FACE_SIZE)
        self.assertEqual(parsed.start.position, Point(9, 1))


if __name__ == "__main__":
    unittest.main()
