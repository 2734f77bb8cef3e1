import unittest

from game import (
    EMPTY,
    Board,
    Direction,
    Occupied,
    coordinates_for,
    parse_direction,
    read_line,
    tile_from_value,
    tile_value,
)


def make_board(rows):
    return Board.from_rows([[tile_from_value(v) for v in row] for row in rows])


class TestTiles(unittest.TestCase):
    def test_given_values_when_building_tiles_then_empty_and_occupied(self):
        self.assertIs(tile_from_value(0), EMPTY)
        self.assertEqual(tile_from_value(8), Occupied(8))
        self.assertEqual(tile_value(Occupied(8)), 8)
        self.assertEqual(tile_value(EMPTY), 0)

    def test_given_non_positive_value_when_occupied_then_value_error(self):
        with self.assertRaises(ValueError):
            Occupied(0)
        with self.assertRaises(ValueError):
            Occupied(-2)

    def test_given_direction_names_and_keys_when_parsing_then_direction(self):
        self.assertIs(parse_direction('up'), Direction.UP)
        self.assertIs(parse_direction('LEFT'), Direction.LEFT)
        self.assertIs(parse_direction(' Right '), Direction.RIGHT)
        self.assertIs(parse_direction('s'), Direction.DOWN)
        self.assertIs(parse_direction(Direction.DOWN), Direction.DOWN)
        with self.assertRaises(ValueError):
            parse_direction('sideways')


class TestBoard(unittest.TestCase):
    def test_given_new_board_when_reading_then_all_empty(self):
        board = Board(3)
        self.assertEqual(board.dimension, 3)
        self.assertEqual(len(list(board.coords())), 9)
        self.assertTrue(all(board[c] is EMPTY for c in board.coords()))

    def test_given_rows_when_building_then_cells_match_and_snapshot_is_immutable(self):
        board = make_board([[2, 0], [0, 4]])
        self.assertEqual(board[0, 0], Occupied(2))
        self.assertEqual(board[1, 1], Occupied(4))
        snap = board.snapshot()
        board[0, 0] = EMPTY
        self.assertEqual(snap[0][0], Occupied(2))
        self.assertIsInstance(snap, tuple)

    def test_given_ragged_rows_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            make_board([[2, 0], [0]])
        with self.assertRaises(ValueError):
            make_board([])

    def test_given_board_when_set_all_and_pretty_then_rendered(self):
        board = make_board([[2, 0], [0, 128]])
        txt = board.pretty()
        self.assertIn('128', txt)
        self.assertIn('.', txt)
        board.set_all(EMPTY)
        self.assertTrue(all(board[c] is EMPTY for c in board.coords()))


class TestLineExtractor(unittest.TestCase):
    def test_given_each_direction_when_extracting_then_leading_edge_first(self):
        self.assertEqual(coordinates_for(Direction.UP, 1, 4), [(0, 1), (1, 1), (2, 1), (3, 1)])
        self.assertEqual(coordinates_for(Direction.DOWN, 1, 4), [(3, 1), (2, 1), (1, 1), (0, 1)])
        self.assertEqual(coordinates_for(Direction.LEFT, 2, 4), [(2, 0), (2, 1), (2, 2), (2, 3)])
        self.assertEqual(coordinates_for(Direction.RIGHT, 2, 4), [(2, 3), (2, 2), (2, 1), (2, 0)])

    def test_given_all_iterations_when_extracting_then_every_cell_covered_once(self):
        for direction in Direction:
            seen = [c for i in range(5) for c in coordinates_for(direction, i, 5)]
            self.assertEqual(len(seen), 25)
            self.assertEqual(len(set(seen)), 25)

    def test_given_board_when_reading_line_then_tiles_in_travel_order(self):
        board = make_board([
            [2, 4, 8],
            [0, 0, 0],
            [16, 0, 32],
        ])
        line = read_line(board, coordinates_for(Direction.RIGHT, 0, 3))
        self.assertEqual(line, [Occupied(8), Occupied(4), Occupied(2)])
        line = read_line(board, coordinates_for(Direction.DOWN, 0, 3))
        self.assertEqual(line, [Occupied(16), EMPTY, Occupied(2)])


if __name__ == '__main__':
    unittest.main(verbosity=2)
