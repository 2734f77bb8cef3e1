import itertools
import unittest

from game import (
    EMPTY,
    DoubleCombine,
    DoubleMove,
    Move,
    NoAction,
    Occupied,
    SingleCombine,
    SingleMove,
    collapse,
    condense,
    convert,
    is_merge,
    resolve,
    sources,
    tile_from_value,
)


def _line(values):
    return [tile_from_value(v) for v in values]


def _apply(values, orders):
    out = list(values)
    for o in orders:
        for s in sources(o):
            out[s] = 0
        out[o.destination] = o.value
    return out


def _reference_slide(values):
    # Classic compress-then-merge, leading edge first
    non_zero = [v for v in values if v != 0]
    merged = []
    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged.append(non_zero[i] * 2)
            i += 2
        else:
            merged.append(non_zero[i])
            i += 1
    return merged + [0] * (len(values) - len(merged))


class TestCondense(unittest.TestCase):
    def test_given_tiles_in_place_when_condensing_then_no_action_tokens(self):
        self.assertEqual(condense(_line([2, 4, 0, 0])), [NoAction(0, 2), NoAction(1, 4)])

    def test_given_gaps_when_condensing_then_shifted_tiles_become_moves(self):
        self.assertEqual(condense(_line([2, 0, 4, 0])), [NoAction(0, 2), Move(2, 4)])
        self.assertEqual(condense(_line([0, 2, 0, 4])), [Move(1, 2), Move(3, 4)])

    def test_given_empty_line_when_condensing_then_nothing(self):
        self.assertEqual(condense([EMPTY] * 4), [])


class TestCollapse(unittest.TestCase):
    def test_given_quiescent_pair_when_collapsing_then_single_combine_with_incoming_source(self):
        out = collapse([NoAction(0, 2), NoAction(1, 2)])
        self.assertEqual(out, [SingleCombine(1, 4)])

    def test_given_moving_pair_when_collapsing_then_double_combine(self):
        out = collapse([Move(1, 2), Move(3, 2)])
        self.assertEqual(out, [DoubleCombine(1, 3, 4)])

    def test_given_stationary_tile_after_merge_when_collapsing_then_reclassified_as_move(self):
        out = collapse([NoAction(0, 2), NoAction(1, 2), NoAction(2, 4)])
        self.assertEqual(out, [SingleCombine(1, 4), Move(2, 4)])

    def test_given_three_equal_tiles_when_collapsing_then_one_merge_and_one_leftover(self):
        out = collapse([NoAction(0, 2), NoAction(1, 2), NoAction(2, 2)])
        self.assertEqual(out, [SingleCombine(1, 4), Move(2, 2)])

    def test_given_unequal_tokens_when_collapsing_then_unchanged(self):
        tokens = [NoAction(0, 2), NoAction(1, 4), Move(3, 8)]
        self.assertEqual(collapse(tokens), tokens)

    def test_given_combine_token_in_input_when_collapsing_then_assertion(self):
        with self.assertRaises(AssertionError):
            collapse([SingleCombine(1, 4)])
        with self.assertRaises(AssertionError):
            collapse([DoubleCombine(1, 2, 4)])


class TestConvert(unittest.TestCase):
    def test_given_tokens_when_converting_then_position_is_destination(self):
        tokens = [NoAction(0, 2), SingleCombine(2, 8), Move(3, 4), DoubleCombine(4, 5, 16)]
        self.assertEqual(convert(tokens), [
            SingleMove(2, 1, 8, was_merge=True),
            SingleMove(3, 2, 4, was_merge=False),
            DoubleMove(4, 5, 3, 16),
        ])

    def test_given_only_no_action_when_converting_then_no_orders(self):
        self.assertEqual(convert([NoAction(0, 2), NoAction(1, 4)]), [])


class TestResolveScenarios(unittest.TestCase):
    def test_given_pair_then_tile_when_resolving_then_merge_at_zero_and_move_to_one(self):
        orders = resolve(_line([2, 2, 4, 0]))
        self.assertEqual(orders, [SingleMove(1, 0, 4, True), SingleMove(2, 1, 4, False)])
        self.assertEqual(_apply([2, 2, 4, 0], orders), [4, 4, 0, 0])
        self.assertEqual(sum(o.value for o in orders if is_merge(o)), 4)

    def test_given_tile_at_far_end_when_resolving_then_single_move_to_zero(self):
        orders = resolve(_line([0, 0, 0, 2]))
        self.assertEqual(orders, [SingleMove(3, 0, 2, False)])
        self.assertEqual(_apply([0, 0, 0, 2], orders), [2, 0, 0, 0])

    def test_given_four_equal_tiles_when_resolving_then_two_merges(self):
        orders = resolve(_line([4, 4, 4, 4]))
        # The leading pair is quiescent so its merge is a single move of the second tile
        self.assertEqual(orders, [SingleMove(1, 0, 8, True), DoubleMove(2, 3, 1, 8)])
        self.assertEqual(_apply([4, 4, 4, 4], orders), [8, 8, 0, 0])
        self.assertEqual(sum(o.value for o in orders if is_merge(o)), 16)

    def test_given_gap_between_equal_tiles_when_resolving_then_merged_into_leading_tile(self):
        orders = resolve(_line([2, 0, 2, 0]))
        self.assertEqual(orders, [SingleMove(2, 0, 4, True)])
        self.assertEqual(_apply([2, 0, 2, 0], orders), [4, 0, 0, 0])

    def test_given_both_tiles_moving_when_resolving_then_double_move(self):
        self.assertEqual(resolve(_line([0, 2, 2, 0])), [DoubleMove(1, 2, 0, 4)])

    def test_given_stationary_tile_behind_merge_when_resolving_then_it_moves(self):
        orders = resolve(_line([4, 2, 2, 4]))
        self.assertEqual(orders, [SingleMove(2, 1, 4, True), SingleMove(3, 2, 4, False)])
        self.assertEqual(_apply([4, 2, 2, 4], orders), [4, 4, 4, 0])

    def test_given_quiescent_tile_after_unmerged_prefix_when_resolving_then_single_combine(self):
        self.assertEqual(resolve(_line([2, 4, 0, 4])), [SingleMove(3, 1, 8, True)])


class TestResolveProperties(unittest.TestCase):
    VALUES = (0, 2, 4, 8)

    def _lines(self, length):
        return itertools.product(self.VALUES, repeat=length)

    def test_given_all_small_lines_when_resolving_then_matches_classic_slide(self):
        for length in (2, 3, 4, 5):
            for values in self._lines(length):
                orders = resolve(_line(values))
                self.assertEqual(_apply(values, orders), _reference_slide(values), values)

    def test_given_all_small_lines_when_resolving_then_total_value_conserved(self):
        for values in self._lines(4):
            orders = resolve(_line(values))
            self.assertEqual(sum(_apply(values, orders)), sum(values), values)

    def test_given_all_small_lines_when_resolving_then_sources_unique_and_destinations_increase(self):
        for values in self._lines(5):
            orders = resolve(_line(values))
            used = [s for o in orders for s in sources(o)]
            self.assertEqual(len(used), len(set(used)), values)
            dests = [o.destination for o in orders]
            self.assertEqual(dests, sorted(set(dests)), values)
            for o in orders:
                for s in sources(o):
                    self.assertIsInstance(_line(values)[s], Occupied)
                    self.assertLessEqual(o.destination, s)

    def test_given_run_of_equal_tiles_when_resolving_then_no_triple_merge(self):
        for run in (3, 5):
            values = [2] * run
            result = _apply(values, resolve(_line(values)))
            self.assertNotIn(6, result)
            self.assertEqual(sorted(v for v in result if v), sorted([4] * (run // 2) + [2] * (run % 2)))

    def test_given_settled_line_when_resolving_then_no_orders(self):
        for values in ([2, 4, 8, 16], [2, 4, 0, 0], [8, 0, 0, 0], [0, 0, 0, 0], [2, 4, 2, 4]):
            self.assertEqual(resolve(_line(values)), [], values)


if __name__ == '__main__':
    unittest.main(verbosity=2)
