import unittest

from catan_board_generator.domain.board import STANDARD_GRID
from catan_board_generator.generation.scoring import pip_value, score_numbers, vertex_pip_sums


def _empty_numbers():
    return [None] * 19


class PipValueTests(unittest.TestCase):
    def test_pip_table(self) -> None:
        self.assertEqual(pip_value(6), 5)
        self.assertEqual(pip_value(8), 5)
        self.assertEqual(pip_value(2), 1)
        self.assertEqual(pip_value(12), 1)
        self.assertEqual(pip_value(None), 0)
        self.assertEqual(pip_value(7), 0)


class VertexPipSumTests(unittest.TestCase):
    def test_empty_board_has_zero_scores(self) -> None:
        sums = vertex_pip_sums(_empty_numbers())
        self.assertEqual(len(sums), 54)
        self.assertTrue(all(vertex.score == 0 for vertex in sums.values()))
        self.assertEqual(len([vertex for vertex in sums.values() if vertex.is_interior]), 24)

    def test_shared_corner_adds_every_cell(self) -> None:
        numbers = _empty_numbers()
        numbers[9] = 6
        numbers[10] = 8
        sums = vertex_pip_sums(numbers)
        shared = [vertex for vertex in sums.values() if vertex.score == 10]
        self.assertEqual(len(shared), 2)
        for vertex in shared:
            self.assertEqual(vertex.tile_count, 3)

    def test_display_size_keeps_keys_and_scales_points(self) -> None:
        numbers = _empty_numbers()
        numbers[9] = 5
        unit = vertex_pip_sums(numbers)
        display = vertex_pip_sums(numbers, size=50.0)
        self.assertEqual(set(unit), set(display))
        for key, vertex in unit.items():
            self.assertEqual(display[key].score, vertex.score)
            self.assertAlmostEqual(display[key].point[0], vertex.point[0] * 50.0)
            self.assertAlmostEqual(display[key].point[1], vertex.point[1] * 50.0)

    def test_wrong_length_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            vertex_pip_sums([None] * 18)


class ScoreNumbersTests(unittest.TestCase):
    def test_hot_tokens_next_to_each_other_are_flagged(self) -> None:
        numbers = _empty_numbers()
        numbers[9] = 6
        numbers[10] = 8
        numbers[0] = 6
        score = score_numbers(numbers, pip_min=0, pip_max=13, no_same_neighbors=True)
        self.assertEqual(score.hot_tiles, frozenset({9, 10}))
        self.assertEqual(score.breakdown.hot_adjacency, 2)
        self.assertEqual(score.breakdown.same_number_adjacency, 0)

    def test_identical_neighbors_only_count_when_enabled(self) -> None:
        numbers = _empty_numbers()
        numbers[3] = 5
        numbers[4] = 5
        enabled = score_numbers(numbers, pip_min=0, pip_max=13, no_same_neighbors=True)
        disabled = score_numbers(numbers, pip_min=0, pip_max=13, no_same_neighbors=False)
        self.assertEqual(enabled.same_number_tiles, frozenset({3, 4}))
        self.assertEqual(enabled.breakdown.same_number_adjacency, 2)
        self.assertEqual(disabled.same_number_tiles, frozenset())
        self.assertEqual(disabled.breakdown.total, 0)

    def test_pip_bounds_use_interior_vertices_only(self) -> None:
        below = score_numbers(_empty_numbers(), pip_min=2, pip_max=13, no_same_neighbors=True)
        self.assertEqual(below.breakdown.pip_below, 24)
        self.assertEqual(below.breakdown.pip_above, 0)

        numbers = _empty_numbers()
        numbers[9] = 6
        numbers[10] = 8
        above = score_numbers(numbers, pip_min=0, pip_max=9, no_same_neighbors=True)
        self.assertEqual(above.breakdown.pip_above, 2)
        self.assertEqual(above.breakdown.pip_below, 0)
        self.assertEqual(above.breakdown.total, 4)
        for key in above.pip_above_vertices:
            self.assertTrue({9, 10}.issubset(STANDARD_GRID.vertices[key].cell_ids))
            self.assertIn(key, vertex_pip_sums(numbers, size=50.0))

    def test_upper_bound_is_inclusive(self) -> None:
        numbers = _empty_numbers()
        numbers[9] = 6
        numbers[10] = 8
        at_bound = score_numbers(numbers, pip_min=0, pip_max=10, no_same_neighbors=True)
        over_bound = score_numbers(numbers, pip_min=0, pip_max=9, no_same_neighbors=True)
        self.assertEqual(at_bound.breakdown.pip_above, 0)
        self.assertEqual(at_bound.pip_above_vertices, frozenset())
        self.assertEqual(over_bound.breakdown.pip_above, 2)

    def test_lower_bound_is_inclusive(self) -> None:
        # Every cell worth one pip puts three pips on each interior corner.
        numbers = [2] * 19
        at_bound = score_numbers(numbers, pip_min=3, pip_max=13, no_same_neighbors=False)
        under_bound = score_numbers(numbers, pip_min=4, pip_max=13, no_same_neighbors=False)
        self.assertEqual(at_bound.breakdown.pip_below, 0)
        self.assertEqual(at_bound.pip_below_vertices, frozenset())
        self.assertEqual(under_bound.breakdown.pip_below, 24)

    def test_vertex_is_never_both_below_and_above(self) -> None:
        numbers = _empty_numbers()
        numbers[9] = 6
        numbers[10] = 8
        score = score_numbers(numbers, pip_min=6, pip_max=6, no_same_neighbors=True)
        self.assertFalse(score.pip_below_vertices & score.pip_above_vertices)

    def test_scoring_is_idempotent(self) -> None:
        numbers = [5, 2, 6, 3, 8, 10, 9, 12, 11, None, 4, 8, 10, 9, 4, 5, 6, 3, 11]
        first = score_numbers(numbers, pip_min=3, pip_max=11, no_same_neighbors=True, desert_index=9)
        second = score_numbers(numbers, pip_min=3, pip_max=11, no_same_neighbors=True, desert_index=9)
        self.assertEqual(first, second)
        self.assertEqual(first.pip_below_vertices, second.pip_below_vertices)
        self.assertEqual(first.pip_above_vertices, second.pip_above_vertices)


if __name__ == "__main__":
    unittest.main()
