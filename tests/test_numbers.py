import unittest

from catan_board_generator.domain.board import NUMBER_TOKENS
from catan_board_generator.generation.numbers import deal_tokens, generate_numbers
from catan_board_generator.generation.scoring import score_numbers
from catan_board_generator.generation.types import NumberLayerConfig


class NumberLayerTests(unittest.TestCase):
    def test_number_tokens_cover_official_set(self) -> None:
        config = NumberLayerConfig()
        for desert_index in (0, 9, 18):
            layer = generate_numbers(desert_index, config, seed=desert_index)
            self.assertIsNone(layer.numbers[desert_index])
            tokens = [token for token in layer.numbers if token is not None]
            self.assertEqual(len(tokens), 18)
            self.assertEqual(sorted(tokens), sorted(NUMBER_TOKENS))

    def test_best_total_never_exceeds_first_trial(self) -> None:
        config = NumberLayerConfig(pip_min=2, pip_max=13, no_same_neighbors=True)
        for seed in range(10):
            first = generate_numbers(9, config, seed=seed, max_trials=1)
            best = generate_numbers(9, config, seed=seed)
            self.assertEqual(first.trials, 1)
            self.assertLessEqual(best.trials, 7_000)
            self.assertGreaterEqual(best.breakdown.total, 0)
            self.assertLessEqual(best.breakdown.total, first.breakdown.total)

    def test_breakdown_matches_rescoring(self) -> None:
        config = NumberLayerConfig(pip_min=4, pip_max=11, no_same_neighbors=True)
        layer = generate_numbers(4, config, seed=21)
        rescored = score_numbers(
            layer.numbers,
            pip_min=config.pip_min,
            pip_max=config.pip_max,
            no_same_neighbors=config.no_same_neighbors,
            desert_index=4,
        )
        self.assertEqual(rescored.breakdown, layer.breakdown)
        self.assertEqual(rescored.hot_tiles, layer.hot_tiles)
        self.assertEqual(rescored.same_number_tiles, layer.same_number_tiles)
        self.assertEqual(rescored.pip_below_vertices, layer.pip_below_vertices)
        self.assertEqual(rescored.pip_above_vertices, layer.pip_above_vertices)

    def test_zero_violation_layer_stops_early(self) -> None:
        config = NumberLayerConfig(no_same_neighbors=False)
        for seed in range(20):
            layer = generate_numbers(9, config, seed=seed)
            if layer.breakdown.total == 0:
                self.assertEqual(layer.hot_tiles, frozenset())
                self.assertLess(layer.trials, 7_000)
                return
        self.fail("No clean number layer found in 20 seeds.")

    def test_same_seed_reproduces_layer(self) -> None:
        config = NumberLayerConfig(pip_min=3, pip_max=12)
        self.assertEqual(
            generate_numbers(12, config, seed=404),
            generate_numbers(12, config, seed=404),
        )

    def test_zero_budget_returns_empty_layer(self) -> None:
        layer = generate_numbers(9, NumberLayerConfig(), seed=5, max_trials=0)
        self.assertEqual(layer.numbers, (None,) * 19)
        self.assertEqual(layer.breakdown.total, 0)
        self.assertEqual(layer.trials, 0)

    def test_invalid_inputs_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            generate_numbers(19, NumberLayerConfig())
        with self.assertRaises(ValueError):
            NumberLayerConfig(pip_min=7, pip_max=6)
        with self.assertRaises(ValueError):
            NumberLayerConfig(pip_min=1)
        with self.assertRaises(ValueError):
            NumberLayerConfig(pip_max=14)
        with self.assertRaises(ValueError):
            deal_tokens(list(NUMBER_TOKENS[:-1]), 9, 19)

    def test_deal_skips_desert(self) -> None:
        numbers = deal_tokens(list(NUMBER_TOKENS), 0, 19)
        self.assertIsNone(numbers[0])
        self.assertEqual(numbers[1:], list(NUMBER_TOKENS))


if __name__ == "__main__":
    unittest.main()
