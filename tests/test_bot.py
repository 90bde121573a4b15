import unittest
from unittest.mock import MagicMock
import sys
import os
import io

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bot import Bot
from config import BotConfig
from pilot.strategies.block import BlockStrategy
from pilot.strategies.fly import FlyStrategy
from pilot.strategies.legacy import LegacyStrategy

SETUP = "3\n3\n0 0\n10000 0\n10000 8000\n"
TURN = "0 0 0 0 0 1\n0 3000 0 0 0 1\n5000 5000 0 0 0 1\n-5000 -5000 0 0 0 1\n"

def run_bot(text, config=None, **kwargs):
    out = io.StringIO()
    bot = Bot(config, stdin=io.StringIO(text), stdout=out, **kwargs)
    turns = bot.run()
    return bot, turns, out.getvalue().splitlines()

class TestBot(unittest.TestCase):
    def test_two_turns(self):
        bot, turns, lines = run_bot(SETUP + TURN + TURN)
        self.assertEqual(turns, 2)
        self.assertEqual(lines, [
            "10000 0 BOOST",
            "5000 5000 100",
            "10000 0 100",
            "5000 5000 100",
        ])

    def test_default_strategies(self):
        bot, _, _ = run_bot(SETUP)
        self.assertIsInstance(bot.race.my_pods[0].strategy, FlyStrategy)
        self.assertIsInstance(bot.race.my_pods[1].strategy, BlockStrategy)

    def test_configured_strategies(self):
        config = BotConfig(first_strategy="legacy", second_strategy="fly")
        bot, turns, lines = run_bot(SETUP + TURN, config)
        self.assertIsInstance(bot.race.my_pods[0].strategy, LegacyStrategy)
        self.assertIsInstance(bot.race.my_pods[1].strategy, FlyStrategy)
        # Legacy waits for lap 0 before boosting
        self.assertEqual(lines[0], "10000 0 100")

    def test_strategies_persist_between_turns(self):
        bot, _, _ = run_bot(SETUP + TURN * 5)
        fly = bot.race.my_pods[0].strategy
        self.assertTrue(fly.used_boost)
        self.assertEqual(bot.race.turn, 5)

    def test_partial_turn_ends_loop(self):
        _, turns, lines = run_bot(SETUP + TURN + "0 0 0 0 0 1\n")
        self.assertEqual(turns, 1)
        self.assertEqual(len(lines), 2)

    def test_verbose_logs_to_callback(self):
        mock_cb = MagicMock()
        run_bot(SETUP + TURN, BotConfig(verbose=True), logger_callback=mock_cb)
        messages = [call.args[0] for call in mock_cb.call_args_list]
        self.assertTrue(messages[0].startswith("Race: 3 laps"))
        self.assertTrue(any("BOOST" in m for m in messages))
        self.assertIn("Input closed after 1 turns", messages[-1])

    def test_quiet_by_default(self):
        mock_cb = MagicMock()
        run_bot(SETUP + TURN, logger_callback=mock_cb)
        mock_cb.assert_not_called()

if __name__ == '__main__':
    unittest.main()
