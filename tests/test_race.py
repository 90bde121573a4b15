import unittest
import sys
import os
import itertools
import numpy as np

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import LAP_SENTINEL
from pilot.geometry import Point
from pilot.pod import Pod
from pilot.race import RaceContext
from pilot.strategies.fly import FlyStrategy
from pilot.strategies.block import BlockStrategy

CHECKPOINTS = [(0, 0), (10000, 0), (10000, 8000)]

def idle_state(x, y, ncp=1):
    return (x, y, 0, 0, 0, ncp)

class TestLapBookkeeping(unittest.TestCase):
    def setUp(self):
        self.race = RaceContext.setup(3, CHECKPOINTS)

    def feed(self, ncp):
        self.race.update([idle_state(0, 0, ncp)] + [idle_state(5000 * i, 5000, 1) for i in range(1, 4)])

    def test_sentinel_until_first_wrap(self):
        pod = self.race.my_pods[0]
        self.assertEqual(pod.lap, LAP_SENTINEL)
        for ncp in [1, 2]:
            self.feed(ncp)
            self.assertEqual(pod.lap, LAP_SENTINEL)
        self.feed(0)
        self.assertEqual(pod.lap, 0)

    def test_counts_each_wrap(self):
        pod = self.race.my_pods[0]
        for ncp in [1, 2, 0, 1, 2, 0, 1]:
            self.feed(ncp)
        self.assertEqual(pod.lap, 1)

    def test_first_update_never_counts(self):
        # Default index before any update is 0, not the last checkpoint
        pod = self.race.my_pods[0]
        pod.next_checkpoint_id = 2
        self.feed(0)
        self.assertEqual(pod.lap, LAP_SENTINEL)

    def test_repeated_index_does_not_count(self):
        pod = self.race.my_pods[0]
        for ncp in [2, 0, 0, 0]:
            self.feed(ncp)
        self.assertEqual(pod.lap, 0)

    def test_single_checkpoint_never_wraps(self):
        race = RaceContext.setup(3, [(500, 500)])
        for _ in range(5):
            race.update([idle_state(0, 0, 0)] * 4)
        self.assertEqual(race.my_pods[0].lap, LAP_SENTINEL)

    def test_update_sets_state(self):
        self.race.update([(1, 2, 3, 4, 45, 2)] + [idle_state(0, 0)] * 3)
        pod = self.race.my_pods[0]
        self.assertEqual(pod.position, Point(1, 2))
        self.assertEqual(pod.velocity.vx, 3)
        self.assertEqual(pod.velocity.vy, 4)
        self.assertEqual(pod.angle, 45.0)
        self.assertEqual(pod.next_checkpoint_id, 2)
        self.assertEqual(self.race.turn, 1)

    def test_update_wrong_count(self):
        with self.assertRaises(ValueError):
            self.race.update([idle_state(0, 0)] * 3)

class TestRaceContext(unittest.TestCase):
    def test_setup_accepts_points(self):
        race = RaceContext.setup(2, [Point(1, 1), (2, 2)])
        self.assertEqual(race.checkpoints, (Point(1, 1), Point(2, 2)))
        self.assertEqual(race.laps, 2)
        self.assertEqual([p.id for p in race.pods], [0, 1, 2, 3])

    def test_empty_track(self):
        with self.assertRaises(ValueError):
            RaceContext.setup(3, [])

    def test_next_checkpoint_wraps(self):
        race = RaceContext.setup(3, CHECKPOINTS)
        pod = race.my_pods[0]
        pod.next_checkpoint_id = 2
        self.assertEqual(race.next_checkpoint(pod), Point(10000, 8000))
        self.assertEqual(race.next_checkpoint(pod, 1), Point(0, 0))
        self.assertEqual(race.next_checkpoint(pod, 5), Point(10000, 0))

    def test_bind_strategies(self):
        race = RaceContext.setup(3, CHECKPOINTS)
        fly, block = FlyStrategy(), BlockStrategy()
        race.bind_strategies([fly, block])
        self.assertIs(race.my_pods[0].strategy, fly)
        self.assertIs(fly.pod, race.my_pods[0])
        self.assertIs(block.blocked_pod, race.opponent_pods[0])
        with self.assertRaises(ValueError):
            race.bind_strategies([fly])

    def test_decide_without_strategy(self):
        race = RaceContext.setup(3, CHECKPOINTS)
        with self.assertRaises(RuntimeError):
            race.decide()

class TestRanking(unittest.TestCase):
    def setUp(self):
        self.checkpoints = [Point(*cp) for cp in CHECKPOINTS]

    def pod(self, lap, ncp, x, y):
        p = Pod(0, position=Point(x, y), next_checkpoint_id=ncp)
        p.lap = lap
        return p

    def test_higher_lap_wins(self):
        leader = self.pod(1, 0, 9000, 9000)
        chaser = self.pod(0, 2, 10000, 7900)
        self.assertTrue(leader.is_ahead_of(chaser, self.checkpoints))
        self.assertFalse(chaser.is_ahead_of(leader, self.checkpoints))

    def test_checkpoint_then_distance(self):
        a = self.pod(0, 2, 0, 0)
        b = self.pod(0, 1, 9999, 0)
        self.assertTrue(a.is_ahead_of(b, self.checkpoints))
        near = self.pod(0, 1, 9000, 0)
        far = self.pod(0, 1, 5000, 0)
        self.assertTrue(near.is_ahead_of(far, self.checkpoints))
        self.assertFalse(far.is_ahead_of(near, self.checkpoints))

    def test_not_ahead_of_self(self):
        a = self.pod(0, 1, 100, 100)
        self.assertFalse(a.is_ahead_of(a, self.checkpoints))

    def test_strict_weak_ordering(self):
        rng = np.random.default_rng(42)
        pods = []
        for _ in range(25):
            lap = int(rng.integers(-1, 3))
            ncp = int(rng.integers(0, 3))
            x, y = rng.integers(0, 4, size=2) * 2500
            pods.append(self.pod(lap, ncp, float(x), float(y)))

        cps = self.checkpoints
        for a, b, c in itertools.permutations(pods, 3):
            if a.is_ahead_of(b, cps) and b.is_ahead_of(c, cps):
                self.assertTrue(a.is_ahead_of(c, cps))
        for a, b in itertools.permutations(pods, 2):
            self.assertFalse(a.is_ahead_of(b, cps) and b.is_ahead_of(a, cps))
            if a.lap > b.lap:
                self.assertTrue(a.is_ahead_of(b, cps))

    def test_standings(self):
        race = RaceContext.setup(3, CHECKPOINTS)
        race.update([
            idle_state(9000, 0, 1),
            idle_state(0, 0, 1),
            idle_state(10000, 7000, 2),
            idle_state(5000, 0, 1),
        ])
        self.assertEqual([p.id for p in race.standings()], [2, 0, 3, 1])
        self.assertTrue(race.is_ahead(race.opponent_pods[0], race.my_pods[0]))

if __name__ == '__main__':
    unittest.main()
