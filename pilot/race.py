from typing import List, Sequence, Tuple

from config import NUM_MY_PODS, NUM_OPP_PODS, NUM_POD_LINES
from pilot.geometry import Point
from pilot.pod import Pod

class RaceContext:
    """
    Shared world state for one race.
    Checkpoints are fixed at setup; pods are refreshed once per turn,
    before any strategy is asked for a decision.
    """
    def __init__(self, laps: int, checkpoints: Sequence[Point]):
        if not checkpoints:
            raise ValueError("A race needs at least one checkpoint")
        self.laps = laps
        self.checkpoints = tuple(checkpoints)
        self.my_pods = [Pod(i) for i in range(NUM_MY_PODS)]
        self.opponent_pods = [Pod(NUM_MY_PODS + i) for i in range(NUM_OPP_PODS)]
        self.turn = 0

    @classmethod
    def setup(cls, laps: int, checkpoints) -> "RaceContext":
        """Builds the context from raw (x, y) pairs or Points."""
        points = [cp if isinstance(cp, Point) else Point(float(cp[0]), float(cp[1])) for cp in checkpoints]
        return cls(laps, points)

    @property
    def pods(self) -> List[Pod]:
        # Referee order: mine first, then opponents
        return self.my_pods + self.opponent_pods

    def bind_strategies(self, strategies):
        if len(strategies) != NUM_MY_PODS:
            raise ValueError(f"Expected {NUM_MY_PODS} strategies, got {len(strategies)}")
        for pod, strategy in zip(self.my_pods, strategies):
            pod.bind(strategy, self)

    def update(self, states):
        """
        states: four (x, y, vx, vy, angle, next_checkpoint_id) records in
        referee order.
        """
        if len(states) != NUM_POD_LINES:
            raise ValueError(f"Expected {NUM_POD_LINES} pod states, got {len(states)}")
        for pod, state in zip(self.pods, states):
            x, y, vx, vy, angle, ncp = state
            pod.update(x, y, vx, vy, angle, ncp, len(self.checkpoints))
        self.turn += 1

    def next_checkpoint(self, pod: Pod, offset: int = 0) -> Point:
        return pod.next_checkpoint(self.checkpoints, offset)

    def is_ahead(self, a: Pod, b: Pod) -> bool:
        return a.is_ahead_of(b, self.checkpoints)

    def standings(self) -> List[Pod]:
        """All four pods, leader first."""
        return sorted(self.pods, key=lambda p: p.progress_key(self.checkpoints), reverse=True)

    def decide(self) -> List[Tuple[Point, object]]:
        """One (target, action) per controlled pod, in pod order."""
        decisions = []
        for pod in self.my_pods:
            if pod.strategy is None:
                raise RuntimeError(f"Pod {pod.id} has no strategy bound")
            decisions.append(pod.strategy.compute_step(self))
        return decisions
