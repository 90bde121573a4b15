from abc import ABC, abstractmethod
from typing import Any, Tuple

from pilot.geometry import Point
from pilot.pod import Pod

class PodStrategy(ABC):
    """
    Abstract Base Class for per-pod decision policies.
    An instance is bound to one pod for the whole race; its fields are the
    only place race-spanning decisions (boost usage) are remembered.
    """
    name = "base"

    def __init__(self, config: Any = None):
        self.config = config
        self.pod = None
        self.used_boost = False

    def init(self, pod: Pod, race: Any):
        """Binds to the owning pod and resets race-spanning state."""
        self.pod = pod
        self.used_boost = False

    @abstractmethod
    def compute_step(self, race: Any) -> Tuple[Point, Any]:
        """
        Returns exactly one (target point, action) decision for this turn.
        Must not mutate the race context or any pod.
        """
        pass

    def corrected_target(self, goal: Point, gain: float) -> Point:
        """
        Offsets the goal against sideways drift: the velocity component
        perpendicular to the goal bearing, scaled by `gain`.
        """
        to_goal = goal - self.pod.position
        if to_goal.length2() == 0.0:
            # Sitting on the goal, no bearing to correct against
            return goal
        perp = to_goal.norm().perpendicular()
        offset = self.pod.velocity.dot(perp)
        return goal + perp.times(-gain * offset)

    def __repr__(self):
        return f"{type(self).__name__}(pod={self.pod.id if self.pod else None}, used_boost={self.used_boost})"
