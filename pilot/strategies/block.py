import math

from config import BlockConfig
from pilot.actions import Thrust
from pilot.strategies.base import PodStrategy

class BlockStrategy(PodStrategy):
    """
    Intercept the lead opponent pod.

    The blocked pod is fixed to one opponent slot at init and never
    retargeted, even if the other opponent takes the lead.
    """
    name = "block"

    def __init__(self, config: BlockConfig = None):
        super().__init__(config if config is not None else BlockConfig())
        self.blocked_pod = None

    def init(self, pod, race):
        super().init(pod, race)
        self.blocked_pod = race.opponent_pods[self.config.opponent_slot]

    def compute_step(self, race):
        return self.compute_target(), Thrust(self.config.thrust)

    def compute_target(self):
        speed = max(self.config.min_speed, self.pod.velocity.length())
        t, ok = self.compute_hit_time(speed)
        if not ok:
            return self.blocked_pod.position
        return self.blocked_pod.position + self.blocked_pod.velocity.times(t)

    def compute_hit_time(self, speed):
        """
        Earliest t >= 0 where a pursuer at `speed` meets the blocked pod's
        linearly extrapolated position. Returns (t, found).
        """
        v2 = self.blocked_pod.velocity
        delta = self.blocked_pod.position - self.pod.position
        a = v2.length2() - speed * speed
        b = 2 * delta.dot(v2)
        c = delta.length2()
        disc = b * b - 4 * a * c
        if a == 0.0 or disc < 0.0:
            return 0.0, False

        root = math.sqrt(disc)
        t = (-b - root) / (2 * a)
        if t < 0:
            t = (-b + root) / (2 * a)
        if t < 0:
            return 0.0, False
        return t, True
