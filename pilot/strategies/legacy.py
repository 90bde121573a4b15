from config import LegacyConfig, MAX_THRUST
from pilot.actions import Boost, Shield, Thrust
from pilot.kinematics import angle_to, distance_to, will_collide
from pilot.strategies.base import PodStrategy

class LegacyStrategy(PodStrategy):
    """
    Strategy used in earlier stages.
    Go to next checkpoint directly.
    Boost when heading straight towards a checkpoint.
    Shield if opponent pod is about to collide.
    """
    name = "legacy"

    def __init__(self, config: LegacyConfig = None):
        super().__init__(config if config is not None else LegacyConfig())
        self.target = None
        self.action = None

    def compute_step(self, race):
        self.target = self.compute_target(race)
        self.action = self.compute_action(race)
        return self.target, self.action

    def compute_target(self, race):
        return self.corrected_target(race.next_checkpoint(self.pod), self.config.drift_correction)

    def compute_action(self, race):
        pod = self.pod
        if any(will_collide(pod, opp) for opp in race.opponent_pods):
            return Shield()

        angle_diff = abs(angle_to(pod, self.target))
        if (not self.used_boost
                and pod.lap >= self.config.dont_boost_before_lap
                and angle_diff < self.config.boost_max_angle
                and distance_to(pod, self.target) > self.config.boost_min_distance):
            self.used_boost = True
            return Boost()

        power = MAX_THRUST if angle_diff < self.config.max_angle else 0
        if distance_to(pod, race.next_checkpoint(pod)) < self.config.brake_distance:
            # Brake into the turn
            power //= 2
        return Thrust(power)
