from config import FlyConfig
from pilot.actions import Boost, Shield, FULL_THRUST, NO_THRUST
from pilot.kinematics import angle_to, distance_to, steps_to, will_collide
from pilot.strategies.base import PodStrategy

class FlyStrategy(PodStrategy):
    """
    Go as fast as possible through the checkpoints with no regard for
    other pods, except shielding against hard hits.

    Blast mode: aim at the next checkpoint, boost once on a long straight.
    Drift mode: once arrival is a few turns away, assume momentum carries
    the pod in and start turning towards the checkpoint after it.
    """
    name = "fly"

    def __init__(self, config: FlyConfig = None):
        super().__init__(config if config is not None else FlyConfig())

    def compute_step(self, race):
        if steps_to(self.pod, race.next_checkpoint(self.pod)) < self.config.drift_steps:
            return self.drift_step(race)
        return self.blast_step(race)

    def target_for_goal(self, goal):
        return self.corrected_target(goal, self.config.drift_correction)

    def should_shield_against(self, other) -> bool:
        relative_speed = (self.pod.velocity - other.velocity).length()
        return will_collide(self.pod, other) and relative_speed > self.config.shield_relative_speed

    def should_shield(self, race) -> bool:
        return any(self.should_shield_against(opp) for opp in race.opponent_pods)

    def blast_step(self, race):
        pod = self.pod
        target = self.target_for_goal(race.next_checkpoint(pod))

        if self.should_shield(race):
            return target, Shield()

        angle_diff = abs(angle_to(pod, target))
        if (not self.used_boost
                and angle_diff < self.config.boost_max_angle
                and distance_to(pod, target) > self.config.boost_min_distance):
            self.used_boost = True
            return target, Boost()

        thrust = FULL_THRUST if angle_diff < self.config.blast_max_angle else NO_THRUST
        return target, thrust

    def drift_step(self, race):
        target = self.target_for_goal(race.next_checkpoint(self.pod, 1))

        if self.should_shield(race):
            return target, Shield()

        angle_diff = abs(angle_to(self.pod, target))
        thrust = FULL_THRUST if angle_diff < self.config.drift_max_angle else NO_THRUST
        return target, thrust
