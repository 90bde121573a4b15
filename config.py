# Game Constants
CHECKPOINT_RADIUS = 400.0
COLLISION_DISTANCE = 800.0 # Two pod radii
MAX_THRUST = 100
BOOST_TOKEN = "BOOST"
SHIELD_TOKEN = "SHIELD"

# Protocol
NUM_MY_PODS = 2
NUM_OPP_PODS = 2
NUM_POD_LINES = NUM_MY_PODS + NUM_OPP_PODS

# Lap counter before the first wrap through checkpoint 0
LAP_SENTINEL = -1

from dataclasses import dataclass, field
from typing import List

@dataclass
class FlyConfig:
    # Mode switch: coast into the checkpoint when arrival is this close
    drift_steps: float = 6.0
    drift_correction: float = 3.0

    # Shield
    shield_relative_speed: float = 100.0

    # Boost gate
    boost_max_angle: float = 10.0
    boost_min_distance: float = 4000.0

    # Thrust buckets
    blast_max_angle: float = 90.0
    drift_max_angle: float = 45.0

@dataclass
class BlockConfig:
    min_speed: float = 100.0 # Floor for the assumed pursuit speed
    opponent_slot: int = 0
    thrust: int = MAX_THRUST

@dataclass
class LegacyConfig:
    drift_correction: float = 2.0
    dont_boost_before_lap: int = 0

    boost_max_angle: float = 10.0
    boost_min_distance: float = 4000.0

    max_angle: float = 90.0
    brake_distance: float = 2000.0

@dataclass
class BotConfig:
    first_strategy: str = "fly"
    second_strategy: str = "block"
    verbose: bool = False

    fly: FlyConfig = field(default_factory=FlyConfig)
    block: BlockConfig = field(default_factory=BlockConfig)
    legacy: LegacyConfig = field(default_factory=LegacyConfig)

    @property
    def strategy_names(self) -> List[str]:
        return [self.first_strategy, self.second_strategy]
