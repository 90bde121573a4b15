from dataclasses import dataclass
from typing import Union

from config import MAX_THRUST, BOOST_TOKEN, SHIELD_TOKEN

@dataclass(frozen=True)
class Thrust:
    power: int

    def __post_init__(self):
        if not 0 <= self.power <= MAX_THRUST:
            raise ValueError(f"Thrust power must be in 0..{MAX_THRUST}, got {self.power}")

    def __str__(self):
        return str(int(self.power))

@dataclass(frozen=True)
class Boost:
    """One-shot boost. The strategy that emits it tracks its own usage."""

    def __str__(self):
        return BOOST_TOKEN

@dataclass(frozen=True)
class Shield:
    """Shield cooldown is enforced by the referee, not here."""

    def __str__(self):
        return SHIELD_TOKEN

Action = Union[Thrust, Boost, Shield]

FULL_THRUST = Thrust(MAX_THRUST)
NO_THRUST = Thrust(0)
