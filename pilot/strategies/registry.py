from typing import Dict, Type

from config import BotConfig
from pilot.strategies.base import PodStrategy
from pilot.strategies.block import BlockStrategy
from pilot.strategies.fly import FlyStrategy
from pilot.strategies.legacy import LegacyStrategy

STRATEGIES: Dict[str, Type[PodStrategy]] = {
    FlyStrategy.name: FlyStrategy,
    BlockStrategy.name: BlockStrategy,
    LegacyStrategy.name: LegacyStrategy,
}

def build_strategy(name: str, config: BotConfig = None) -> PodStrategy:
    """Fresh strategy instance tuned from the matching BotConfig section."""
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{name}'. Choose from: {', '.join(sorted(STRATEGIES))}")
    if config is None:
        config = BotConfig()
    return STRATEGIES[name](getattr(config, name))
