"""Creates the creature roster for a session."""

import logging
from typing import Optional

from critters.core.math_utils import PointLike
from critters.creatures.base import Creature
from critters.creatures.config import CreatureConfigs
from critters.creatures.fish import Fish
from critters.creatures.lizard import Lizard
from critters.creatures.snake import Snake

logger = logging.getLogger(__name__)


def build_creatures(origin: PointLike, configs: Optional[CreatureConfigs] = None) -> list[Creature]:
    """Fish, snake and lizard, all starting at *origin*."""
    configs = configs or CreatureConfigs()
    creatures = [
        Fish(origin, configs.fish),
        Snake(origin, configs.snake),
        Lizard(origin, configs.lizard),
    ]
    logger.info("Built %d creatures at (%.0f, %.0f)", len(creatures), origin[0], origin[1])
    return creatures
