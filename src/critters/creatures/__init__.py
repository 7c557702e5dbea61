"""Creature controllers: one spine each, plus legs for walkers."""

from critters.creatures.base import Creature, Spine
from critters.creatures.fish import Fish
from critters.creatures.lizard import Lizard
from critters.creatures.snake import Snake

__all__ = ["Creature", "Fish", "Lizard", "Snake", "Spine"]
