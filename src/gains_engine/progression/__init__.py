"""Character progression: XP, levels, stats and tiers."""

from gains_engine.progression.engine import ProgressionEngine
from gains_engine.progression.rules import ProgressionResult

__all__ = ["ProgressionEngine", "ProgressionResult"]
