"""
Bots module - Automatic players.

Provides:
- StrategyPolicy: Interface for move selection
- HungryPolicy: Greedy one-ply lookahead
- NaivePolicy: Up/left alternation
- STRATEGIES: Strategies by name, for the command line
"""

from .policy import StrategyPolicy, Decision, SolveResult
from .hungry import HungryPolicy
from .naive import NaivePolicy

STRATEGIES: dict[str, type[StrategyPolicy]] = {
    "hungry": HungryPolicy,
    "naive": NaivePolicy,
}


def create_strategy(name: str) -> StrategyPolicy:
    """Fresh strategy instance by name. Raises KeyError for unknown names."""
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise KeyError(f"Unknown strategy: {name!r}") from None


__all__ = [
    "StrategyPolicy",
    "Decision",
    "SolveResult",
    "HungryPolicy",
    "NaivePolicy",
    "STRATEGIES",
    "create_strategy",
]
