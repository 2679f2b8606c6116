"""Goal-oriented action planning: data, states, goals, actions, an A* planner and agents."""

__version__ = "0.6.0"

__all__ = [
    "action",
    "agent",
    "compare",
    "components",
    "datum",
    "demo",
    "effect",
    "goal",
    "localstate",
    "mutator",
    "planner",
    "simple",
]