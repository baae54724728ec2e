"""
XP strategies - how many points an hour of study is worth.

Add a new subclass per content category. Existing strategies stay as they are.
"""

from abc import ABC, abstractmethod


class XpStrategy(ABC):
    """Maps a workload in hours to experience points."""

    name: str = ""
    xp_per_hour: float = 0.0

    @abstractmethod
    def compute_xp(self, workload_hours: int) -> float:
        """XP earned for completing `workload_hours` of content."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class JavaXpStrategy(XpStrategy):
    name = "java"
    xp_per_hour = 12.0

    def compute_xp(self, workload_hours: int) -> float:
        return workload_hours * self.xp_per_hour


class JavaScriptXpStrategy(XpStrategy):
    name = "javascript"
    xp_per_hour = 10.0

    def compute_xp(self, workload_hours: int) -> float:
        return workload_hours * self.xp_per_hour


# Strategy registry - single instance per type
STRATEGIES: dict[str, XpStrategy] = {
    JavaXpStrategy.name: JavaXpStrategy(),
    JavaScriptXpStrategy.name: JavaScriptXpStrategy(),
}


def get_strategy(name: str) -> XpStrategy:
    """Look up a strategy by its catalog name."""
    key = name.strip().lower()
    if key not in STRATEGIES:
        raise ValueError(f"Unknown XP strategy: {name}")
    return STRATEGIES[key]
