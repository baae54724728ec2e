"""
Content - the learning units a bootcamp is made of.
"""

from abc import ABC, abstractmethod
from datetime import date as Date
from pydantic import Field

from .base import BaseEntity
from .strategy import XpStrategy

XP_DEFAULT = 10.0


class Content(BaseEntity, ABC):
    """A course or mentorship that pays out XP once completed."""
    title: str
    description: str = ""

    @abstractmethod
    def compute_xp(self) -> float:
        """XP awarded for completing this content."""
        pass


class Course(Content):
    """
    A course scored by its injected strategy.

    The strategy is fixed at construction; swap categories by building
    a new course, not by mutating this one.
    """
    workload_hours: int = Field(default=0, ge=0)
    strategy: XpStrategy = Field(frozen=True)

    def compute_xp(self) -> float:
        return self.strategy.compute_xp(self.workload_hours)

    def __str__(self) -> str:
        return (
            f"Course{{title='{self.title}', description='{self.description}', "
            f"workload_hours={self.workload_hours}}}"
        )


class Mentorship(Content):
    """A mentorship session. Always worth the same XP; the date is informational."""
    date: Date = Field(default_factory=Date.today)

    def compute_xp(self) -> float:
        return XP_DEFAULT + 20.0

    def __str__(self) -> str:
        return (
            f"Mentorship{{title='{self.title}', description='{self.description}', "
            f"date={self.date.isoformat()}}}"
        )
