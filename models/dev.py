"""
Dev - a bootcamp participant and the enrolled -> completed state machine.
"""

from typing import TYPE_CHECKING, Optional
from pydantic import Field

from .base import BaseEntity
from .content import Content

if TYPE_CHECKING:
    from .bootcamp import Bootcamp


class Dev(BaseEntity):
    """
    A participant tracked by two content sets.

    Each content moves one way only: not enrolled -> enrolled -> completed.
    """
    name: str
    enrolled_contents: set[Content] = Field(default_factory=set)
    completed_contents: set[Content] = Field(default_factory=set)

    def subscribe_bootcamp(self, bootcamp: "Bootcamp") -> None:
        """
        Enroll in everything currently in the bootcamp catalog.

        Completed contents are not filtered out, so re-subscribing puts
        them back in the enrolled set. Catalog items added later are not
        picked up until the next subscription.
        """
        self.enrolled_contents.update(bootcamp.contents)
        bootcamp.enrolled_devs.add(self)
        self.touch()

    def progress(self) -> Optional[Content]:
        """
        Complete one enrolled content and return it.

        Which one is unspecified: the first member in set iteration order.
        Returns None (and changes nothing) when there is nothing enrolled.
        """
        if not self.enrolled_contents:
            print(f"[{self.name}] Not enrolled in any content")
            return None

        content = next(iter(self.enrolled_contents))
        self.enrolled_contents.remove(content)
        self.completed_contents.add(content)
        self.touch()
        return content

    def total_xp(self) -> float:
        """Sum of XP over completed contents."""
        return sum((c.compute_xp() for c in self.completed_contents), 0.0)

    def to_dict(self) -> dict:
        """Export for printing."""
        return {
            "name": self.name,
            "enrolled": sorted(c.title for c in self.enrolled_contents),
            "completed": sorted(c.title for c in self.completed_contents),
            "total_xp": self.total_xp(),
        }

    def __str__(self) -> str:
        enrolled = ", ".join(str(c) for c in self.enrolled_contents)
        completed = ", ".join(str(c) for c in self.completed_contents)
        return (
            f"Dev{{name='{self.name}', enrolled_contents=[{enrolled}], "
            f"completed_contents=[{completed}]}}"
        )
