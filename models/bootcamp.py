"""
Bootcamp - the root aggregate: catalog plus enrolled devs.
"""

from pydantic import Field

from .base import BaseEntity
from .content import Content
from .dev import Dev


class Bootcamp(BaseEntity):
    """
    A training program.

    `contents` keeps insertion order and allows the same content twice.
    `enrolled_devs` holds shared references; devs are not owned here.
    """
    name: str
    description: str = ""
    contents: list[Content] = Field(default_factory=list)
    enrolled_devs: set[Dev] = Field(default_factory=set)

    def add_content(self, content: Content) -> None:
        """Append to the catalog."""
        self.contents.append(content)
        self.touch()

    def enroll_dev(self, dev: Dev) -> None:
        """Register the dev and subscribe them to the current catalog."""
        self.enrolled_devs.add(dev)
        dev.subscribe_bootcamp(self)
        self.touch()
