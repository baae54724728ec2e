"""
Single entry point for calling code.

Pure delegation to Bootcamp and Dev - no rules live here.
"""

from typing import Optional

from models import Bootcamp, Content, Course, Dev, Mentorship
from registry import BootcampRegistry, get_registry


class BootcampFacade:
    """Narrow API over a registry's bootcamp."""

    def __init__(self, registry: Optional[BootcampRegistry] = None):
        self._registry = registry or get_registry()

    @property
    def bootcamp(self) -> Bootcamp:
        return self._registry.bootcamp

    def enroll_dev(self, dev: Dev) -> None:
        self.bootcamp.enroll_dev(dev)

    def add_course(self, course: Course) -> None:
        self.bootcamp.add_content(course)

    def add_mentorship(self, mentorship: Mentorship) -> None:
        self.bootcamp.add_content(mentorship)

    def progress_dev(self, dev: Dev) -> Optional[Content]:
        return dev.progress()

    def total_xp_of(self, dev: Dev) -> float:
        return dev.total_xp()
