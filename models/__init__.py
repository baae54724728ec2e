"""
Domain models for bootcamp enrollment and progress tracking.

Design principles:
- Every entity defined once
- Entities compare by identity, not by field values
- XP rules live in strategies, not in the content classes
"""

from .base import BaseEntity, TimestampMixin
from .strategy import XpStrategy, JavaXpStrategy, JavaScriptXpStrategy, STRATEGIES, get_strategy
from .content import Content, Course, Mentorship, XP_DEFAULT
from .dev import Dev
from .bootcamp import Bootcamp

__all__ = [
    # Base
    "BaseEntity",
    "TimestampMixin",
    # Strategies
    "XpStrategy",
    "JavaXpStrategy",
    "JavaScriptXpStrategy",
    "STRATEGIES",
    "get_strategy",
    # Content
    "Content",
    "Course",
    "Mentorship",
    "XP_DEFAULT",
    # Participants
    "Dev",
    "Bootcamp",
]
