"""Enums for model fields."""

from enum import Enum


class Difficulty(str, Enum):
    """How hard a recipe is to prepare."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"
    EXPERT = "EXPERT"

    @property
    def label(self) -> str:
        """Human readable label for views."""
        return self.value.capitalize()
