"""
State machine data models for the heroine.
"""

from enum import Enum


class StateName(str, Enum):
    """Heroine behavior states."""
    WALKING = "walking"
    JUMPING = "jumping"
