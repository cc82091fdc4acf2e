"""Data models."""

from .config import FoodWebConfig
from .organism import Organism

__all__ = [
    "FoodWebConfig",
    "Organism",
]
