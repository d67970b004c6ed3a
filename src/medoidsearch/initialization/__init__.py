"""Medoid seeding strategies."""

from .first_k import FirstKInit
from .random import RandomInit
from .kmedoids_plusplus import KMedoidsPlusPlusInit

__all__ = [
    'FirstKInit',
    'RandomInit',
    'KMedoidsPlusPlusInit'
]
