"""
People Domain Models

Models:
- Gender: Lookup table of gender labels (shared across people)
- Nationality: Lookup table of country codes (shared across people)
- Person: Core person record referencing one Gender and one Nationality
"""

from .gender import Gender
from .nationality import Nationality
from .person import Person

__all__ = [
    'Gender',
    'Nationality',
    'Person',
]
