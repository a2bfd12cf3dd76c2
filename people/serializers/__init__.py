"""
People Domain Serializers
"""
from .person_serializers import (
    PersonSerializer,
    PersonCreateSerializer,
    PersonUpdateSerializer
)

__all__ = [
    'PersonSerializer',
    'PersonCreateSerializer',
    'PersonUpdateSerializer',
]
