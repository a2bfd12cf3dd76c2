"""
People Domain Services

Services:
- EnrichmentClient: Age/gender/nationality guesses from external APIs
- PersonStore: Persistence with normalized gender/nationality lookups
- PersonService: Parsing, validation and orchestration used by the views
"""

from .enrichment_client import EnrichmentClient
from .person_store import PersonStore
from .person_service import PersonService

__all__ = [
    'EnrichmentClient',
    'PersonStore',
    'PersonService',
]
