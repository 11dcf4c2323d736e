"""
Person Domain Services

Services:
- PersonService: SOR lookups, role validation/persistence, reconciliation
  of SOR records into canonical persons
"""

from .person_service import PersonService

__all__ = [
    'PersonService',
]
