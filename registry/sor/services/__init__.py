"""
System of Record Services

Services:
- RoleIngestionService: create or replace SOR roles from incoming payloads
"""

from .role_ingestion_service import RoleIngestionService

__all__ = [
    'RoleIngestionService',
]
