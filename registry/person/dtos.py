"""
Data Transfer Objects for the Person Domain

DTOs for service layer operations.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from datetime import date


@dataclass
class NameDTO:
    """A name as submitted by a feeding system"""
    given: str
    family: Optional[str] = ''
    middle: Optional[str] = ''
    prefix: Optional[str] = ''
    suffix: Optional[str] = ''
    name_type: Optional[str] = None


@dataclass
class IdentifierDTO:
    """An identifier as submitted by a feeding system"""
    identifier_type: str
    value: str


@dataclass
class SorPersonCreateDTO:
    """DTO for registering a System of Record person"""
    source_sor: str
    sor_id: str
    names: List[NameDTO] = field(default_factory=list)
    identifiers: List[IdentifierDTO] = field(default_factory=list)
    date_of_birth: Optional[date] = None
    gender: Optional[str] = ''
