"""
Data Transfer Objects for the System of Record Domain

A RoleDTO is the service-layer form of the role payload a feeding system
submits; contact sub-records arrive as lists that replace what is stored.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from datetime import date


@dataclass
class EmailDTO:
    type: str
    address: str


@dataclass
class PhoneDTO:
    type: str
    address_type: str
    number: str
    country_code: Optional[str] = ''
    area_code: Optional[str] = ''
    extension: Optional[str] = ''


@dataclass
class AddressDTO:
    type: str
    city: str
    postal_code: str
    line1: Optional[str] = ''
    line2: Optional[str] = ''
    line3: Optional[str] = ''
    region_code: Optional[str] = None
    country_code: Optional[str] = None


@dataclass
class RoleDTO:
    """DTO for creating or replacing a SOR role"""
    role_code: str
    start_date: Optional[date]
    sponsor_type: str
    sponsor_id: str
    role_id: Optional[str] = None
    end_date: Optional[date] = None
    percentage: Optional[int] = None
    sponsor_id_type: Optional[str] = None
    emails: List[EmailDTO] = field(default_factory=list)
    phones: List[PhoneDTO] = field(default_factory=list)
    addresses: List[AddressDTO] = field(default_factory=list)
