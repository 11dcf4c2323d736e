"""
Canonical Person Models

Models:
- Person: Merged identity (must always carry at least one name)
- Name: Person names with official/preferred flags
- Identifier: Typed identifiers (NETID, SSN, ...) unique across the registry
- Role: Canonical role derived from a System of Record role
- ActivationKey: Time-limited account activation token
"""

from .person import Person
from .name import Name
from .identifier import Identifier
from .role import Role
from .activation_key import ActivationKey

__all__ = [
    'Person',
    'Name',
    'Identifier',
    'Role',
    'ActivationKey',
]
