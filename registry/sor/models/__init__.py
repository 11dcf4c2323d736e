"""
System of Record Models

Models:
- SorPerson: One source's view of a person
- SorName: Names as reported by the source
- SorRole: One affiliation record from one source
- SorSponsor: Org unit or person sponsoring a role
- SorAddress / SorPhone / SorEmailAddress / SorUrl: Role contact data
"""

from .sor_person import SorPerson, SorName
from .sor_role import SorRole, CONTACT_COLLECTIONS
from .sor_sponsor import SorSponsor
from .contact import SorAddress, SorPhone, SorEmailAddress, SorUrl

__all__ = [
    'SorPerson',
    'SorName',
    'SorRole',
    'CONTACT_COLLECTIONS',
    'SorSponsor',
    'SorAddress',
    'SorPhone',
    'SorEmailAddress',
    'SorUrl',
]
