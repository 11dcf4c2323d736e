"""
Base reference data loaded by the init_reference_data command.

Feeding systems refer to these rows by description (types) or name
(identifier types), so renaming an entry here breaks existing payloads.
"""
from core.reference.models import DataTypes, PersonStatusTypes, SponsorTypes


REFERENCE_TYPES = {
    DataTypes.STATUS: [PersonStatusTypes.ACTIVE, PersonStatusTypes.INACTIVE],
    DataTypes.SPONSOR: [SponsorTypes.ORG_UNIT, SponsorTypes.PERSON],
    DataTypes.ADDRESS: ['Home', 'Campus', 'Office'],
    DataTypes.PHONE: ['Landline', 'Cell', 'Fax'],
    DataTypes.EMAIL: ['Personal', 'Work', 'Campus'],
    DataTypes.URL: ['Personal', 'Work'],
    DataTypes.NAME: ['Legal', 'Formal', 'Nickname'],
    DataTypes.TERMINATION: ['Resigned', 'Retired', 'Graduated', 'Other'],
    DataTypes.AFFILIATION: ['Staff', 'Faculty', 'Student'],
    DataTypes.ORGANIZATIONAL_UNIT: ['Department', 'College'],
}

IDENTIFIER_TYPES = [
    {
        'name': 'NETID',
        'description': 'Network login id',
        'format': r'[a-z][a-z0-9]{1,19}',
        'is_private': False,
    },
    {
        'name': 'EMPLID',
        'description': 'Employee id',
        'format': r'\d{5,11}',
        'is_private': False,
    },
    {
        'name': 'SSN',
        'description': 'Social security number',
        'format': r'\d{9}',
        'is_private': True,
    },
]
