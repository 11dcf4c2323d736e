"""
Reference Data Module

Static lookup entities resolved by code: types, countries, regions,
campuses, organizational units, role definitions and identifier types.
"""

# Don't import models here - causes circular import during Django initialization
# Import them where needed instead: from core.reference.models import Type
