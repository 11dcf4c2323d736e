from datetime import date
from django.core.management import call_command
from core.reference.models import (
    Type, DataTypes, Country, Region, Campus, OrganizationalUnit, RoleInfo, IdentifierType
)
import io


def setup_reference_data():
    """Initialize reference data for tests once and suppressing print output"""
    if Type.objects.filter(data_type=DataTypes.STATUS).exists():
        return

    buffer = io.StringIO()
    call_command('init_reference_data', verbosity=0, stdout=buffer)


def get_type(data_type, description):
    return Type.objects.get(data_type=data_type, description=description)


def create_country_with_region(country_code='US', region_code='NJ'):
    country, _ = Country.objects.get_or_create(code=country_code, defaults={'name': 'United States'})
    region, _ = Region.objects.get_or_create(
        country=country, code=region_code, defaults={'name': 'New Jersey'}
    )
    return country, region


def create_role_info(code='STAFF', org_unit_code='CS', title='Staff Member'):
    """Create a RoleInfo and the organizational unit/campus it hangs off"""
    setup_reference_data()
    campus, _ = Campus.objects.get_or_create(code='MAIN', defaults={'name': 'Main Campus'})
    org_unit, _ = OrganizationalUnit.objects.get_or_create(
        code=org_unit_code,
        defaults={
            'name': 'Computer Science',
            'campus': campus,
            'organizational_unit_type': get_type(DataTypes.ORGANIZATIONAL_UNIT, 'Department'),
        }
    )
    role_info, _ = RoleInfo.objects.get_or_create(
        code=code,
        defaults={
            'title': title,
            'organizational_unit': org_unit,
            'campus': campus,
            'affiliation_type': get_type(DataTypes.AFFILIATION, 'Staff'),
        }
    )
    return role_info


def create_person(given='Jane', family='Doe', netid=None):
    """Create a canonical person with an official name and, optionally, a NETID"""
    from registry.person.models import Person

    setup_reference_data()
    person = Person.objects.create(date_of_birth=date(1980, 5, 17), gender='F')
    person.add_official_name(given=given, family=family)
    if netid:
        person.add_identifier(IdentifierType.objects.get(name='NETID'), netid, is_primary=True)
    return person


def create_sor_person(source_sor='HR', sor_id='E1001', person=None):
    from registry.sor.models import SorPerson, SorName

    sor_person = SorPerson.objects.create(source_sor=source_sor, sor_id=sor_id, person=person)
    SorName.objects.create(sor_person=sor_person, given='Jane', family='Doe')
    return sor_person


def role_payload(**overrides):
    """A valid role payload for the role endpoints"""
    payload = {
        'role_id': 'R1',
        'role_code': 'STAFF',
        'start_date': '2024-01-01',
        'end_date': '2025-01-01',
        'percentage': 50,
        'sponsor_type': 'ORG_UNIT',
        'sponsor_id': 'CS',
        'emails': [
            {'type': 'Work', 'address': 'jdoe@example.edu'},
        ],
        'phones': [
            {
                'type': 'Landline',
                'address_type': 'Campus',
                'country_code': '1',
                'area_code': '732',
                'number': '5551234',
                'extension': '',
            },
        ],
        'addresses': [
            {
                'type': 'Campus',
                'line1': '110 Frelinghuysen Rd',
                'city': 'Piscataway',
                'region_code': 'NJ',
                'country_code': 'US',
                'postal_code': '08854',
            },
        ],
    }
    payload.update(overrides)
    return payload
