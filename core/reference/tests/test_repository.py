"""
Tests for the reference repository and reference models.
"""
import io
from django.test import TestCase
from django.core.management import call_command

from core.base.exceptions import InvariantViolation
from core.base.test_utils import setup_reference_data, create_country_with_region, create_role_info
from core.reference.models import Type, DataTypes, Country, IdentifierType
from core.reference.services import ReferenceRepository


class ReferenceRepositoryTest(TestCase):
    """Test ReferenceRepository lookups"""

    @classmethod
    def setUpTestData(cls):
        setup_reference_data()
        cls.country, cls.region = create_country_with_region('US', 'NJ')
        cls.other_country = Country.objects.create(code='CA', name='Canada')
        cls.role_info = create_role_info('STAFF', 'CS')

    def test_find_type_is_case_insensitive(self):
        found = ReferenceRepository.find_type(DataTypes.ADDRESS, 'campus')
        self.assertIsNotNone(found)
        self.assertEqual(found.description, 'Campus')

    def test_find_type_is_scoped_to_data_type(self):
        # 'Campus' exists for ADDRESS and EMAIL, never for PHONE
        self.assertIsNone(ReferenceRepository.find_type(DataTypes.PHONE, 'Campus'))
        self.assertNotEqual(
            ReferenceRepository.find_type(DataTypes.ADDRESS, 'Campus'),
            ReferenceRepository.find_type(DataTypes.EMAIL, 'Campus')
        )

    def test_unknown_codes_return_none(self):
        self.assertIsNone(ReferenceRepository.find_type(DataTypes.ADDRESS, 'Boat'))
        self.assertIsNone(ReferenceRepository.get_role_info_by_code('NOPE'))
        self.assertIsNone(ReferenceRepository.get_country_by_code('ZZ'))
        self.assertIsNone(ReferenceRepository.get_organizational_unit_by_code('NOPE'))
        self.assertIsNone(ReferenceRepository.get_identifier_type('PASSPORT'))
        self.assertIsNone(ReferenceRepository.get_country_by_code(None))

    def test_get_role_info_by_code(self):
        role_info = ReferenceRepository.get_role_info_by_code('STAFF')
        self.assertEqual(role_info, self.role_info)
        self.assertEqual(role_info.organizational_unit.code, 'CS')

    def test_get_country_by_code(self):
        self.assertEqual(ReferenceRepository.get_country_by_code('us'), self.country)

    def test_region_lookup_is_scoped_to_country(self):
        self.assertEqual(
            ReferenceRepository.get_region_by_code_and_country('NJ', self.country),
            self.region
        )
        self.assertIsNone(ReferenceRepository.get_region_by_code_and_country('NJ', self.other_country))

    def test_region_lookup_requires_resolved_country(self):
        with self.assertRaises(InvariantViolation):
            ReferenceRepository.get_region_by_code_and_country('NJ', 'US')
        with self.assertRaises(InvariantViolation):
            ReferenceRepository.get_region_by_code_and_country('NJ', None)

    def test_get_regions(self):
        self.assertEqual(list(ReferenceRepository.get_regions(self.country)), [self.region])

    def test_get_types_by_data_type(self):
        descriptions = [t.description for t in ReferenceRepository.get_types_by_data_type(DataTypes.SPONSOR)]
        self.assertEqual(descriptions, ['ORG_UNIT', 'PERSON'])

    def test_get_identifier_type(self):
        self.assertEqual(ReferenceRepository.get_identifier_type('netid').name, 'NETID')


class TypeModelTest(TestCase):
    """Test reference Type immutability"""

    @classmethod
    def setUpTestData(cls):
        setup_reference_data()

    def test_changing_a_saved_type_is_rejected(self):
        home = Type.objects.get(data_type=DataTypes.ADDRESS, description='Home')
        home.description = 'House'
        with self.assertRaises(InvariantViolation):
            home.save()
        home.refresh_from_db()
        self.assertEqual(home.description, 'Home')

    def test_resaving_an_unchanged_type_is_allowed(self):
        home = Type.objects.get(data_type=DataTypes.ADDRESS, description='Home')
        home.save()

    def test_region_set_country_guard(self):
        country, region = create_country_with_region()
        with self.assertRaises(InvariantViolation):
            region.set_country('US')
        region.set_country(country)


class InitReferenceDataCommandTest(TestCase):
    """Test the init_reference_data management command"""

    def test_command_is_idempotent(self):
        call_command('init_reference_data', stdout=io.StringIO())
        types = Type.objects.count()
        identifier_types = IdentifierType.objects.count()

        call_command('init_reference_data', stdout=io.StringIO())
        self.assertEqual(Type.objects.count(), types)
        self.assertEqual(IdentifierType.objects.count(), identifier_types)

    def test_command_creates_base_types(self):
        call_command('init_reference_data', stdout=io.StringIO())
        self.assertTrue(Type.objects.filter(data_type=DataTypes.STATUS, description='Active').exists())
        self.assertTrue(Type.objects.filter(data_type=DataTypes.SPONSOR, description='ORG_UNIT').exists())
        self.assertTrue(IdentifierType.objects.filter(name='NETID').exists())
