"""
Unit tests for PersonService
Tests SOR person registration, reconciliation and SOR role persistence
"""
from datetime import date
from django.test import TestCase

from core.base.exceptions import InvariantViolation, NotFoundError
from core.base.test_utils import (
    setup_reference_data, create_person, create_sor_person, create_role_info, get_type
)
from core.reference.models import DataTypes, OrganizationalUnit
from registry.person.dtos import SorPersonCreateDTO, NameDTO, IdentifierDTO
from registry.person.models import Person, Role
from registry.person.services import PersonService
from registry.sor.models import SorPerson, SorRole, SorEmailAddress


class PersonServiceAddPersonTest(TestCase):
    """Test PersonService.add_person and reconciliation"""

    @classmethod
    def setUpTestData(cls):
        setup_reference_data()

    def make_dto(self, sor_id='E2001', netid='jsmith', **kwargs):
        identifiers = [IdentifierDTO(identifier_type='NETID', value=netid)] if netid else []
        return SorPersonCreateDTO(
            source_sor=kwargs.pop('source_sor', 'HR'),
            sor_id=sor_id,
            names=kwargs.pop('names', [NameDTO(given='John', family='Smith', name_type='Legal')]),
            identifiers=kwargs.pop('identifiers', identifiers),
            date_of_birth=date(1985, 3, 2),
            gender='M'
        )

    def test_new_person_is_created_from_sor_data(self):
        result = PersonService.add_person(self.make_dto())

        self.assertTrue(result.succeeded)
        sor_person = result.target_object
        person = sor_person.person
        self.assertIsNotNone(person)
        self.assertEqual(person.official_name.given, 'John')
        self.assertEqual(person.preferred_name.family, 'Smith')
        self.assertEqual(person.official_name.name_type.description, 'Legal')
        self.assertEqual(person.pick_out_identifier('NETID').value, 'jsmith')
        self.assertTrue(person.pick_out_identifier('NETID').is_primary)
        self.assertEqual(person.date_of_birth, date(1985, 3, 2))
        self.assertEqual(sor_person.names.count(), 1)

    def test_matching_identifier_links_existing_person(self):
        existing = create_person(given='John', family='Smith', netid='jsmith')

        result = PersonService.add_person(self.make_dto(source_sor='SIS', sor_id='S77'))

        self.assertTrue(result.succeeded)
        self.assertEqual(result.target_object.person, existing)
        self.assertEqual(Person.objects.count(), 1)
        self.assertEqual(existing.names.count(), 1)

    def test_new_identifiers_are_added_to_matched_person(self):
        existing = create_person(netid='jsmith')
        dto = self.make_dto(identifiers=[
            IdentifierDTO(identifier_type='NETID', value='jsmith'),
            IdentifierDTO(identifier_type='EMPLID', value='100200'),
        ])

        result = PersonService.add_person(dto)

        self.assertTrue(result.succeeded)
        self.assertEqual(existing.pick_out_identifier('EMPLID').value, '100200')

    def test_duplicate_sor_id_is_rejected(self):
        create_sor_person('HR', 'E2001')

        result = PersonService.add_person(self.make_dto(sor_id='E2001'))

        self.assertFalse(result.succeeded)
        self.assertIn('sor_id', result.validation_errors)

    def test_unknown_identifier_type_is_rejected(self):
        dto = self.make_dto(identifiers=[IdentifierDTO(identifier_type='PASSPORT', value='X1')])

        result = PersonService.add_person(dto)

        self.assertFalse(result.succeeded)
        self.assertIn('identifiers[0].identifier_type', result.validation_errors)
        self.assertEqual(SorPerson.objects.count(), 0)

    def test_names_are_required(self):
        result = PersonService.add_person(self.make_dto(names=[]))

        self.assertFalse(result.succeeded)
        self.assertIn('names', result.validation_errors)

    def test_invalid_identifier_value_rolls_back(self):
        dto = self.make_dto(netid='Not Valid!')

        result = PersonService.add_person(dto)

        self.assertFalse(result.succeeded)
        self.assertEqual(SorPerson.objects.count(), 0)
        self.assertEqual(Person.objects.count(), 0)

    def test_get_person_not_found(self):
        with self.assertRaises(NotFoundError) as context:
            PersonService.get_person(999)
        self.assertIn('/people/999', context.exception.message)


class PersonServiceSorRoleTest(TestCase):
    """Test validation and persistence of SOR roles"""

    @classmethod
    def setUpTestData(cls):
        setup_reference_data()
        cls.role_info = create_role_info('STAFF', 'CS')
        cls.org_unit = OrganizationalUnit.objects.get(code='CS')
        cls.person = create_person(netid='jdoe')
        cls.sor_person = create_sor_person('HR', 'E1001', person=cls.person)

    def build_role(self, sor_id='R1', start_date=date(2024, 1, 1), end_date=None, sponsor=True):
        role = self.sor_person.add_role(self.role_info)
        role.sor_id = sor_id
        role.start_date = start_date
        role.end_date = end_date
        role.set_person_status(get_type(DataTypes.STATUS, 'Active'))
        if sponsor:
            role.set_sponsor().set_type(get_type(DataTypes.SPONSOR, 'ORG_UNIT'))
            role.get_sponsor().sponsor_id = self.org_unit.pk
        return role

    def add_email(self, role, address):
        email = role.add_email_address()
        email.set_type(get_type(DataTypes.EMAIL, 'Work'))
        email.address = address
        return email

    def test_valid_role_is_saved_with_contacts(self):
        role = self.build_role()
        self.add_email(role, 'jdoe@example.edu')
        self.add_email(role, 'jane.doe@example.edu')

        result = PersonService.validate_and_save_role_for_sor_person(self.sor_person, role)

        self.assertTrue(result.succeeded)
        saved = SorRole.objects.get(sor_person=self.sor_person, sor_id='R1')
        self.assertEqual(saved.email_addresses.count(), 2)
        self.assertEqual(saved.sponsor.sponsor_id, self.org_unit.pk)
        self.assertEqual(saved.sponsor.resolve(), self.org_unit)
        self.assertEqual(saved.title, 'Staff Member')

    def test_saved_role_is_reconciled_into_canonical_role(self):
        role = self.build_role()

        PersonService.validate_and_save_role_for_sor_person(self.sor_person, role)

        canonical = self.person.find_role_by_sor_role_id(role.pk)
        self.assertIsNotNone(canonical)
        self.assertEqual(canonical.code, 'STAFF')
        self.assertEqual(canonical.sponsor_type.description, 'ORG_UNIT')
        self.assertEqual(self.person.pick_out_role('STAFF'), canonical)

    def test_end_date_not_after_start_date_fails(self):
        role = self.build_role(start_date=date(2024, 1, 1), end_date=date(2024, 1, 1))

        result = PersonService.validate_and_save_role_for_sor_person(self.sor_person, role)

        self.assertFalse(result.succeeded)
        self.assertIn('end_date', result.validation_errors)
        self.assertEqual(SorRole.objects.count(), 0)

    def test_sponsor_is_required(self):
        role = self.build_role(sponsor=False)

        result = PersonService.validate_and_save_role_for_sor_person(self.sor_person, role)

        self.assertFalse(result.succeeded)
        self.assertIn('sponsor', result.validation_errors)

    def test_invalid_contact_is_reported_by_position(self):
        role = self.build_role()
        self.add_email(role, 'jdoe@example.edu')
        self.add_email(role, 'not-an-email')

        result = PersonService.validate_and_save_role_for_sor_person(self.sor_person, role)

        self.assertFalse(result.succeeded)
        self.assertIn('emails[1].address', result.validation_errors)
        self.assertEqual(SorEmailAddress.objects.count(), 0)

    def test_role_of_another_sor_person_is_rejected(self):
        other = create_sor_person('HR', 'E9999')
        role = self.build_role()

        with self.assertRaises(InvariantViolation):
            PersonService.validate_and_save_role_for_sor_person(other, role)

    def test_update_replaces_staged_collections_only(self):
        role = self.build_role()
        self.add_email(role, 'jdoe@example.edu')
        phone = role.add_phone()
        phone.set_phone_type(get_type(DataTypes.PHONE, 'Cell'))
        phone.set_address_type(get_type(DataTypes.ADDRESS, 'Home'))
        phone.number = '5551234'
        PersonService.validate_and_save_role_for_sor_person(self.sor_person, role)

        stored = SorRole.objects.get(pk=role.pk)
        stored.clear_contacts('email_addresses')
        result = PersonService.update_sor_role(stored)

        self.assertTrue(result.succeeded)
        self.assertEqual(stored.email_addresses.count(), 0)
        self.assertEqual(stored.phones.count(), 1)

    def test_update_requires_persisted_role(self):
        with self.assertRaises(InvariantViolation):
            PersonService.update_sor_role(self.build_role())

    def test_delete_sor_role_removes_canonical_role(self):
        role = self.build_role()
        self.add_email(role, 'jdoe@example.edu')
        PersonService.validate_and_save_role_for_sor_person(self.sor_person, role)

        PersonService.delete_sor_role(role)

        self.assertEqual(SorRole.objects.count(), 0)
        self.assertEqual(SorEmailAddress.objects.count(), 0)
        self.assertEqual(Role.objects.count(), 0)
