import logging
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured, ValidationError
from core.base.exceptions import NotFoundError
from core.reference.models import DataTypes, PersonStatusTypes, SponsorTypes
from core.reference.services import ReferenceRepository
from registry.person.services import PersonService
from registry.sor.dtos import RoleDTO

logger = logging.getLogger(__name__)


class RoleIngestionService:
    """
    Turns role payloads from feeding systems into SOR role writes.

    Creation builds a new role on the SOR person; an update replaces the
    basic data, the sponsor and the email/phone/address collections of an
    existing role in full. Persistence and validation are delegated to
    PersonService, whose ServiceExecutionResult is returned unchanged.

    Raises:
        NotFoundError: the SOR person, the role or the sponsor cannot be found
        ValidationError: the role code or a reference type code is unknown
    """

    @staticmethod
    def process_incoming_role(source_sor, sor_person_id, dto: RoleDTO):
        sor_person = RoleIngestionService.find_sor_person(source_sor, sor_person_id)
        role_info = RoleIngestionService._valid_role_info_or_raise(dto.role_code)

        sor_role = sor_person.add_role(role_info)
        if dto.role_id is not None:
            sor_role.sor_id = dto.role_id
        sor_role.source_sor_identifier = sor_person.source_sor

        RoleIngestionService._copy_basic_role_data(sor_role, dto)
        RoleIngestionService._copy_emails(sor_role, dto.emails)
        RoleIngestionService._copy_phones(sor_role, dto.phones)
        RoleIngestionService._copy_addresses(sor_role, dto.addresses)

        return PersonService.validate_and_save_role_for_sor_person(sor_person, sor_role)

    @staticmethod
    def update_incoming_role(source_sor, sor_person_id, sor_role_id, dto: RoleDTO):
        sor_person = RoleIngestionService.find_sor_person(source_sor, sor_person_id)
        sor_role = RoleIngestionService._find_role_or_raise(sor_person, source_sor, sor_person_id, sor_role_id)

        # The role code is validated but an update never changes it
        RoleIngestionService._valid_role_info_or_raise(dto.role_code)
        RoleIngestionService._copy_basic_role_data(sor_role, dto)

        sor_role.clear_contacts('email_addresses')
        RoleIngestionService._copy_emails(sor_role, dto.emails)

        sor_role.clear_contacts('phones')
        RoleIngestionService._copy_phones(sor_role, dto.phones)

        sor_role.clear_contacts('addresses')
        RoleIngestionService._copy_addresses(sor_role, dto.addresses)

        return PersonService.update_sor_role(sor_role)

    @staticmethod
    def find_role(source_sor, sor_person_id, sor_role_id):
        sor_person = RoleIngestionService.find_sor_person(source_sor, sor_person_id)
        return RoleIngestionService._find_role_or_raise(sor_person, source_sor, sor_person_id, sor_role_id)

    @staticmethod
    def delete_role(source_sor, sor_person_id, sor_role_id):
        sor_role = RoleIngestionService.find_role(source_sor, sor_person_id, sor_role_id)
        PersonService.delete_sor_role(sor_role)

    # ==================== LOOKUPS ====================

    @staticmethod
    def find_sor_person(source_sor, sor_person_id):
        sor_person = PersonService.find_by_sor_identifier_and_source(source_sor, sor_person_id)
        if sor_person is None:
            raise NotFoundError(
                f"The person resource identified by [/sor/{source_sor}/people/{sor_person_id}] URI does not exist."
            )
        return sor_person

    @staticmethod
    def _find_role_or_raise(sor_person, source_sor, sor_person_id, sor_role_id):
        sor_role = sor_person.find_sor_role_by_sor_role_id(sor_role_id)
        if sor_role is None:
            raise NotFoundError(
                f"The role resource identified by [/sor/{source_sor}/people/{sor_person_id}/roles/{sor_role_id}] "
                f"URI does not exist."
            )
        return sor_role

    @staticmethod
    def _valid_role_info_or_raise(role_code):
        role_info = ReferenceRepository.get_role_info_by_code(role_code)
        if role_info is None:
            raise ValidationError({
                'role_code': f"The role identified by role code [{role_code}] does not exist"
            })
        return role_info

    @staticmethod
    def _type_or_raise(data_type, code, field_name):
        found = ReferenceRepository.find_type(data_type, code)
        if found is None:
            raise ValidationError({field_name: f"Unknown {data_type.lower()} type [{code}]"})
        return found

    # ==================== COPYING ====================

    @staticmethod
    def _copy_basic_role_data(sor_role, dto: RoleDTO):
        # Status is always Active on write; it is not derived from the date range
        status = ReferenceRepository.find_type(DataTypes.STATUS, PersonStatusTypes.ACTIVE)
        if status is None:
            raise ImproperlyConfigured(
                "STATUS type 'Active' is missing; run the init_reference_data command"
            )
        sor_role.set_person_status(status)

        sor_role.start_date = dto.start_date
        if dto.end_date is not None:
            sor_role.end_date = dto.end_date
        if dto.percentage is not None:
            sor_role.percentage = int(dto.percentage)

        sponsor_type = RoleIngestionService._type_or_raise(DataTypes.SPONSOR, dto.sponsor_type, 'sponsor_type')
        RoleIngestionService._set_sponsor_info(sor_role.set_sponsor(), sponsor_type, dto)

    @staticmethod
    def _set_sponsor_info(sponsor, sponsor_type, dto: RoleDTO):
        sponsor.set_type(sponsor_type)
        description = sponsor_type.description.upper()

        if description == SponsorTypes.ORG_UNIT:
            org_unit = ReferenceRepository.get_organizational_unit_by_code(dto.sponsor_id)
            if org_unit is None:
                raise NotFoundError(f"The department identified by [{dto.sponsor_id}] does not exist")
            sponsor.sponsor_id = org_unit.pk

        elif description == SponsorTypes.PERSON:
            sponsor_id_type = dto.sponsor_id_type or settings.REGISTRY['PREFERRED_PERSON_IDENTIFIER_TYPE']
            person = PersonService.find_person_by_identifier(sponsor_id_type, dto.sponsor_id)
            if person is None:
                logger.info(f"Sponsor {sponsor_id_type}={dto.sponsor_id} not found")
                raise NotFoundError(f"The sponsor identified by [{dto.sponsor_id}] does not exist")
            sponsor.sponsor_id = person.pk

        else:
            raise ValidationError({
                'sponsor_type': f"Sponsor type [{sponsor_type.description}] cannot be resolved"
            })

    @staticmethod
    def _copy_emails(sor_role, emails):
        for index, email_dto in enumerate(emails or []):
            email = sor_role.add_email_address()
            email.address = email_dto.address
            email.set_type(RoleIngestionService._type_or_raise(DataTypes.EMAIL, email_dto.type, f'emails[{index}].type'))

    @staticmethod
    def _copy_phones(sor_role, phones):
        for index, phone_dto in enumerate(phones or []):
            phone = sor_role.add_phone()
            phone.number = phone_dto.number
            phone.set_address_type(
                RoleIngestionService._type_or_raise(DataTypes.ADDRESS, phone_dto.address_type, f'phones[{index}].address_type')
            )
            phone.set_phone_type(
                RoleIngestionService._type_or_raise(DataTypes.PHONE, phone_dto.type, f'phones[{index}].type')
            )
            phone.country_code = phone_dto.country_code or ''
            phone.area_code = phone_dto.area_code or ''
            phone.extension = phone_dto.extension or ''

    @staticmethod
    def _copy_addresses(sor_role, addresses):
        for index, address_dto in enumerate(addresses or []):
            address = sor_role.add_address()
            address.set_type(
                RoleIngestionService._type_or_raise(DataTypes.ADDRESS, address_dto.type, f'addresses[{index}].type')
            )
            address.line1 = address_dto.line1 or ''
            address.line2 = address_dto.line2 or ''
            address.line3 = address_dto.line3 or ''
            address.city = address_dto.city
            address.postal_code = address_dto.postal_code
            country = ReferenceRepository.get_country_by_code(address_dto.country_code)
            address.set_country(country)
            if country is not None:
                address.set_region(
                    ReferenceRepository.get_region_by_code_and_country(address_dto.region_code, country)
                )
