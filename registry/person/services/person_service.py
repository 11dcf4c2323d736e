import logging
from django.db import transaction
from django.core.exceptions import ValidationError
from core.base.exceptions import InvariantViolation, NotFoundError
from core.base.results import ServiceExecutionResult, validation_error_dict
from core.reference.models import DataTypes
from core.reference.services import ReferenceRepository
from registry.person.dtos import SorPersonCreateDTO
from registry.person.models import Person, Identifier, Role
from registry.sor.models import SorPerson, SorName, SorSponsor

logger = logging.getLogger(__name__)

# Contact collections whose payload key differs from the related name
PAYLOAD_COLLECTION_KEYS = {'email_addresses': 'emails'}


class PersonService:
    """
    Person lookups, SOR role persistence and reconciliation.

    Writes that can fail validation return a ServiceExecutionResult instead
    of raising, so callers can report every field error at once.
    """

    # ==================== LOOKUPS ====================

    @staticmethod
    def find_by_sor_identifier_and_source(source_sor, sor_id):
        """Return the SorPerson a feeding system knows as ``sor_id``, or None."""
        return SorPerson.objects.select_related('person').filter(
            source_sor=source_sor,
            sor_id=sor_id
        ).first()

    @staticmethod
    def find_person_by_identifier(identifier_type, value):
        """Return the Person carrying a live identifier, or None."""
        if not identifier_type or not value:
            return None
        identifier = Identifier.objects.select_related('person').filter(
            identifier_type__name__iexact=identifier_type,
            value=value,
            is_deleted=False
        ).first()
        return identifier.person if identifier else None

    @staticmethod
    def get_person(person_id):
        """
        Raises:
            NotFoundError: no person with that id
        """
        person = Person.objects.filter(pk=person_id).first()
        if person is None:
            raise NotFoundError(f"The person resource identified by [/people/{person_id}] URI does not exist.")
        return person

    @staticmethod
    def get_sor_roles(sor_person, active_on=None):
        """Roles of ``sor_person``; only those active on ``active_on`` when given."""
        roles = sor_person.roles.select_related('role_info', 'person_status').prefetch_related(
            'addresses', 'phones', 'email_addresses', 'urls'
        )
        if active_on is not None:
            roles = roles.active_on(active_on)
        return roles

    # ==================== SOR PERSONS ====================

    @staticmethod
    def add_person(dto: SorPersonCreateDTO) -> ServiceExecutionResult:
        """
        Register a feeding system's person and reconcile it.

        Reconciliation:
        - If any supplied identifier already belongs to a canonical Person,
          the SOR record is linked to that Person and the remaining
          identifiers are added to it.
        - Otherwise a new canonical Person is created from the SOR data; the
          first name becomes its official and preferred name.
        """
        errors = {}
        if not dto.names:
            errors['names'] = ['At least one name is required']

        if PersonService.find_by_sor_identifier_and_source(dto.source_sor, dto.sor_id):
            errors['sor_id'] = [
                f"Person [{dto.sor_id}] already exists for source [{dto.source_sor}]"
            ]

        name_types = []
        for index, name in enumerate(dto.names):
            name_type = None
            if name.name_type:
                name_type = ReferenceRepository.find_type(DataTypes.NAME, name.name_type)
                if name_type is None:
                    errors[f'names[{index}].name_type'] = [f"Unknown name type [{name.name_type}]"]
            name_types.append(name_type)

        identifier_types = []
        for index, identifier in enumerate(dto.identifiers):
            identifier_type = ReferenceRepository.get_identifier_type(identifier.identifier_type)
            if identifier_type is None:
                errors[f'identifiers[{index}].identifier_type'] = [
                    f"Unknown identifier type [{identifier.identifier_type}]"
                ]
            identifier_types.append(identifier_type)

        if errors:
            return ServiceExecutionResult.failed(None, errors)

        sor_person = SorPerson(
            source_sor=dto.source_sor,
            sor_id=dto.sor_id,
            date_of_birth=dto.date_of_birth,
            gender=dto.gender or ''
        )
        try:
            with transaction.atomic():
                sor_person.full_clean()
                sor_person.save()

                for name, name_type in zip(dto.names, name_types):
                    sor_name = SorName(
                        sor_person=sor_person,
                        given=name.given,
                        family=name.family or '',
                        middle=name.middle or '',
                        prefix=name.prefix or '',
                        suffix=name.suffix or ''
                    )
                    sor_name.set_name_type(name_type)
                    sor_name.full_clean()
                    sor_name.save()

                identifiers = list(zip(identifier_types, (i.value for i in dto.identifiers)))
                person = PersonService._match_person(identifiers)
                if person is None:
                    person = PersonService._create_person_from(sor_person, dto, name_types)
                    logger.info(f"Created person {person.pk} from {sor_person}")
                else:
                    logger.info(f"Linked {sor_person} to existing person {person.pk}")

                PersonService._merge_identifiers(person, identifiers)
                sor_person.person = person
                sor_person.save(update_fields=['person'])
        except ValidationError as e:
            return ServiceExecutionResult.failed(sor_person, validation_error_dict(e))

        return ServiceExecutionResult(sor_person)

    @staticmethod
    def _match_person(identifiers):
        for identifier_type, value in identifiers:
            person = PersonService.find_person_by_identifier(identifier_type.name, value)
            if person is not None:
                return person
        return None

    @staticmethod
    def _create_person_from(sor_person, dto, name_types):
        person = Person(date_of_birth=dto.date_of_birth, gender=dto.gender or '')
        person.full_clean()
        person.save()
        for index, (name, name_type) in enumerate(zip(dto.names, name_types)):
            person.add_name(
                name_type=name_type,
                is_official=index == 0,
                is_preferred=index == 0,
                given=name.given,
                family=name.family or '',
                middle=name.middle or '',
                prefix=name.prefix or '',
                suffix=name.suffix or ''
            )
        return person

    @staticmethod
    def _merge_identifiers(person, identifiers):
        for identifier_type, value in identifiers:
            existing = Identifier.objects.filter(identifier_type=identifier_type, value=value).first()
            if existing is None:
                has_primary = person.identifiers.filter(identifier_type=identifier_type, is_primary=True).exists()
                person.add_identifier(identifier_type, value, is_primary=not has_primary)
            elif existing.person_id != person.pk:
                raise ValidationError({
                    'identifiers': [
                        f"{identifier_type.name} [{value}] already belongs to another person"
                    ]
                })

    # ==================== SOR ROLES ====================

    @staticmethod
    def validate_and_save_role_for_sor_person(sor_person, sor_role) -> ServiceExecutionResult:
        """
        Validate a new role of ``sor_person`` and persist it with its sponsor
        and contacts; refresh the canonical role when the SOR person has been
        reconciled.
        """
        if sor_role.sor_person_id != sor_person.pk:
            raise InvariantViolation("Role does not belong to the given SOR person")

        errors = PersonService._validate_sor_role(sor_role)
        if errors:
            logger.info(f"Rejected role for {sor_person}: {sorted(errors)}")
            return ServiceExecutionResult.failed(sor_role, errors)

        with transaction.atomic():
            PersonService._persist_sor_role(sor_role)
            PersonService._reconcile_role(sor_person, sor_role)

        logger.info(f"Saved role {sor_role.sor_id} for {sor_person}")
        return ServiceExecutionResult(sor_role)

    @staticmethod
    def update_sor_role(sor_role) -> ServiceExecutionResult:
        """
        Validate and persist changes to an existing role. Staged sponsor and
        contact collections replace the stored ones in full.
        """
        if sor_role.pk is None:
            raise InvariantViolation("update_sor_role requires a persisted role")

        errors = PersonService._validate_sor_role(sor_role)
        if errors:
            logger.info(f"Rejected update of role {sor_role.sor_id}: {sorted(errors)}")
            return ServiceExecutionResult.failed(sor_role, errors)

        with transaction.atomic():
            PersonService._persist_sor_role(sor_role)
            PersonService._reconcile_role(sor_role.sor_person, sor_role)

        logger.info(f"Replaced role {sor_role.sor_id} for {sor_role.sor_person}")
        return ServiceExecutionResult(sor_role)

    @staticmethod
    @transaction.atomic
    def delete_sor_role(sor_role):
        """Delete a role, its contacts and the canonical role derived from it."""
        Role.objects.filter(sor_role=sor_role).delete()
        logger.info(f"Deleting role {sor_role.sor_id} of {sor_role.sor_person}")
        sor_role.delete()

    @staticmethod
    def _validate_sor_role(sor_role):
        errors = {}
        try:
            sor_role.full_clean()
        except ValidationError as e:
            errors.update(validation_error_dict(e))

        sponsor = sor_role.get_sponsor()
        if sponsor is None:
            errors['sponsor'] = ['Sponsor is required']
        elif sponsor is sor_role.staged_sponsor:
            try:
                sponsor.full_clean(exclude=['sor_role'])
            except ValidationError as e:
                for field_name, messages in validation_error_dict(e).items():
                    errors[f'sponsor.{field_name}'] = messages

        for collection, contacts in sor_role.staged_contacts.items():
            payload_key = PAYLOAD_COLLECTION_KEYS.get(collection, collection)
            for index, contact in enumerate(contacts):
                try:
                    contact.full_clean(exclude=['sor_role'])
                except ValidationError as e:
                    for field_name, messages in validation_error_dict(e).items():
                        errors[f'{payload_key}[{index}].{field_name}'] = messages

        return errors

    @staticmethod
    def _persist_sor_role(sor_role):
        sor_role.save()

        sponsor = sor_role.staged_sponsor
        if sponsor is not None:
            SorSponsor.objects.filter(sor_role=sor_role).delete()
            sponsor.sor_role = sor_role
            sponsor.save()

        for collection, contacts in sor_role.staged_contacts.items():
            getattr(sor_role, collection).all().delete()
            for contact in contacts:
                contact.sor_role = sor_role
                contact.save()

        sor_role.discard_staged()

    @staticmethod
    def _reconcile_role(sor_person, sor_role):
        if sor_person.person_id is None:
            return None
        return sor_person.person.add_role(sor_role)
