from datetime import timedelta
from django.db import models, transaction
from django.core.exceptions import ValidationError
from django.utils import timezone
from core.base.models import AuditMixin
from core.base.exceptions import InvariantViolation
from core.base.guards import require_instance, require_type
from core.reference.models import DataTypes, IdentifierType


class Person(AuditMixin, models.Model):
    """
    Canonical person identity.

    A Person aggregates the names, identifiers and roles reported for the
    same individual by one or more Systems of Record. SOR records point at
    their Person through SorPerson.person.

    Invariant: a saved Person always has at least one Name. Create persons
    through PersonService.add_person, which saves the person and its first
    name together; remove names through remove_name().

    Name.delete() refuses to drop the last name, but queryset deletes such as
    person.names.all().delete() skip it. Only cascading deletes of the Person
    itself may remove every name.
    """

    GENDER_CHOICES = [
        ('M', 'Male'),
        ('F', 'Female'),
        ('U', 'Unknown'),
    ]

    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=1, choices=GENDER_CHOICES, blank=True)

    class Meta:
        db_table = 'person'
        verbose_name = 'Person'
        verbose_name_plural = 'People'

    def __str__(self):
        name = self.preferred_name
        return name.formatted_name if name else f"Person {self.pk}"

    def clean(self):
        super().clean()
        if self.pk and not self.names.exists():
            raise ValidationError({'names': 'A person must have at least one name'})

    # ==================== NAMES ====================

    @property
    def official_name(self):
        return self.names.filter(is_official=True).first()

    @property
    def preferred_name(self):
        """Preferred name, falling back to the official name, then any name."""
        if self.pk is None:
            return None
        return (
            self.names.filter(is_preferred=True).first()
            or self.official_name
            or self.names.order_by('pk').first()
        )

    @transaction.atomic
    def add_name(self, name_type=None, is_official=False, is_preferred=False, **fields):
        """
        Add a name to this person.

        Setting is_official/is_preferred clears the flag on other names so
        each person has at most one official and one preferred name.
        """
        from .name import Name

        if self.pk is None:
            raise InvariantViolation("Person must be saved before names are added")
        require_type(name_type, DataTypes.NAME, 'name_type', allow_none=True)

        if is_official:
            self.names.filter(is_official=True).update(is_official=False)
        if is_preferred:
            self.names.filter(is_preferred=True).update(is_preferred=False)

        name = Name(
            person=self,
            name_type=name_type,
            is_official=is_official,
            is_preferred=is_preferred,
            **fields
        )
        name.full_clean()
        name.save()
        return name

    def add_official_name(self, **fields):
        return self.add_name(is_official=True, **fields)

    def add_preferred_name(self, **fields):
        return self.add_name(is_preferred=True, **fields)

    @transaction.atomic
    def remove_name(self, name):
        """
        Remove one of this person's names.

        Raises:
            ValidationError: name is the person's last name
        """
        if name.person_id != self.pk:
            raise InvariantViolation("Name does not belong to this person")
        names = list(self.names.select_for_update().values_list('pk', flat=True))
        if names == [name.pk]:
            raise ValidationError({'names': 'A person must have at least one name'})
        name.delete()

    # ==================== IDENTIFIERS ====================

    def add_identifier(self, identifier_type, value, is_primary=False):
        from .identifier import Identifier

        require_instance(identifier_type, IdentifierType, 'identifier_type')
        if is_primary:
            self.identifiers.filter(
                identifier_type=identifier_type, is_primary=True
            ).update(is_primary=False)

        identifier = Identifier(
            person=self,
            identifier_type=identifier_type,
            value=value,
            is_primary=is_primary
        )
        identifier.full_clean()
        identifier.save()
        return identifier

    def pick_out_identifier(self, type_name):
        """Return the live identifier of the named type, primary first."""
        return self.identifiers.filter(
            identifier_type__name__iexact=type_name,
            is_deleted=False
        ).order_by('-is_primary', 'pk').first()

    # ==================== ROLES ====================

    def add_role(self, sor_role):
        """
        Create (or refresh) the canonical role derived from ``sor_role``.
        """
        from .role import Role

        role = self.find_role_by_sor_role_id(sor_role.pk)
        if role is None:
            role = Role(person=self)
        role.copy_from_sor_role(sor_role)
        role.full_clean()
        role.save()
        return role

    def pick_out_role(self, code):
        return self.roles.filter(role_info__code=code).order_by('-start_date').first()

    def find_role_by_sor_role_id(self, sor_role_id):
        if sor_role_id is None:
            return None
        return self.roles.filter(sor_role_id=sor_role_id).first()

    # ==================== ACTIVATION KEYS ====================

    def generate_new_activation_key(self, end=None, start=None):
        """
        Replace any current activation key with a new one.

        Args:
            end: Expiry datetime (default: start + 10 days)
            start: Start of validity (default: now)
        """
        from .activation_key import ActivationKey

        start = start or timezone.now()
        end = end or start + timedelta(days=ActivationKey.DEFAULT_VALIDITY_DAYS)
        self.remove_current_activation_key()
        key = ActivationKey(person=self, start=start, end=end)
        key.full_clean()
        key.save()
        return key

    @property
    def current_activation_key(self):
        return self.activation_keys.order_by('-start').first()

    def remove_current_activation_key(self):
        self.activation_keys.all().delete()
