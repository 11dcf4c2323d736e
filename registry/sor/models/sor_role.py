from django.db import models
from django.core.validators import MaxValueValidator
from core.base.models import AuditMixin, DateRangeMixin
from core.base.managers import DateRangeManager
from core.base.exceptions import InvariantViolation
from core.base.guards import require_instance, require_type
from core.reference.models import Type, RoleInfo, DataTypes

# Related names of the contact collections a role owns
CONTACT_COLLECTIONS = ('addresses', 'phones', 'email_addresses', 'urls')


class SorRole(DateRangeMixin, AuditMixin, models.Model):
    """
    One affiliation record reported by one System of Record.

    Contact records and the sponsor are staged on the instance by the
    add_*/set_sponsor/clear_contacts methods and written by PersonService,
    which replaces every staged collection in full:

        role = sor_person.add_role(role_info)
        role.set_sponsor().set_type(org_unit_type)
        role.add_email_address().address = 'jdoe@example.edu'
        PersonService.validate_and_save_role_for_sor_person(sor_person, role)

    Collections that were never staged are left untouched on save.
    """
    sor_id = models.CharField(
        max_length=100,
        help_text="Role id inside the feeding system"
    )
    source_sor_identifier = models.CharField(
        max_length=50,
        help_text="Feeding system that reported this role"
    )
    sor_person = models.ForeignKey(
        'sor.SorPerson',
        on_delete=models.CASCADE,
        related_name='roles'
    )
    role_info = models.ForeignKey(
        RoleInfo,
        on_delete=models.PROTECT,
        related_name='sor_roles'
    )
    percentage = models.PositiveSmallIntegerField(
        default=100,
        validators=[MaxValueValidator(100)],
        help_text="Percentage of time (0-100)"
    )
    person_status = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.STATUS},
    )
    termination_reason = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.TERMINATION},
    )

    objects = DateRangeManager()

    class Meta:
        db_table = 'sor_role'
        unique_together = [('sor_person', 'sor_id')]
        ordering = ['-start_date']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._staged_contacts = {}
        self._staged_sponsor = None

    def __str__(self):
        return f"{self.source_sor_identifier}/{self.sor_id} ({self.role_info.code})"

    # ==================== ROLE INFO PROXIES ====================

    @property
    def title(self):
        return self.role_info.title

    @property
    def affiliation_type(self):
        return self.role_info.affiliation_type

    @property
    def organizational_unit(self):
        return self.role_info.organizational_unit

    @property
    def campus(self):
        return self.role_info.campus

    # ==================== GUARDED REFERENCES ====================

    def set_role_info(self, role_info):
        self.role_info = require_instance(role_info, RoleInfo, 'role_info')

    def set_person_status(self, person_status):
        self.person_status = require_type(person_status, DataTypes.STATUS, 'person_status')

    def set_termination_reason(self, termination_reason):
        self.termination_reason = require_type(
            termination_reason, DataTypes.TERMINATION, 'termination_reason', allow_none=True
        )

    # ==================== SPONSOR ====================

    def set_sponsor(self):
        """Replace the sponsor with a new, empty one and return it."""
        from .sor_sponsor import SorSponsor

        self._staged_sponsor = SorSponsor(sor_role=self)
        return self._staged_sponsor

    def get_sponsor(self):
        from .sor_sponsor import SorSponsor

        if self._staged_sponsor is not None:
            return self._staged_sponsor
        if self.pk is None:
            return None
        return SorSponsor.objects.select_related('sponsor_type').filter(sor_role=self).first()

    @property
    def staged_sponsor(self):
        return self._staged_sponsor

    # ==================== CONTACT COLLECTIONS ====================

    def _stage(self, collection, contact):
        self._staged_contacts.setdefault(collection, []).append(contact)
        return contact

    def add_address(self):
        from .contact import SorAddress
        return self._stage('addresses', SorAddress(sor_role=self))

    def add_phone(self):
        from .contact import SorPhone
        return self._stage('phones', SorPhone(sor_role=self))

    def add_email_address(self):
        from .contact import SorEmailAddress
        return self._stage('email_addresses', SorEmailAddress(sor_role=self))

    def add_url(self):
        from .contact import SorUrl
        return self._stage('urls', SorUrl(sor_role=self))

    def clear_contacts(self, collection):
        """Stage ``collection`` to be emptied (and re-populated by later add_* calls)."""
        if collection not in CONTACT_COLLECTIONS:
            raise InvariantViolation(f"Unknown contact collection '{collection}'")
        self._staged_contacts[collection] = []

    @property
    def staged_contacts(self):
        return dict(self._staged_contacts)

    def get_contacts(self, collection):
        """Contacts of ``collection`` as they will be after the next save."""
        if collection not in CONTACT_COLLECTIONS:
            raise InvariantViolation(f"Unknown contact collection '{collection}'")
        if collection in self._staged_contacts:
            return list(self._staged_contacts[collection])
        if self.pk is None:
            return []
        return list(getattr(self, collection).all())

    def discard_staged(self):
        self._staged_contacts = {}
        self._staged_sponsor = None
