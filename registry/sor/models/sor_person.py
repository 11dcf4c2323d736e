from django.db import models
from core.base.models import AuditMixin
from core.base.guards import require_instance, require_type
from core.reference.models import Type, RoleInfo, DataTypes


class SorPerson(AuditMixin, models.Model):
    """
    A System of Record's view of a person.

    Fields:
    - source_sor: Code of the feeding system (e.g., 'HR', 'SIS')
    - sor_id: The person's id inside that feeding system
    - person: Canonical person this record was reconciled into
    """
    GENDER_CHOICES = [
        ('M', 'Male'),
        ('F', 'Female'),
        ('U', 'Unknown'),
    ]

    source_sor = models.CharField(max_length=50)
    sor_id = models.CharField(max_length=100)
    person = models.ForeignKey(
        'person.Person',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sor_records'
    )
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=1, choices=GENDER_CHOICES, blank=True)

    class Meta:
        db_table = 'sor_person'
        unique_together = [('source_sor', 'sor_id')]
        ordering = ['source_sor', 'sor_id']

    def __str__(self):
        return f"{self.source_sor}/{self.sor_id}"

    def add_role(self, role_info):
        """
        Start a new (unsaved) role of this person for ``role_info``.

        The role is persisted by PersonService.validate_and_save_role_for_sor_person.
        """
        from .sor_role import SorRole

        require_instance(role_info, RoleInfo, 'role_info')
        return SorRole(
            sor_person=self,
            role_info=role_info,
            source_sor_identifier=self.source_sor
        )

    def find_sor_role_by_sor_role_id(self, sor_role_id):
        if self.pk is None or not sor_role_id:
            return None
        return self.roles.select_related('role_info', 'person_status').filter(sor_id=sor_role_id).first()


class SorName(models.Model):
    """A name exactly as the feeding system reported it."""
    sor_person = models.ForeignKey(
        SorPerson,
        on_delete=models.CASCADE,
        related_name='names'
    )
    name_type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.NAME},
    )
    prefix = models.CharField(max_length=20, blank=True)
    given = models.CharField(max_length=100)
    middle = models.CharField(max_length=100, blank=True)
    family = models.CharField(max_length=100, blank=True)
    suffix = models.CharField(max_length=20, blank=True)

    class Meta:
        db_table = 'sor_name'
        ordering = ['pk']

    def __str__(self):
        parts = [self.prefix, self.given, self.middle, self.family, self.suffix]
        return ' '.join(p for p in parts if p)

    def set_name_type(self, name_type):
        self.name_type = require_type(name_type, DataTypes.NAME, 'name_type', allow_none=True)
