from django.db import models
from core.base.models import AuditMixin, DateRangeMixin
from core.base.managers import DateRangeManager
from core.reference.models import Type, RoleInfo, DataTypes


class Role(DateRangeMixin, AuditMixin, models.Model):
    """
    Canonical role: the registry's copy of a System of Record role.

    Each SOR role yields at most one canonical role; it is refreshed whenever
    the SOR role is written. Contact data is read through the source role.
    """
    person = models.ForeignKey(
        'person.Person',
        on_delete=models.CASCADE,
        related_name='roles'
    )
    sor_role = models.OneToOneField(
        'sor.SorRole',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='canonical_role'
    )
    role_info = models.ForeignKey(
        RoleInfo,
        on_delete=models.PROTECT,
        related_name='roles'
    )
    percentage = models.PositiveSmallIntegerField(default=100)
    person_status = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.STATUS},
    )
    sponsor_type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.SPONSOR},
    )
    sponsor_id = models.BigIntegerField(null=True, blank=True)
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
        db_table = 'person_role'
        ordering = ['-start_date']

    def __str__(self):
        return f"{self.role_info.code} ({self.start_date} - {self.end_date or 'open'})"

    @property
    def code(self):
        return self.role_info.code

    @property
    def title(self):
        return self.role_info.title

    @property
    def organizational_unit(self):
        return self.role_info.organizational_unit

    def copy_from_sor_role(self, sor_role):
        self.sor_role = sor_role
        self.role_info = sor_role.role_info
        self.percentage = sor_role.percentage
        self.person_status = sor_role.person_status
        self.start_date = sor_role.start_date
        self.end_date = sor_role.end_date
        self.termination_reason = sor_role.termination_reason
        sponsor = sor_role.get_sponsor()
        self.sponsor_type = sponsor.sponsor_type if sponsor else None
        self.sponsor_id = sponsor.sponsor_id if sponsor else None
