from django.db import models
from core.base.guards import require_type
from core.reference.models import Type, DataTypes, SponsorTypes, OrganizationalUnit


class SorSponsor(models.Model):
    """
    Sponsor of a role: an organizational unit or another person.

    sponsor_id holds the primary key of the OrganizationalUnit or Person,
    depending on sponsor_type.
    """
    sor_role = models.OneToOneField(
        'sor.SorRole',
        on_delete=models.CASCADE,
        related_name='sponsor'
    )
    sponsor_type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.SPONSOR},
    )
    sponsor_id = models.BigIntegerField()

    class Meta:
        db_table = 'sor_sponsor'

    def __str__(self):
        return f"{self.sponsor_type.description}:{self.sponsor_id}"

    def set_type(self, sponsor_type):
        self.sponsor_type = require_type(sponsor_type, DataTypes.SPONSOR, 'sponsor_type')
        return self

    @property
    def is_org_unit(self):
        return self.sponsor_type_id is not None and self.sponsor_type.description == SponsorTypes.ORG_UNIT

    @property
    def is_person(self):
        return self.sponsor_type_id is not None and self.sponsor_type.description == SponsorTypes.PERSON

    def resolve(self):
        """Return the sponsoring OrganizationalUnit or Person, or None."""
        if self.is_org_unit:
            return OrganizationalUnit.objects.filter(pk=self.sponsor_id).first()
        if self.is_person:
            from registry.person.models import Person
            return Person.objects.filter(pk=self.sponsor_id).first()
        return None
