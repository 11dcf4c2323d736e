from django.db import models
from django.core.exceptions import ValidationError
from core.base.exceptions import InvariantViolation
from core.base.guards import require_instance
from core.base.managers import BaseManager


class DataTypes(models.TextChoices):
    """Categories a reference Type belongs to."""
    ADDRESS = 'ADDRESS', 'Address'
    PHONE = 'PHONE', 'Phone'
    EMAIL = 'EMAIL', 'Email'
    URL = 'URL', 'Url'
    NAME = 'NAME', 'Name'
    STATUS = 'STATUS', 'Status'
    SPONSOR = 'SPONSOR', 'Sponsor'
    AFFILIATION = 'AFFILIATION', 'Affiliation'
    TERMINATION = 'TERMINATION', 'Termination'
    ORGANIZATIONAL_UNIT = 'ORGANIZATIONAL_UNIT', 'Organizational Unit'


class PersonStatusTypes:
    """Descriptions of STATUS types."""
    ACTIVE = 'Active'
    INACTIVE = 'Inactive'


class SponsorTypes:
    """Descriptions of SPONSOR types."""
    ORG_UNIT = 'ORG_UNIT'
    PERSON = 'PERSON'


class Type(models.Model):
    """
    Shared reference value, identified by (data_type, description).

    Examples:
    - data_type=ADDRESS, description='Home'
    - data_type=STATUS, description='Active'
    - data_type=SPONSOR, description='ORG_UNIT'

    Types are immutable once created: saving a changed row raises
    InvariantViolation.
    """
    data_type = models.CharField(
        max_length=30,
        choices=DataTypes.choices,
        help_text="Category of this type"
    )
    description = models.CharField(
        max_length=100,
        help_text="Value within the category (e.g., 'Home')"
    )

    class Meta:
        db_table = 'reference_type'
        unique_together = [('data_type', 'description')]
        ordering = ['data_type', 'description']

    def __str__(self):
        return f"{self.data_type}: {self.description}"

    def save(self, *args, **kwargs):
        if self.pk is not None:
            stored = Type.objects.filter(pk=self.pk).values('data_type', 'description').first()
            if stored and (stored['data_type'], stored['description']) != (self.data_type, self.description):
                raise InvariantViolation(f"Type {self.pk} is immutable")
        super().save(*args, **kwargs)


class Country(models.Model):
    """Country identified by its ISO code."""
    code = models.CharField(max_length=3, unique=True, help_text="ISO country code")
    name = models.CharField(max_length=100)

    objects = BaseManager()

    class Meta:
        db_table = 'reference_country'
        ordering = ['name']
        verbose_name_plural = 'Countries'

    def __str__(self):
        return f"{self.code} - {self.name}"


class Region(models.Model):
    """
    Region (state/province) within a country.

    Region codes are only unique within their country.
    """
    code = models.CharField(max_length=10)
    name = models.CharField(max_length=100)
    country = models.ForeignKey(
        Country,
        on_delete=models.CASCADE,
        related_name='regions'
    )

    objects = BaseManager()

    class Meta:
        db_table = 'reference_region'
        unique_together = [('country', 'code')]
        ordering = ['country', 'name']

    def __str__(self):
        return f"{self.code} ({self.country.code})"

    def set_country(self, country):
        self.country = require_instance(country, Country, 'country')


class Campus(models.Model):
    code = models.CharField(max_length=10, unique=True)
    name = models.CharField(max_length=100)

    objects = BaseManager()

    class Meta:
        db_table = 'reference_campus'
        ordering = ['name']
        verbose_name_plural = 'Campuses'

    def __str__(self):
        return self.name


class OrganizationalUnit(models.Model):
    """
    Department or other unit that can sponsor roles.

    Supports hierarchy through the optional parent unit.
    """
    code = models.CharField(max_length=20, unique=True, db_index=True)
    name = models.CharField(max_length=200)
    organizational_unit_type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='organizational_units',
        limit_choices_to={'data_type': DataTypes.ORGANIZATIONAL_UNIT},
    )
    campus = models.ForeignKey(
        Campus,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='organizational_units'
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='children'
    )

    objects = BaseManager()

    class Meta:
        db_table = 'reference_organizational_unit'
        ordering = ['code']

    def __str__(self):
        return f"{self.code} - {self.name}"

    def clean(self):
        super().clean()
        if self.parent_id is not None and self.parent_id == self.pk:
            raise ValidationError({'parent': 'An organizational unit cannot be its own parent'})
        if self.organizational_unit_type and self.organizational_unit_type.data_type != DataTypes.ORGANIZATIONAL_UNIT:
            raise ValidationError({'organizational_unit_type': 'Must be an ORGANIZATIONAL_UNIT type'})


class RoleInfo(models.Model):
    """
    Definition of a role a person can hold, identified by code.

    Fields:
    - code: Code sent by feeding systems (e.g., 'STAFF')
    - title: Human readable title
    - organizational_unit: Unit the role belongs to
    - campus: Campus the role belongs to
    - affiliation_type: AFFILIATION type (Staff, Faculty, Student...)
    """
    code = models.CharField(max_length=20, unique=True, db_index=True)
    title = models.CharField(max_length=100)
    organizational_unit = models.ForeignKey(
        OrganizationalUnit,
        on_delete=models.PROTECT,
        related_name='role_infos'
    )
    campus = models.ForeignKey(
        Campus,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='role_infos'
    )
    affiliation_type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        related_name='role_infos',
        limit_choices_to={'data_type': DataTypes.AFFILIATION},
    )

    objects = BaseManager()

    class Meta:
        db_table = 'reference_role_info'
        ordering = ['code']

    def __str__(self):
        return f"{self.code} - {self.title}"

    def clean(self):
        super().clean()
        if self.affiliation_type_id and self.affiliation_type.data_type != DataTypes.AFFILIATION:
            raise ValidationError({'affiliation_type': 'Must be an AFFILIATION type'})


class IdentifierType(models.Model):
    """
    Kind of identifier a person can carry (NETID, SSN, EMPLID...).

    format, when set, is a regular expression identifier values must match.
    """
    name = models.CharField(max_length=50, unique=True)
    description = models.CharField(max_length=200, blank=True)
    format = models.CharField(max_length=200, blank=True)
    is_private = models.BooleanField(default=False)

    class Meta:
        db_table = 'reference_identifier_type'
        ordering = ['name']

    def __str__(self):
        return self.name
