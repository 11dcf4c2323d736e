from django.db import models
from django.core.exceptions import ValidationError
from core.base.guards import require_instance, require_type
from core.reference.models import Type, Country, Region, DataTypes


class SorAddress(models.Model):
    """
    Postal address reported for a role.

    Fields:
    - address_type: ADDRESS type (Home, Campus, ...)
    - line1/2/3: Street lines
    - city, postal_code: Required
    - country / region: Optional references; region must belong to country
    """
    sor_role = models.ForeignKey(
        'sor.SorRole',
        on_delete=models.CASCADE,
        related_name='addresses'
    )
    address_type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.ADDRESS},
    )
    line1 = models.CharField(max_length=100, blank=True)
    line2 = models.CharField(max_length=100, blank=True)
    line3 = models.CharField(max_length=100, blank=True)
    city = models.CharField(max_length=100)
    region = models.ForeignKey(
        Region,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='+'
    )
    country = models.ForeignKey(
        Country,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='+'
    )
    postal_code = models.CharField(max_length=9)

    class Meta:
        db_table = 'sor_address'
        ordering = ['pk']

    def __str__(self):
        parts = [self.line1, self.city, self.postal_code]
        return ', '.join(p for p in parts if p)

    def set_type(self, address_type):
        self.address_type = require_type(address_type, DataTypes.ADDRESS, 'address_type')

    def set_country(self, country):
        self.country = require_instance(country, Country, 'country', allow_none=True)

    def set_region(self, region):
        self.region = require_instance(region, Region, 'region', allow_none=True)

    def clean(self):
        super().clean()
        if self.region_id and self.region.country_id != self.country_id:
            raise ValidationError({'region': 'Region does not belong to the selected country'})


class SorPhone(models.Model):
    """Phone number reported for a role."""
    sor_role = models.ForeignKey(
        'sor.SorRole',
        on_delete=models.CASCADE,
        related_name='phones'
    )
    phone_type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.PHONE},
    )
    address_type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.ADDRESS},
    )
    country_code = models.CharField(max_length=5, blank=True)
    area_code = models.CharField(max_length=5, blank=True)
    number = models.CharField(max_length=10)
    extension = models.CharField(max_length=5, blank=True)

    class Meta:
        db_table = 'sor_phone'
        ordering = ['pk']

    def __str__(self):
        extension = f" x{self.extension}" if self.extension else ''
        return f"+{self.country_code} {self.area_code} {self.number}{extension}".replace('  ', ' ')

    def set_phone_type(self, phone_type):
        self.phone_type = require_type(phone_type, DataTypes.PHONE, 'phone_type')

    def set_address_type(self, address_type):
        self.address_type = require_type(address_type, DataTypes.ADDRESS, 'address_type')


class SorEmailAddress(models.Model):
    """Email address reported for a role."""
    sor_role = models.ForeignKey(
        'sor.SorRole',
        on_delete=models.CASCADE,
        related_name='email_addresses'
    )
    address_type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.EMAIL},
    )
    address = models.EmailField(max_length=100)

    class Meta:
        db_table = 'sor_email_address'
        ordering = ['pk']

    def __str__(self):
        return self.address

    def set_type(self, address_type):
        self.address_type = require_type(address_type, DataTypes.EMAIL, 'address_type')


class SorUrl(models.Model):
    """Web address reported for a role."""
    sor_role = models.ForeignKey(
        'sor.SorRole',
        on_delete=models.CASCADE,
        related_name='urls'
    )
    url_type = models.ForeignKey(
        Type,
        on_delete=models.PROTECT,
        related_name='+',
        limit_choices_to={'data_type': DataTypes.URL},
    )
    url = models.URLField(max_length=500)

    class Meta:
        db_table = 'sor_url'
        ordering = ['pk']

    def __str__(self):
        return self.url

    def set_type(self, url_type):
        self.url_type = require_type(url_type, DataTypes.URL, 'url_type')
