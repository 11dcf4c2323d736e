import re
from django.db import models
from django.core.exceptions import ValidationError
from core.base.models import AuditMixin
from core.reference.models import IdentifierType


class Identifier(AuditMixin, models.Model):
    """
    Typed identifier of a person. (identifier_type, value) is unique across
    the registry so identifiers can be used to match incoming SOR records.
    """
    person = models.ForeignKey(
        'person.Person',
        on_delete=models.CASCADE,
        related_name='identifiers'
    )
    identifier_type = models.ForeignKey(
        IdentifierType,
        on_delete=models.PROTECT,
        related_name='identifiers'
    )
    value = models.CharField(max_length=100)
    is_primary = models.BooleanField(default=False)
    is_deleted = models.BooleanField(default=False)

    class Meta:
        db_table = 'person_identifier'
        unique_together = [('identifier_type', 'value')]
        ordering = ['identifier_type', '-is_primary']

    def __str__(self):
        return f"{self.identifier_type.name}: {self.value}"

    def clean(self):
        super().clean()
        if self.identifier_type_id and self.identifier_type.format and self.value:
            if not re.fullmatch(self.identifier_type.format, self.value):
                raise ValidationError({
                    'value': f"Value does not match the {self.identifier_type.name} format"
                })
