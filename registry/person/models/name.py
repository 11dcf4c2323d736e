from django.db import models
from django.core.exceptions import ValidationError
from core.base.models import AuditMixin
from core.reference.models import Type, DataTypes


class Name(AuditMixin, models.Model):
    """
    A name a person is known by.

    A person's last remaining name cannot be deleted.
    """
    person = models.ForeignKey(
        'person.Person',
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
    is_official = models.BooleanField(default=False)
    is_preferred = models.BooleanField(default=False)

    class Meta:
        db_table = 'person_name'
        ordering = ['-is_official', '-is_preferred', 'pk']

    def __str__(self):
        return self.formatted_name

    @property
    def formatted_name(self):
        parts = [self.prefix, self.given, self.middle, self.family, self.suffix]
        return ' '.join(p for p in parts if p)

    def clean(self):
        super().clean()
        if self.name_type_id and self.name_type.data_type != DataTypes.NAME:
            raise ValidationError({'name_type': 'Must be a NAME type'})

    def delete(self, *args, **kwargs):
        siblings = Name.objects.filter(person_id=self.person_id).exclude(pk=self.pk)
        if not siblings.exists():
            raise ValidationError({'names': 'A person must have at least one name'})
        return super().delete(*args, **kwargs)
