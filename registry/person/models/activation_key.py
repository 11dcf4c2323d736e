import secrets
from django.db import models
from django.core.exceptions import ValidationError
from django.utils import timezone


def generate_key_value():
    return secrets.token_urlsafe(24)


class ActivationKey(models.Model):
    """
    Token a person uses to activate their account.

    Valid from start (inclusive) until end (exclusive).
    """
    DEFAULT_VALIDITY_DAYS = 10

    person = models.ForeignKey(
        'person.Person',
        on_delete=models.CASCADE,
        related_name='activation_keys'
    )
    value = models.CharField(max_length=64, unique=True, default=generate_key_value)
    start = models.DateTimeField()
    end = models.DateTimeField()

    class Meta:
        db_table = 'person_activation_key'

    def __str__(self):
        return self.value

    def clean(self):
        super().clean()
        if self.start and self.end and self.end <= self.start:
            raise ValidationError({'end': 'End must be after start'})

    def is_valid(self, at=None):
        at = at or timezone.now()
        return self.start <= at < self.end

    @property
    def is_not_yet_valid(self):
        return timezone.now() < self.start

    @property
    def is_expired(self):
        return timezone.now() >= self.end
