from datetime import date
from django.db import models
from django.core.exceptions import ValidationError


class AuditMixin(models.Model):
    """
    Adds audit timestamps to track creation and modification.

    Fields:
        - created_at: Timestamp when record was created
        - updated_at: Timestamp when record was last modified

    Usage:
        class MyModel(AuditMixin):
            name = models.CharField(max_length=100)
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when record was last modified"
    )

    class Meta:
        abstract = True


class DateRangeMixin(models.Model):
    """
    Mixin for records bounded by a start date and an optional end date.

    Fields:
        - start_date: Date the record becomes effective
        - end_date: Date the record ends. NULL = open ended

    Methods:
        - active_on(reference_date): Check if active on a specific date
        - clean(): End date, when present, must be strictly after start date

    Usage:
        class SorRole(DateRangeMixin, models.Model):
            objects = DateRangeManager()

        role.active_on(date(2024, 1, 1))
    """
    start_date = models.DateField(
        help_text="Date this record becomes effective"
    )
    end_date = models.DateField(
        null=True,
        blank=True,
        help_text="Date this record ends. NULL = open ended"
    )

    class Meta:
        abstract = True

    @property
    def is_active(self):
        """True when the record is active today."""
        return self.active_on(date.today())

    def active_on(self, reference_date):
        """
        Check if this record is active on a specific date.

        Args:
            reference_date: Date to check against

        Returns:
            bool: True if active on that date, False otherwise
        """
        if self.start_date is None or self.start_date > reference_date:
            return False

        # end_date is exclusive
        if self.end_date and self.end_date <= reference_date:
            return False

        return True

    def clean(self):
        """Validate date order."""
        super().clean()
        if self.start_date and self.end_date and self.end_date <= self.start_date:
            raise ValidationError({
                'end_date': 'End date must be after start date'
            })
