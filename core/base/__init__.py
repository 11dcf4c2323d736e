"""
Core Base Module

Provides shared base classes, mixins, and utilities for all registry modules.

Exports:
    Individual Feature Mixins:
        - AuditMixin: Adds created_at, updated_at
        - DateRangeMixin: Adds start_date, end_date with ordering validation

    Managers & QuerySets:
        - BaseQuerySet / BaseManager: filter_by_search_params
        - DateRangeQuerySet / DateRangeManager: active_on()

    Errors & Results:
        - NotFoundError, InvariantViolation (core.base.exceptions)
        - ServiceExecutionResult (core.base.results)

Usage Examples:

    from core.base.models import AuditMixin, DateRangeMixin
    from core.base.managers import DateRangeManager

    class SorRole(DateRangeMixin, AuditMixin, models.Model):
        objects = DateRangeManager()
"""

# Don't import models here - causes circular import during Django initialization
# Import them where needed instead: from core.base.models import AuditMixin
