"""
Core Base Managers Module

Provides custom managers and querysets for base models.

**Architecture:**
- BaseQuerySet: Generic filtering (code/name/search)
- DateRangeQuerySet: For models with start_date/end_date

Usage:
    from core.base.managers import DateRangeManager

    class SorRole(DateRangeMixin, models.Model):
        objects = DateRangeManager()

    SorRole.objects.active_on(date.today())
"""

from django.db import models
from django.db.models import Q


class BaseQuerySet(models.QuerySet):
    """
    Base QuerySet with common filtering methods.

    Methods:
        - filter_by_search_params: Filter by code/name/search
    """

    def filter_by_search_params(self, query_params):
        """
        Apply standard code/name/search filters from query parameters.

        Args:
            query_params: QueryDict or dict with optional keys:
                - code: Exact match (case-insensitive)
                - name: Contains match (case-insensitive)
                - search: Contains match across code and name

        Returns:
            Filtered QuerySet
        """
        queryset = self

        code = query_params.get('code')
        if code:
            queryset = queryset.filter(code__iexact=code)

        name = query_params.get('name')
        if name:
            queryset = queryset.filter(name__icontains=name)

        search = query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(code__icontains=search) |
                Q(name__icontains=search)
            )

        return queryset


class BaseManager(models.Manager.from_queryset(BaseQuerySet)):
    """Manager exposing BaseQuerySet filters."""
    pass


class DateRangeQuerySet(models.QuerySet):
    """
    QuerySet for DateRangeMixin models.

    Methods:
        - active_on(date): Records active on specific date
    """

    def active_on(self, reference_date):
        """
        Return records active on a specific date.

        Args:
            reference_date: Date to check

        Returns:
            QuerySet: Records active on that date
        """
        return self.filter(
            start_date__lte=reference_date
        ).filter(
            Q(end_date__isnull=True) |
            Q(end_date__gt=reference_date)
        )


class DateRangeManager(models.Manager.from_queryset(DateRangeQuerySet)):
    """
    Manager for DateRangeMixin models.

    Usage:
        SorRole.objects.active_on(date.today())
    """
    pass
