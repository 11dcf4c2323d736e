import logging
from core.base.exceptions import InvariantViolation
from .models import Type, Country, Region, OrganizationalUnit, RoleInfo, IdentifierType

logger = logging.getLogger(__name__)


class ReferenceRepository:
    """
    Resolves string codes to reference entities.

    Every getter returns None when the code is unknown so callers can decide
    how "not found" surfaces. Arguments that are themselves invalid (such as
    a region lookup without a resolved country) raise InvariantViolation.
    """

    @staticmethod
    def find_type(data_type, description):
        """Find a Type by category and description (case-insensitive)."""
        if not description:
            return None
        return Type.objects.filter(
            data_type=data_type,
            description__iexact=description
        ).first()

    @staticmethod
    def get_types_by_data_type(data_type):
        return Type.objects.filter(data_type=data_type).order_by('description')

    @staticmethod
    def get_role_info_by_code(code):
        if not code:
            return None
        return RoleInfo.objects.select_related(
            'organizational_unit', 'campus', 'affiliation_type'
        ).filter(code=code).first()

    @staticmethod
    def get_country_by_code(code):
        if not code:
            return None
        return Country.objects.filter(code__iexact=code).first()

    @staticmethod
    def get_countries(filters=None):
        queryset = Country.objects.all()
        if filters:
            queryset = queryset.filter_by_search_params(filters)
        return queryset.order_by('name')

    @staticmethod
    def get_region_by_code_and_country(code, country):
        """
        Find a region by code within an already resolved country.

        Raises:
            InvariantViolation: country is not a resolved Country
        """
        if not isinstance(country, Country):
            raise InvariantViolation("Region lookup requires a resolved Country")
        if not code:
            return None
        return Region.objects.filter(country=country, code__iexact=code).first()

    @staticmethod
    def get_regions(country):
        if not isinstance(country, Country):
            raise InvariantViolation("Region listing requires a resolved Country")
        return country.regions.order_by('name')

    @staticmethod
    def get_organizational_unit_by_code(code):
        if not code:
            return None
        unit = OrganizationalUnit.objects.filter(code=code).first()
        if unit is None:
            logger.info(f"Organizational unit '{code}' not found")
        return unit

    @staticmethod
    def get_identifier_type(name):
        if not name:
            return None
        return IdentifierType.objects.filter(name__iexact=name).first()
