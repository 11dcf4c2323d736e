from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from .models import DataTypes, RoleInfo
from .services import ReferenceRepository
from .serializers import TypeSerializer, CountrySerializer, RoleInfoSerializer
from registry_project.pagination import auto_paginate


@api_view(['GET'])
@auto_paginate
def type_list(request):
    """
    List reference types.

    Query Params:
    - data_type: Category to list (e.g., ADDRESS). Required.
    """
    data_type = request.query_params.get('data_type')
    if data_type not in DataTypes.values:
        return Response(
            {'data_type': [f"Unknown data type [{data_type}]"]},
            status=status.HTTP_400_BAD_REQUEST
        )
    types = ReferenceRepository.get_types_by_data_type(data_type)
    serializer = TypeSerializer(types, many=True)
    return Response(serializer.data)


@api_view(['GET'])
@auto_paginate
def country_list(request):
    """
    List countries with their regions.

    Query Params:
    - code / name / search: Standard search filters
    """
    countries = ReferenceRepository.get_countries(request.query_params).prefetch_related('regions')
    serializer = CountrySerializer(countries, many=True)
    return Response(serializer.data)


@api_view(['GET'])
@auto_paginate
def role_info_list(request):
    """
    List role definitions that feeding systems may reference.

    Query Params:
    - code: Exact role code (case-insensitive)
    """
    role_infos = RoleInfo.objects.select_related('organizational_unit', 'affiliation_type')
    code = request.query_params.get('code')
    if code:
        role_infos = role_infos.filter(code__iexact=code)
    serializer = RoleInfoSerializer(role_infos, many=True)
    return Response(serializer.data)
