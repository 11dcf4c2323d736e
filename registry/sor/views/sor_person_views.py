from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.urls import reverse

from registry.sor.services import RoleIngestionService
from registry.person.services import PersonService
from registry.sor.serializers import SorPersonCreateSerializer, SorPersonSerializer
from registry.sor.models import SorPerson
from registry_project.pagination import auto_paginate
from registry_project.response_formatter import success_response, error_response


@api_view(['GET', 'POST'])
@auto_paginate
def sor_person_list(request, source_sor):
    """
    List the people a feeding system has registered, or register one.

    GET /sor/<source_sor>/people/
    POST /sor/<source_sor>/people/
    """
    if request.method == 'GET':
        sor_people = SorPerson.objects.filter(source_sor=source_sor).prefetch_related('names')
        serializer = SorPersonSerializer(sor_people, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    serializer = SorPersonCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    result = PersonService.add_person(serializer.to_dto(source_sor))
    if not result.succeeded:
        return error_response(result.first_error(), data=result.validation_errors)

    sor_person = result.target_object
    location = request.build_absolute_uri(
        reverse('sor:sor_person_detail', kwargs={
            'source_sor': source_sor,
            'sor_person_id': sor_person.sor_id
        })
    )
    return success_response(
        data=SorPersonSerializer(sor_person).data,
        message="Person created",
        status_code=status.HTTP_201_CREATED,
        headers={'Location': location}
    )


@api_view(['GET'])
def sor_person_detail(request, source_sor, sor_person_id):
    """
    Retrieve a SOR person with its names and roles.

    GET /sor/<source_sor>/people/<sor_person_id>/
    """
    sor_person = RoleIngestionService.find_sor_person(source_sor, sor_person_id)
    serializer = SorPersonSerializer(sor_person)
    return Response(serializer.data, status=status.HTTP_200_OK)
