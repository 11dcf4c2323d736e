from rest_framework.decorators import api_view, parser_classes
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework import status, serializers
from rest_framework_xml.parsers import XMLParser
from django.urls import reverse

from registry.person.services import PersonService
from registry.sor.serializers import RoleRepresentationSerializer, SorRoleSerializer
from registry.sor.services import RoleIngestionService
from registry_project.pagination import auto_paginate
from registry_project.response_formatter import success_response, error_response


@api_view(['GET', 'POST'])
@parser_classes([JSONParser, XMLParser])
@auto_paginate
def role_list(request, source_sor, sor_person_id):
    """
    List the roles of a SOR person or add a new role.

    GET /sor/<source_sor>/people/<sor_person_id>/roles/?active_on=YYYY-MM-DD
    POST /sor/<source_sor>/people/<sor_person_id>/roles/

    The POST body may be JSON or XML. A created role is answered with 201
    and a Location header pointing at the role.
    """
    if request.method == 'GET':
        sor_person = RoleIngestionService.find_sor_person(source_sor, sor_person_id)
        active_on = None
        if request.query_params.get('active_on'):
            try:
                active_on = serializers.DateField().run_validation(request.query_params['active_on'])
            except serializers.ValidationError as e:
                return Response({'active_on': e.detail}, status=status.HTTP_400_BAD_REQUEST)
        roles = PersonService.get_sor_roles(sor_person, active_on=active_on)
        serializer = SorRoleSerializer(roles, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    serializer = RoleRepresentationSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    result = RoleIngestionService.process_incoming_role(source_sor, sor_person_id, serializer.to_dto())
    if not result.succeeded:
        return error_response(result.first_error(), data=result.validation_errors)

    sor_role = result.target_object
    location = request.build_absolute_uri(
        reverse('sor:role_detail', kwargs={
            'source_sor': source_sor,
            'sor_person_id': sor_person_id,
            'sor_role_id': sor_role.sor_id
        })
    )
    return success_response(
        data=SorRoleSerializer(sor_role).data,
        message="Role created",
        status_code=status.HTTP_201_CREATED,
        headers={'Location': location}
    )


@api_view(['GET', 'PUT', 'DELETE'])
@parser_classes([JSONParser, XMLParser])
def role_detail(request, source_sor, sor_person_id, sor_role_id):
    """
    Retrieve, replace or delete a SOR role.

    PUT replaces the role's dates, sponsor, emails, phones and addresses with
    the ones in the payload; an empty list removes every stored entry.
    """
    if request.method == 'GET':
        sor_role = RoleIngestionService.find_role(source_sor, sor_person_id, sor_role_id)
        return Response(SorRoleSerializer(sor_role).data, status=status.HTTP_200_OK)

    elif request.method == 'PUT':
        serializer = RoleRepresentationSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = RoleIngestionService.update_incoming_role(
            source_sor, sor_person_id, sor_role_id, serializer.to_dto()
        )
        if not result.succeeded:
            return error_response(result.first_error(), data=result.validation_errors)
        return Response(status=status.HTTP_204_NO_CONTENT)

    elif request.method == 'DELETE':
        RoleIngestionService.delete_role(source_sor, sor_person_id, sor_role_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
