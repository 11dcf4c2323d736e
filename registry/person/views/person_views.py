from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from core.base.exceptions import NotFoundError
from registry.person.services import PersonService
from registry.person.serializers import PersonSerializer, ActivationKeySerializer
from registry_project.response_formatter import success_response


@api_view(['GET'])
def person_detail(request, person_id):
    """
    Retrieve a canonical person.

    GET /people/<person_id>/
    """
    person = PersonService.get_person(person_id)
    serializer = PersonSerializer(person)
    return Response(serializer.data, status=status.HTTP_200_OK)


@api_view(['GET', 'POST', 'DELETE'])
def activation_key_detail(request, person_id):
    """
    Manage a person's activation key.

    GET    /people/<person_id>/activation-key/   current key while it is valid
    POST   /people/<person_id>/activation-key/   replace it with a new key
    DELETE /people/<person_id>/activation-key/   invalidate it
    """
    person = PersonService.get_person(person_id)

    if request.method == 'GET':
        key = person.current_activation_key
        if key is None or not key.is_valid():
            raise NotFoundError(f"Person [{person_id}] has no valid activation key.")
        return Response(ActivationKeySerializer(key).data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        key = person.generate_new_activation_key()
        return success_response(
            data=ActivationKeySerializer(key).data,
            message="Activation key generated",
            status_code=status.HTTP_201_CREATED
        )

    elif request.method == 'DELETE':
        person.remove_current_activation_key()
        return Response(status=status.HTTP_204_NO_CONTENT)
