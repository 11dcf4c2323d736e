from .person_serializers import (
    PersonSerializer,
    NameSerializer,
    IdentifierSerializer,
    RoleSerializer,
    ActivationKeySerializer,
)
