from .role_serializers import (
    RoleRepresentationSerializer,
    SorRoleSerializer,
    SorAddressSerializer,
    SorPhoneSerializer,
    SorEmailAddressSerializer,
    SorUrlSerializer,
)
from .sor_person_serializers import (
    SorPersonCreateSerializer,
    SorPersonSerializer,
)
