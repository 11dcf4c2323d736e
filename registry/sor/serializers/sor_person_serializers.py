"""
Serializers for SOR persons
"""
from rest_framework import serializers
from registry.sor.models import SorPerson, SorName
from registry.person.dtos import SorPersonCreateDTO, NameDTO, IdentifierDTO
from .role_serializers import SorRoleSerializer


class NameRepresentationSerializer(serializers.Serializer):
    name_type = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)
    prefix = serializers.CharField(max_length=20, required=False, allow_blank=True)
    given = serializers.CharField(max_length=100)
    middle = serializers.CharField(max_length=100, required=False, allow_blank=True)
    family = serializers.CharField(max_length=100, required=False, allow_blank=True)
    suffix = serializers.CharField(max_length=20, required=False, allow_blank=True)


class IdentifierRepresentationSerializer(serializers.Serializer):
    identifier_type = serializers.CharField(max_length=50)
    value = serializers.CharField(max_length=100)


class SorPersonCreateSerializer(serializers.Serializer):
    """Write serializer for registering a SOR person"""
    sor_id = serializers.CharField(max_length=100)
    names = NameRepresentationSerializer(many=True)
    identifiers = IdentifierRepresentationSerializer(many=True, required=False)
    date_of_birth = serializers.DateField(required=False, allow_null=True)
    gender = serializers.ChoiceField(choices=SorPerson.GENDER_CHOICES, required=False, allow_blank=True)

    def validate_names(self, value):
        if not value:
            raise serializers.ValidationError("At least one name is required")
        return value

    def to_dto(self, source_sor):
        data = dict(self.validated_data)
        return SorPersonCreateDTO(
            source_sor=source_sor,
            sor_id=data['sor_id'],
            names=[NameDTO(**n) for n in data['names']],
            identifiers=[IdentifierDTO(**i) for i in data.get('identifiers', [])],
            date_of_birth=data.get('date_of_birth'),
            gender=data.get('gender', '')
        )


class SorNameSerializer(serializers.ModelSerializer):
    name_type = serializers.CharField(source='name_type.description', read_only=True, default=None)

    class Meta:
        model = SorName
        fields = ['id', 'name_type', 'prefix', 'given', 'middle', 'family', 'suffix']


class SorPersonSerializer(serializers.ModelSerializer):
    """Read serializer for a SOR person with its names and roles"""
    person_id = serializers.IntegerField(source='person.id', read_only=True, default=None)
    names = SorNameSerializer(many=True, read_only=True)
    roles = SorRoleSerializer(many=True, read_only=True)

    class Meta:
        model = SorPerson
        fields = [
            'id', 'source_sor', 'sor_id', 'person_id',
            'date_of_birth', 'gender', 'names', 'roles',
            'created_at', 'updated_at'
        ]
