from rest_framework import serializers
from registry.person.models import Person, Name, Identifier, Role


class NameSerializer(serializers.ModelSerializer):
    name_type = serializers.CharField(source='name_type.description', read_only=True, default=None)
    formatted_name = serializers.CharField(read_only=True)

    class Meta:
        model = Name
        fields = [
            'id', 'name_type', 'prefix', 'given', 'middle', 'family', 'suffix',
            'formatted_name', 'is_official', 'is_preferred'
        ]


class IdentifierSerializer(serializers.ModelSerializer):
    identifier_type = serializers.CharField(source='identifier_type.name', read_only=True)

    class Meta:
        model = Identifier
        fields = ['id', 'identifier_type', 'value', 'is_primary']


class RoleSerializer(serializers.ModelSerializer):
    code = serializers.CharField(read_only=True)
    title = serializers.CharField(read_only=True)
    organizational_unit = serializers.CharField(source='role_info.organizational_unit.code', read_only=True)
    status = serializers.CharField(source='person_status.description', read_only=True)
    sponsor_type = serializers.CharField(source='sponsor_type.description', read_only=True, default=None)
    source_sor = serializers.CharField(source='sor_role.source_sor_identifier', read_only=True, default=None)
    source_role_id = serializers.CharField(source='sor_role.sor_id', read_only=True, default=None)

    class Meta:
        model = Role
        fields = [
            'id', 'code', 'title', 'organizational_unit', 'start_date', 'end_date',
            'percentage', 'status', 'sponsor_type', 'sponsor_id',
            'source_sor', 'source_role_id'
        ]


class PersonSerializer(serializers.ModelSerializer):
    """Canonical person with names, live identifiers, roles and activation token"""
    names = NameSerializer(many=True, read_only=True)
    identifiers = serializers.SerializerMethodField()
    roles = RoleSerializer(many=True, read_only=True)
    sor_records = serializers.SerializerMethodField()
    activation_token = serializers.SerializerMethodField()

    class Meta:
        model = Person
        fields = [
            'id', 'date_of_birth', 'gender', 'names', 'identifiers', 'roles',
            'sor_records', 'activation_token', 'created_at', 'updated_at'
        ]

    def get_identifiers(self, obj):
        identifiers = obj.identifiers.filter(is_deleted=False).select_related('identifier_type')
        return IdentifierSerializer(identifiers, many=True).data

    def get_sor_records(self, obj):
        return [
            {'source_sor': record.source_sor, 'sor_id': record.sor_id}
            for record in obj.sor_records.all()
        ]

    def get_activation_token(self, obj):
        key = obj.current_activation_key
        if key is None or not key.is_valid():
            return None
        return key.value


class ActivationKeySerializer(serializers.Serializer):
    value = serializers.CharField(read_only=True)
    start = serializers.DateTimeField(read_only=True)
    end = serializers.DateTimeField(read_only=True)
