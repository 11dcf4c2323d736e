"""
Serializers for SOR roles

RoleRepresentationSerializer accepts the payload a feeding system submits
(JSON, or XML through rest_framework_xml); the model serializers render
stored roles back.
"""
from rest_framework import serializers
from registry.sor.models import SorRole, SorAddress, SorPhone, SorEmailAddress, SorUrl
from registry.sor.dtos import RoleDTO, EmailDTO, PhoneDTO, AddressDTO

LIST_FIELDS = ('emails', 'phones', 'addresses')


class EmailRepresentationSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    address = serializers.CharField(max_length=100)


class PhoneRepresentationSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    address_type = serializers.CharField(max_length=100)
    country_code = serializers.CharField(max_length=5, required=False, allow_blank=True, allow_null=True)
    area_code = serializers.CharField(max_length=5, required=False, allow_blank=True, allow_null=True)
    number = serializers.CharField(max_length=10)
    extension = serializers.CharField(max_length=5, required=False, allow_blank=True, allow_null=True)


class AddressRepresentationSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    line1 = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    line2 = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    line3 = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    city = serializers.CharField(max_length=100, allow_blank=True)
    region_code = serializers.CharField(max_length=10, required=False, allow_blank=True, allow_null=True)
    country_code = serializers.CharField(max_length=3, required=False, allow_blank=True, allow_null=True)
    postal_code = serializers.CharField(max_length=9, allow_blank=True)


class RoleRepresentationSerializer(serializers.Serializer):
    """Write serializer for the incoming role payload"""
    role_id = serializers.CharField(max_length=100, required=False, allow_null=True)
    role_code = serializers.CharField(max_length=20)
    start_date = serializers.DateField(required=False, allow_null=True)
    end_date = serializers.DateField(required=False, allow_null=True)
    percentage = serializers.IntegerField(required=False, allow_null=True)
    sponsor_type = serializers.CharField(max_length=100)
    sponsor_id = serializers.CharField(max_length=100)
    sponsor_id_type = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    emails = EmailRepresentationSerializer(many=True, required=False)
    phones = PhoneRepresentationSerializer(many=True, required=False)
    addresses = AddressRepresentationSerializer(many=True, required=False)

    def to_internal_value(self, data):
        # An empty XML list element parses to None
        if hasattr(data, 'items'):
            data = {
                key: ([] if key in LIST_FIELDS and value is None else value)
                for key, value in data.items()
            }
        return super().to_internal_value(data)

    def to_dto(self):
        data = dict(self.validated_data)
        data['emails'] = [EmailDTO(**e) for e in data.get('emails', [])]
        data['phones'] = [PhoneDTO(**p) for p in data.get('phones', [])]
        data['addresses'] = [AddressDTO(**a) for a in data.get('addresses', [])]
        data.setdefault('start_date', None)
        return RoleDTO(**data)


class SorEmailAddressSerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='address_type.description', read_only=True)

    class Meta:
        model = SorEmailAddress
        fields = ['id', 'type', 'address']


class SorPhoneSerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='phone_type.description', read_only=True)
    address_type = serializers.CharField(source='address_type.description', read_only=True)

    class Meta:
        model = SorPhone
        fields = ['id', 'type', 'address_type', 'country_code', 'area_code', 'number', 'extension']


class SorAddressSerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='address_type.description', read_only=True)
    region_code = serializers.CharField(source='region.code', read_only=True, default=None)
    country_code = serializers.CharField(source='country.code', read_only=True, default=None)

    class Meta:
        model = SorAddress
        fields = [
            'id', 'type', 'line1', 'line2', 'line3', 'city',
            'region_code', 'country_code', 'postal_code'
        ]


class SorUrlSerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='url_type.description', read_only=True)

    class Meta:
        model = SorUrl
        fields = ['id', 'type', 'url']


class SorRoleSerializer(serializers.ModelSerializer):
    """Read serializer for a stored SOR role with its contacts"""
    role_id = serializers.CharField(source='sor_id', read_only=True)
    role_code = serializers.CharField(source='role_info.code', read_only=True)
    title = serializers.CharField(source='role_info.title', read_only=True)
    source_sor = serializers.CharField(source='source_sor_identifier', read_only=True)
    status = serializers.CharField(source='person_status.description', read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    sponsor = serializers.SerializerMethodField()
    emails = SorEmailAddressSerializer(source='email_addresses', many=True, read_only=True)
    phones = SorPhoneSerializer(many=True, read_only=True)
    addresses = SorAddressSerializer(many=True, read_only=True)
    urls = SorUrlSerializer(many=True, read_only=True)

    class Meta:
        model = SorRole
        fields = [
            'id', 'role_id', 'role_code', 'title', 'source_sor',
            'start_date', 'end_date', 'is_active', 'percentage', 'status', 'sponsor',
            'emails', 'phones', 'addresses', 'urls',
            'created_at', 'updated_at'
        ]

    def get_sponsor(self, obj):
        sponsor = obj.get_sponsor()
        if sponsor is None:
            return None
        return {
            'type': sponsor.sponsor_type.description,
            'sponsor_id': sponsor.sponsor_id,
        }
