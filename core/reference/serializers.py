from rest_framework import serializers
from .models import Type, Country, Region, RoleInfo, OrganizationalUnit


class TypeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Type
        fields = ['id', 'data_type', 'description']


class RegionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Region
        fields = ['id', 'code', 'name']


class CountrySerializer(serializers.ModelSerializer):
    regions = RegionSerializer(many=True, read_only=True)

    class Meta:
        model = Country
        fields = ['id', 'code', 'name', 'regions']


class OrganizationalUnitSerializer(serializers.ModelSerializer):
    parent_code = serializers.CharField(source='parent.code', read_only=True, default=None)

    class Meta:
        model = OrganizationalUnit
        fields = ['id', 'code', 'name', 'parent_code']


class RoleInfoSerializer(serializers.ModelSerializer):
    organizational_unit_code = serializers.CharField(source='organizational_unit.code', read_only=True)
    affiliation_type = serializers.CharField(source='affiliation_type.description', read_only=True)

    class Meta:
        model = RoleInfo
        fields = ['id', 'code', 'title', 'organizational_unit_code', 'affiliation_type']
