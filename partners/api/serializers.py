from rest_framework import serializers

from partners.models import Address


class AddressSerializer(serializers.ModelSerializer):
    class Meta:
        model = Address
        fields = ["id", "name", "contact_person", "phone", "address", "created_at"]
        read_only_fields = ["id", "created_at"]
