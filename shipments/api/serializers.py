# shipments/api/serializers.py
from rest_framework import serializers

from shipments.models import CatalogElement, Shipment, ShipmentElement


class ShipmentElementSerializer(serializers.ModelSerializer):
    class Meta:
        model = ShipmentElement
        fields = ["id", "description", "quantity"]


class ShipmentSerializer(serializers.ModelSerializer):
    elements = ShipmentElementSerializer(many=True, read_only=True)
    status_display = serializers.CharField(source="get_status_display", read_only=True)
    created_by = serializers.SerializerMethodField()

    class Meta:
        model = Shipment
        fields = [
            "id",
            "tracking_no",
            "sender_name",
            "sender_contact",
            "sender_address",
            "recipient_name",
            "recipient_contact",
            "recipient_address",
            "associated_job_no",
            "ce_number",
            "courier_charge",
            "status",
            "status_display",
            "elements",
            "created_at",
            "created_by",
        ]
        read_only_fields = fields

    def get_created_by(self, obj):
        user = obj.created_by
        return user.get_username() if user else None


class StatusUpdateSerializer(serializers.Serializer):
    status = serializers.CharField()


class CatalogElementSerializer(serializers.ModelSerializer):
    class Meta:
        model = CatalogElement
        fields = ["id", "brand", "product", "color", "description"]
