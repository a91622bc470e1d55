# billing/api/serializers.py
from rest_framework import serializers

from billing.models import DeliveryNote, DeliveryNoteItem


class DeliveryNoteItemSerializer(serializers.ModelSerializer):
    line_total = serializers.DecimalField(max_digits=16, decimal_places=2, read_only=True)

    class Meta:
        model = DeliveryNoteItem
        fields = ["id", "quantity", "description", "price", "line_total"]


class DeliveryNoteSerializer(serializers.ModelSerializer):
    items = DeliveryNoteItemSerializer(many=True, read_only=True)

    class Meta:
        model = DeliveryNote
        fields = [
            "id",
            "note_number",
            "client_name",
            "date",
            "address",
            "contact_person",
            "contact_number",
            "job_no",
            "ce_number",
            "subtotal",
            "vat",
            "total",
            "items",
            "created_at",
        ]
        read_only_fields = fields
