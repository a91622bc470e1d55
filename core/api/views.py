# core/api/views.py
from django.core.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from billing.api.serializers import DeliveryNoteSerializer
from billing.models import DeliveryNote
from core.services.core_settings import get_settings_map, save_settings
from job.api.serializers import JobSerializer
from job.models import Job
from partners.api.serializers import AddressSerializer
from partners.models import Address
from shipments.api.serializers import CatalogElementSerializer, ShipmentSerializer
from shipments.models import CatalogElement, Shipment


class WaybillSettingsView(APIView):
    """Flat key/value settings used on the waybill (disclaimer, ...)."""

    def get(self, request):
        return Response(get_settings_map())

    def post(self, request):
        if not hasattr(request.data, "items") or not request.data:
            raise ValidationError("Send an object of setting keys and values.", code="invalid")
        count = save_settings(dict(request.data.items()))
        return Response({"message": "Settings saved successfully", "saved": count})


class AllDataView(APIView):
    """Everything the front end needs on first load, in one response."""

    def get(self, request):
        shipments = Shipment.objects.select_related("created_by").prefetch_related("elements")
        return Response({
            "shipments": ShipmentSerializer(shipments, many=True).data,
            "addresses": AddressSerializer(Address.objects.all(), many=True).data,
            "elements": CatalogElementSerializer(CatalogElement.objects.all(), many=True).data,
            "jobs": JobSerializer(Job.objects.prefetch_related("ce_numbers"), many=True).data,
            "delivery_notes": DeliveryNoteSerializer(
                DeliveryNote.objects.prefetch_related("items"), many=True
            ).data,
            "settings": get_settings_map(),
        })
