# shipments/api/views.py
import logging

from django.shortcuts import get_object_or_404
from rest_framework import status, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from core.pdf.assets import load_logo
from core.pdf.response import pdf_response
from core.services.core_settings import get_settings_map
from job.services.lookup import job_for_number
from shipments.api.serializers import CatalogElementSerializer, ShipmentSerializer, StatusUpdateSerializer
from shipments.documents.waybill import build_waybill
from shipments.models import CatalogElement, Shipment
from shipments.services.shipments import create_shipment, delete_shipment, set_status, update_shipment

logger = logging.getLogger(__name__)


def _shipment_queryset():
    return Shipment.objects.select_related("created_by").prefetch_related("elements")


class ShipmentListCreateView(APIView):
    def get(self, request):
        qs = _shipment_queryset()
        return Response(ShipmentSerializer(qs, many=True).data)

    def post(self, request):
        shipment = create_shipment(request.data, user=request.user)
        return Response(
            {"message": "Shipment created successfully", "tracking_no": shipment.tracking_no},
            status=status.HTTP_201_CREATED,
        )


class ShipmentDetailView(APIView):
    def get(self, request, tracking_no: str):
        shipment = get_object_or_404(_shipment_queryset(), tracking_no=tracking_no)
        return Response(ShipmentSerializer(shipment).data)

    def put(self, request, tracking_no: str):
        shipment = get_object_or_404(Shipment, tracking_no=tracking_no)
        update_shipment(shipment, request.data)
        return Response({"message": "Shipment updated successfully", "tracking_no": shipment.tracking_no})

    def delete(self, request, tracking_no: str):
        shipment = get_object_or_404(Shipment, tracking_no=tracking_no)
        delete_shipment(shipment)
        return Response({"message": "Shipment deleted successfully"})


class ShipmentStatusView(APIView):
    def patch(self, request, tracking_no: str):
        shipment = get_object_or_404(Shipment, tracking_no=tracking_no)
        ser = StatusUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        set_status(shipment, ser.validated_data["status"])
        return Response({"tracking_no": shipment.tracking_no, "status": shipment.status})


class ShipmentWaybillView(APIView):
    def get(self, request, tracking_no: str):
        shipment = get_object_or_404(Shipment, tracking_no=tracking_no)
        job = job_for_number(shipment.associated_job_no)
        pages = build_waybill(
            shipment,
            shipment.elements.all(),
            settings_map=get_settings_map(),
            job=job,
            logo=load_logo(),
        )
        logger.debug("Waybill %s laid out on %d page(s)", shipment.tracking_no, len(pages))
        return pdf_response(
            pages,
            f"waybill-{shipment.tracking_no}.pdf",
            title=f"Waybill {shipment.tracking_no}",
        )


class CatalogElementViewSet(viewsets.ModelViewSet):
    queryset = CatalogElement.objects.all()
    serializer_class = CatalogElementSerializer
