# shipments/api/urls.py
from django.urls import include, path
from rest_framework.routers import SimpleRouter

from shipments.api.views import (
    CatalogElementViewSet,
    ShipmentDetailView,
    ShipmentListCreateView,
    ShipmentStatusView,
    ShipmentWaybillView,
)

router = SimpleRouter()
router.register("elements", CatalogElementViewSet, basename="element")

urlpatterns = [
    path("shipments/", ShipmentListCreateView.as_view(), name="shipment_list"),
    path("shipments/<str:tracking_no>/", ShipmentDetailView.as_view(), name="shipment_detail"),
    path("shipments/<str:tracking_no>/status/", ShipmentStatusView.as_view(), name="shipment_status"),
    path("shipments/<str:tracking_no>/waybill/", ShipmentWaybillView.as_view(), name="shipment_waybill"),
    path("", include(router.urls)),
]
