from django.urls import path

from core.api.views import AllDataView, WaybillSettingsView

urlpatterns = [
    path("settings/waybill/", WaybillSettingsView.as_view(), name="waybill_settings"),
    path("all-data/", AllDataView.as_view(), name="all_data"),
]
