from django.contrib import admin
from django.urls import include, path

api_patterns = [
    path("", include("core.api.urls")),
    path("", include("shipments.api.urls")),
    path("", include("billing.api.urls")),
    path("", include("job.api.urls")),
    path("", include("partners.api.urls")),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include(api_patterns)),
]
