from django.urls import include, path
from rest_framework.routers import SimpleRouter

from partners.api.views import AddressViewSet

router = SimpleRouter()
router.register("addresses", AddressViewSet, basename="address")

urlpatterns = [
    path("", include(router.urls)),
]
