from rest_framework import viewsets

from partners.api.serializers import AddressSerializer
from partners.models import Address


class AddressViewSet(viewsets.ModelViewSet):
    queryset = Address.objects.all()
    serializer_class = AddressSerializer
