# shipments/models/__init__.py
from .shipments import Shipment, ShipmentStatus
from .element import ShipmentElement
from .catalog import CatalogElement
