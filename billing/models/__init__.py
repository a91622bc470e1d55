# billing/models/__init__.py
from .delivery_notes import DeliveryNote, DeliveryNoteItem
