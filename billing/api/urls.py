# billing/api/urls.py
from django.urls import path

from billing.api.views import DeliveryNoteDetailView, DeliveryNoteListCreateView, DeliveryNotePdfView

urlpatterns = [
    path("delivery-notes/", DeliveryNoteListCreateView.as_view(), name="delivery_note_list"),
    path("delivery-notes/<int:pk>/", DeliveryNoteDetailView.as_view(), name="delivery_note_detail"),
    path("delivery-notes/<int:pk>/pdf/", DeliveryNotePdfView.as_view(), name="delivery_note_pdf"),
]
