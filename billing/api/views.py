# billing/api/views.py
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from billing.api.serializers import DeliveryNoteSerializer
from billing.documents.delivery_note import build_delivery_note
from billing.models import DeliveryNote
from billing.services.delivery_notes import create_delivery_note, delete_delivery_note
from core.pdf.assets import load_logo
from core.pdf.response import pdf_response


class DeliveryNoteListCreateView(APIView):
    def get(self, request):
        qs = DeliveryNote.objects.prefetch_related("items")
        return Response(DeliveryNoteSerializer(qs, many=True).data)

    def post(self, request):
        note = create_delivery_note(request.data, user=request.user)
        return Response(
            {"message": "Delivery note created successfully", "id": note.pk, "note_number": note.note_number},
            status=status.HTTP_201_CREATED,
        )


class DeliveryNoteDetailView(APIView):
    def get(self, request, pk: int):
        note = get_object_or_404(DeliveryNote.objects.prefetch_related("items"), pk=pk)
        return Response(DeliveryNoteSerializer(note).data)

    def delete(self, request, pk: int):
        note = get_object_or_404(DeliveryNote, pk=pk)
        delete_delivery_note(note)
        return Response({"message": "Delivery note deleted successfully"})


class DeliveryNotePdfView(APIView):
    def get(self, request, pk: int):
        note = get_object_or_404(DeliveryNote, pk=pk)
        pages = build_delivery_note(note, note.items.all(), logo=load_logo())
        return pdf_response(pages, f"DN-{note.note_number}.pdf", title=f"Delivery Note {note.note_number}")
