from decimal import Decimal

from django.conf import settings
from django.db import models


class DeliveryNote(models.Model):
    # DN<counter>, issued by core.numbering
    note_number = models.CharField(max_length=20, unique=True, db_index=True)

    client_name = models.CharField(max_length=200)
    date = models.DateField()
    address = models.TextField()
    contact_person = models.CharField(max_length=200, blank=True, default="")
    contact_number = models.CharField(max_length=50, blank=True, default="")
    job_no = models.CharField(max_length=50, blank=True, default="")
    ce_number = models.CharField(max_length=50, blank=True, default="")

    # computed once at creation from the items, never recalculated
    subtotal = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    vat = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    total = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))

    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL,
        related_name="delivery_notes_created",
    )

    class Meta:
        db_table = "billing_delivery_notes"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.note_number or f"DeliveryNote#{self.pk}"


class DeliveryNoteItem(models.Model):
    delivery_note = models.ForeignKey(
        "billing.DeliveryNote", on_delete=models.CASCADE, related_name="items"
    )
    quantity = models.DecimalField(max_digits=12, decimal_places=2)
    description = models.TextField()
    price = models.DecimalField(max_digits=14, decimal_places=2)

    class Meta:
        db_table = "billing_delivery_note_items"
        ordering = ["id"]

    def __str__(self):
        return f"{self.quantity} x {self.description[:40]}"

    @property
    def line_total(self):
        return self.quantity * self.price
