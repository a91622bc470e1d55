from django.conf import settings
from django.db import models


class ShipmentStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    IN_TRANSIT = "IN_TRANSIT", "In Transit"
    DELIVERED = "DELIVERED", "Delivered"
    CANCELED = "CANCELED", "Canceled"


class Shipment(models.Model):
    # T<counter>, issued by core.numbering
    tracking_no = models.CharField(max_length=20, unique=True, db_index=True)

    sender_name = models.CharField(max_length=200)
    sender_contact = models.CharField(max_length=200, blank=True, default="")
    sender_address = models.TextField()

    recipient_name = models.CharField(max_length=200)
    recipient_contact = models.CharField(max_length=200, blank=True, default="")
    recipient_address = models.TextField()

    associated_job_no = models.CharField(max_length=50, null=True, blank=True, db_index=True)
    ce_number = models.CharField(max_length=50, null=True, blank=True)
    courier_charge = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    status = models.CharField(
        max_length=32, choices=ShipmentStatus.choices, default=ShipmentStatus.PENDING, db_index=True
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL,
        related_name="shipments_created",
    )

    class Meta:
        db_table = "shipments_shipment"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["created_at"], name="shipments_created_idx"),
        ]

    def __str__(self):
        return self.tracking_no or f"Shipment#{self.pk}"
