from django.db import models


class ShipmentElement(models.Model):
    shipment = models.ForeignKey("shipments.Shipment", on_delete=models.CASCADE, related_name="elements")
    description = models.TextField()
    # free text on purpose: "2 boxes", "1 pallet", ...
    quantity = models.CharField(max_length=50)

    class Meta:
        db_table = "shipments_elements"
        ordering = ["id"]

    def __str__(self):
        return f"{self.quantity} x {self.description[:40]}"
