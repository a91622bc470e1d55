from django.db import models


class CatalogElement(models.Model):
    """Reusable element template picked when packing a shipment."""
    brand = models.CharField(max_length=100, blank=True, default="")
    product = models.CharField(max_length=200, blank=True, default="")
    color = models.CharField(max_length=50, blank=True, default="")
    description = models.TextField(blank=True, default="")

    class Meta:
        db_table = "shipments_catalog_elements"
        ordering = ["brand", "product", "id"]

    def __str__(self):
        return " ".join(p for p in [self.brand, self.product, self.color] if p) or f"Element#{self.pk}"
