from django.db import models


class Address(models.Model):
    """Address book entry used to prefill sender / recipient / deliver-to blocks."""
    name = models.CharField(max_length=200)
    contact_person = models.CharField(max_length=120, blank=True, default="")
    phone = models.CharField(max_length=60, blank=True, default="")
    address = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "partners_addresses"
        ordering = ["name", "id"]
        verbose_name_plural = "Addresses"

    def __str__(self):
        return self.name
