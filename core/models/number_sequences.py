from django.db import models


class SequenceCounter(models.Model):
    """
    One row per named sequence ("shipmentCounter", "deliveryNoteCounter").
    Only core.numbering.allocate() writes current_number.
    """
    name = models.CharField(max_length=50, unique=True)
    current_number = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "core_sequence_counters"

    def __str__(self):
        return f"{self.name}:{self.current_number}"
