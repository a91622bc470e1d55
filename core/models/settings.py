from django.db import models


class CoreSetting(models.Model):
    code = models.CharField(max_length=100, unique=True)
    value = models.TextField(blank=True, default="")
    notes = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "core_settings"

    def __str__(self):
        return f"{self.code}"
