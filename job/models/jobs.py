from django.db import models


class Job(models.Model):
    job_no = models.CharField(max_length=50, null=True, blank=True, db_index=True)
    customer_name = models.CharField(max_length=200, blank=True, default="")
    product_name = models.CharField(max_length=200, blank=True, default="")
    account_executive = models.CharField(max_length=100, blank=True, default="")
    description = models.TextField(blank=True, default="")
    status = models.CharField(max_length=50, blank=True, default="")
    # id of the job in the job-management system it was imported from
    external_id = models.IntegerField(null=True, blank=True, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "job_jobs"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.job_no or f"Job#{self.pk}"

    @property
    def ce_numbers_list(self):
        return [ce.ce_number for ce in self.ce_numbers.all()]


class JobCENumber(models.Model):
    """Client-engagement document number; one job may have several."""
    job = models.ForeignKey("job.Job", on_delete=models.CASCADE, related_name="ce_numbers")
    ce_number = models.CharField(max_length=50, db_index=True)

    class Meta:
        db_table = "job_ce_numbers"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["job", "ce_number"], name="uniq_ce_number_per_job"),
        ]

    def __str__(self):
        return self.ce_number
