# job/services/lookup.py
from job.models import Job


def job_for_number(job_no):
    if not job_no:
        return None
    return Job.objects.filter(job_no=job_no).order_by("-id").first()


def job_for_ce_number(ce_number):
    if not ce_number:
        return None
    return (
        Job.objects
        .filter(ce_numbers__ce_number=ce_number)
        .prefetch_related("ce_numbers")
        .order_by("-id")
        .first()
    )
