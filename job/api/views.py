# job/api/views.py
from django.http import Http404
from rest_framework.response import Response
from rest_framework.views import APIView

from job.api.serializers import JobSerializer
from job.models import Job
from job.services.lookup import job_for_ce_number


class JobListView(APIView):
    def get(self, request):
        qs = Job.objects.prefetch_related("ce_numbers")
        return Response(JobSerializer(qs, many=True).data)


class JobByCENumberView(APIView):
    def get(self, request, ce_number: str):
        job = job_for_ce_number(ce_number)
        if job is None:
            raise Http404("Job not found for this CE number.")
        return Response(JobSerializer(job).data)
