from django.urls import path

from job.api.views import JobByCENumberView, JobListView

urlpatterns = [
    path("jobs/", JobListView.as_view(), name="job_list"),
    path("jobs/by-ce/<str:ce_number>/", JobByCENumberView.as_view(), name="job_by_ce"),
]
