# job/admin.py
from django.contrib import admin

from .models import Job, JobCENumber


class JobCENumberInline(admin.TabularInline):
    model = JobCENumber
    extra = 0


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ("job_no", "customer_name", "product_name", "account_executive", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("job_no", "customer_name", "product_name", "ce_numbers__ce_number")
    inlines = [JobCENumberInline]
