from rest_framework import serializers

from job.models import Job


class JobSerializer(serializers.ModelSerializer):
    ce_numbers = serializers.ListField(source="ce_numbers_list", child=serializers.CharField(), read_only=True)

    class Meta:
        model = Job
        fields = [
            "id",
            "job_no",
            "customer_name",
            "product_name",
            "account_executive",
            "description",
            "status",
            "ce_numbers",
            "created_at",
        ]
