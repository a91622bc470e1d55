from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Job",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("job_no", models.CharField(blank=True, db_index=True, max_length=50, null=True)),
                ("customer_name", models.CharField(blank=True, default="", max_length=200)),
                ("product_name", models.CharField(blank=True, default="", max_length=200)),
                ("account_executive", models.CharField(blank=True, default="", max_length=100)),
                ("description", models.TextField(blank=True, default="")),
                ("status", models.CharField(blank=True, default="", max_length=50)),
                ("external_id", models.IntegerField(blank=True, null=True, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "job_jobs",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="JobCENumber",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("ce_number", models.CharField(db_index=True, max_length=50)),
                ("job", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="ce_numbers",
                    to="job.job",
                )),
            ],
            options={
                "db_table": "job_ce_numbers",
                "ordering": ["id"],
                "constraints": [
                    models.UniqueConstraint(fields=("job", "ce_number"), name="uniq_ce_number_per_job"),
                ],
            },
        ),
    ]
