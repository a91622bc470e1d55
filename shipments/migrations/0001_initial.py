from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="CatalogElement",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("brand", models.CharField(blank=True, default="", max_length=100)),
                ("product", models.CharField(blank=True, default="", max_length=200)),
                ("color", models.CharField(blank=True, default="", max_length=50)),
                ("description", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "shipments_catalog_elements",
                "ordering": ["brand", "product", "id"],
            },
        ),
        migrations.CreateModel(
            name="Shipment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("tracking_no", models.CharField(db_index=True, max_length=20, unique=True)),
                ("sender_name", models.CharField(max_length=200)),
                ("sender_contact", models.CharField(blank=True, default="", max_length=200)),
                ("sender_address", models.TextField()),
                ("recipient_name", models.CharField(max_length=200)),
                ("recipient_contact", models.CharField(blank=True, default="", max_length=200)),
                ("recipient_address", models.TextField()),
                ("associated_job_no", models.CharField(blank=True, db_index=True, max_length=50, null=True)),
                ("ce_number", models.CharField(blank=True, max_length=50, null=True)),
                ("courier_charge", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("status", models.CharField(
                    choices=[
                        ("PENDING", "Pending"),
                        ("IN_TRANSIT", "In Transit"),
                        ("DELIVERED", "Delivered"),
                        ("CANCELED", "Canceled"),
                    ],
                    db_index=True,
                    default="PENDING",
                    max_length=32,
                )),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="shipments_created",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "db_table": "shipments_shipment",
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["created_at"], name="shipments_created_idx")],
            },
        ),
        migrations.CreateModel(
            name="ShipmentElement",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("description", models.TextField()),
                ("quantity", models.CharField(max_length=50)),
                ("shipment", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="elements",
                    to="shipments.shipment",
                )),
            ],
            options={
                "db_table": "shipments_elements",
                "ordering": ["id"],
            },
        ),
    ]
