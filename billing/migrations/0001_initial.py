from decimal import Decimal

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
            name="DeliveryNote",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("note_number", models.CharField(db_index=True, max_length=20, unique=True)),
                ("client_name", models.CharField(max_length=200)),
                ("date", models.DateField()),
                ("address", models.TextField()),
                ("contact_person", models.CharField(blank=True, default="", max_length=200)),
                ("contact_number", models.CharField(blank=True, default="", max_length=50)),
                ("job_no", models.CharField(blank=True, default="", max_length=50)),
                ("ce_number", models.CharField(blank=True, default="", max_length=50)),
                ("subtotal", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=14)),
                ("vat", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=14)),
                ("total", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=14)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="delivery_notes_created",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "db_table": "billing_delivery_notes",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="DeliveryNoteItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("quantity", models.DecimalField(decimal_places=2, max_digits=12)),
                ("description", models.TextField()),
                ("price", models.DecimalField(decimal_places=2, max_digits=14)),
                ("delivery_note", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="items",
                    to="billing.deliverynote",
                )),
            ],
            options={
                "db_table": "billing_delivery_note_items",
                "ordering": ["id"],
            },
        ),
    ]
