# Seeds the shipment and delivery-note counters so the first numbers are T1001 / DN1001.

from django.db import migrations

COUNTERS = ("shipmentCounter", "deliveryNoteCounter")
START = 1000


def seed_counters(apps, schema_editor):
    SequenceCounter = apps.get_model("core", "SequenceCounter")
    for name in COUNTERS:
        SequenceCounter.objects.get_or_create(name=name, defaults={"current_number": START})


def unseed_counters(apps, schema_editor):
    SequenceCounter = apps.get_model("core", "SequenceCounter")
    SequenceCounter.objects.filter(name__in=COUNTERS, current_number=START).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_counters, unseed_counters),
    ]
