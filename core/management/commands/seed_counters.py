from django.core.management.base import BaseCommand

from core.models import SequenceCounter
from core.numbering import DELIVERY_NOTE_COUNTER, SHIPMENT_COUNTER, default_start


class Command(BaseCommand):
    help = "Create the shipment and delivery-note counters if they are missing."

    def add_arguments(self, parser):
        parser.add_argument("--start", type=int, default=None,
                            help="Starting value for counters that do not exist yet.")

    def handle(self, *args, **options):
        start = options["start"] if options["start"] is not None else default_start()
        created = 0
        for name in (SHIPMENT_COUNTER, DELIVERY_NOTE_COUNTER):
            obj, was_created = SequenceCounter.objects.get_or_create(name=name, defaults={"current_number": start})
            created += 1 if was_created else 0
            self.stdout.write(f"{obj.name}: {obj.current_number}")
        self.stdout.write(self.style.SUCCESS(f"Counter seeding done. New rows: {created}"))
