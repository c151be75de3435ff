"""Management command to recompute cached customer tiers."""

from django.core.management.base import BaseCommand, CommandError

from rewardman.models import Customer
from rewardman.services import customer as customer_service


class Command(BaseCommand):
    help = "Recompute the cached tier of one or all customers from lifetime points"

    def add_arguments(self, parser):
        parser.add_argument(
            "--email",
            type=str,
            default=None,
            help="Only recompute this customer",
        )

    def handle(self, *args, **options):
        qs = Customer.objects.all()
        if options["email"]:
            qs = qs.filter(email__iexact=options["email"])
            if not qs.exists():
                raise CommandError(f"Customer {options['email']} not found")

        changed = 0
        total = 0
        for cust in qs.iterator():
            total += 1
            old_tier = cust.tier
            if customer_service.refresh_tier(cust) != old_tier:
                changed += 1

        self.stdout.write(
            self.style.SUCCESS(f"Recomputed {total} customers, {changed} tier(s) changed.")
        )
