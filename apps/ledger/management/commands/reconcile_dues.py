"""
Management command to recompute members' dues from the ledger.

Each member's due should equal the installments charged by auctions
minus the collections recorded. This command reports members whose
stored due has drifted and corrects it.

Usage:
    python manage.py reconcile_dues
    python manage.py reconcile_dues --user <uuid> --dry-run
"""

from django.core.management.base import BaseCommand, CommandError

from apps.accounts.models import User, UserRole
from apps.ledger.services import reconcile_member_due, MemberNotFoundError


class Command(BaseCommand):
    help = 'Recompute member dues from installment charges and collections'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user',
            help='Only reconcile the member with this id',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show drift without correcting it',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']

        if options['user']:
            user_ids = [options['user']]
        else:
            user_ids = list(
                User.objects.filter(role=UserRole.MEMBER)
                .order_by('username')
                .values_list('id', flat=True)
            )

        drifted = 0
        for user_id in user_ids:
            try:
                result = reconcile_member_due(user_id=user_id, apply=not dry_run)
            except MemberNotFoundError as e:
                raise CommandError(str(e))

            if result.drift:
                drifted += 1
                self.stdout.write(
                    f'  - {result.username}: recorded {result.recorded_due}, '
                    f'expected {result.expected_due} (drift {result.drift})'
                )

        if drifted == 0:
            self.stdout.write(
                self.style.SUCCESS(f'Checked {len(user_ids)} member(s). All dues match the ledger.')
            )
            return

        if dry_run:
            self.stdout.write(
                self.style.WARNING(f'\n--dry-run mode: {drifted} due(s) left unchanged.')
            )
            return

        self.stdout.write(
            self.style.SUCCESS(f'\nCorrected {drifted} of {len(user_ids)} member due(s).')
        )
