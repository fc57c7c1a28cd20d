import pytest
from decimal import Decimal
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError

from apps.accounts.models import User


@pytest.mark.django_db
class TestReconcileDuesCommand:

    def test_all_match(self, auction):
        out = StringIO()
        call_command('reconcile_dues', stdout=out)

        assert 'All dues match the ledger' in out.getvalue()

    def test_corrects_drift(self, member, auction):
        User.objects.filter(id=member.id).update(due_amount=Decimal('0.00'))
        out = StringIO()

        call_command('reconcile_dues', stdout=out)

        assert 'Corrected 1 of 10' in out.getvalue()
        assert User.objects.get(id=member.id).due_amount == Decimal('7200.00')

    def test_dry_run(self, member, auction):
        User.objects.filter(id=member.id).update(due_amount=Decimal('0.00'))
        out = StringIO()

        call_command('reconcile_dues', '--dry-run', stdout=out)

        assert 'left unchanged' in out.getvalue()
        assert User.objects.get(id=member.id).due_amount == Decimal('0.00')

    def test_single_member(self, member, auction):
        out = StringIO()
        call_command('reconcile_dues', '--user', str(member.id), stdout=out)

        assert 'Checked 1 member(s)' in out.getvalue()

    def test_unknown_member(self, db):
        with pytest.raises(CommandError):
            call_command('reconcile_dues', '--user', '00000000-0000-0000-0000-000000000000', stdout=StringIO())
