# Generated manually for the chit ledger ledger app

import uuid
from decimal import Decimal
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


PAYMENT_MODES = [('cash', 'Cash'), ('upi', 'UPI'), ('netbanking', 'Netbanking')]
PAYMENT_TYPES = [('full', 'Full Payment'), ('partial', 'Partial Payment')]


def positive_amount():
    return models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])


def snapshot_amount():
    return models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)


def recorded_by(related_name):
    return models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name=related_name, to=settings.AUTH_USER_MODEL)


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auctions', '0001_initial'),
        ('groups', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CollectionRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('receipt_number', models.CharField(editable=False, max_length=7, unique=True)),
                ('company_name', models.CharField(max_length=100)),
                ('auction_number', models.PositiveIntegerField(blank=True, null=True)),
                ('payment_date', models.DateField()),
                ('payment_time', models.TimeField()),
                ('payment_type', models.CharField(choices=PAYMENT_TYPES, default='full', max_length=20)),
                ('payment_mode', models.CharField(choices=PAYMENT_MODES, max_length=20)),
                ('amount', positive_amount()),
                ('chit_amount', snapshot_amount()),
                ('user_total_due_before_this_payment', models.DecimalField(decimal_places=2, max_digits=12)),
                ('balance_amount', snapshot_amount()),
                ('total_paid_for_this_due', models.DecimalField(decimal_places=2, max_digits=12)),
                ('balance_for_this_installment', snapshot_amount()),
                ('remarks', models.CharField(default='Auction Collection', max_length=255)),
                ('collection_location', models.CharField(blank=True, max_length=255)),
                ('virtual_transaction_id', models.CharField(max_length=7)),
                ('recorded_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='collections', to='groups.chitgroup')),
                ('auction', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='collections', to='auctions.auctionrecord')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='collections', to=settings.AUTH_USER_MODEL)),
                ('recorded_by', recorded_by('collections_recorded')),
            ],
            options={
                'db_table': 'collection_records',
                'ordering': ['-recorded_at'],
                'indexes': [
                    models.Index(fields=['user', 'group', 'auction_number'], name='collection_user_due_idx'),
                    models.Index(fields=['group', 'payment_date'], name='collection_group_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PaymentRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('auction_number', models.PositiveIntegerField(blank=True, null=True)),
                ('payment_date', models.DateField()),
                ('payment_time', models.TimeField()),
                ('payment_type', models.CharField(choices=PAYMENT_TYPES, default='full', max_length=20)),
                ('payment_mode', models.CharField(choices=PAYMENT_MODES, max_length=20)),
                ('amount', positive_amount()),
                ('remarks', models.CharField(blank=True, max_length=255)),
                ('virtual_transaction_id', models.CharField(max_length=7)),
                ('recorded_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='payments', to='groups.chitgroup')),
                ('auction', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='payments', to='auctions.auctionrecord')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='payments_received', to=settings.AUTH_USER_MODEL)),
                ('recorded_by', recorded_by('payments_recorded')),
            ],
            options={
                'db_table': 'payment_records',
                'ordering': ['-recorded_at'],
                'indexes': [
                    models.Index(fields=['user', 'group'], name='payment_user_group_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CreditRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('from_name', models.CharField(max_length=150)),
                ('credit_number', models.CharField(blank=True, max_length=50)),
                ('payment_date', models.DateField()),
                ('payment_mode', models.CharField(choices=PAYMENT_MODES, max_length=20)),
                ('amount', positive_amount()),
                ('remarks', models.CharField(default='Credit', max_length=255)),
                ('virtual_transaction_id', models.CharField(max_length=7)),
                ('recorded_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('recorded_by', recorded_by('credits_recorded')),
            ],
            options={
                'db_table': 'credit_records',
                'ordering': ['-recorded_at'],
            },
        ),
        migrations.CreateModel(
            name='ExpenseRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('expense_type', models.CharField(choices=[('spend', 'Spend'), ('received', 'Received')], max_length=20)),
                ('amount', positive_amount()),
                ('expense_date', models.DateField()),
                ('expense_time', models.TimeField(blank=True, null=True)),
                ('reason', models.CharField(blank=True, max_length=255)),
                ('from_person', models.CharField(blank=True, max_length=150)),
                ('payment_mode', models.CharField(blank=True, choices=PAYMENT_MODES, max_length=20)),
                ('remarks', models.CharField(blank=True, max_length=255)),
                ('virtual_transaction_id', models.CharField(max_length=7)),
                ('recorded_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('recorded_by', recorded_by('expenses_recorded')),
            ],
            options={
                'db_table': 'expense_records',
                'ordering': ['-recorded_at'],
                'indexes': [
                    models.Index(fields=['expense_type', 'recorded_at'], name='expense_type_recorded_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='SalaryRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', positive_amount()),
                ('payment_date', models.DateField()),
                ('remarks', models.CharField(blank=True, max_length=255)),
                ('recorded_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='salary_records', to=settings.AUTH_USER_MODEL)),
                ('recorded_by', recorded_by('salaries_recorded')),
            ],
            options={
                'db_table': 'salary_records',
                'ordering': ['-recorded_at'],
            },
        ),
    ]
