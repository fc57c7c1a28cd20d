# Generated manually for the chit ledger auctions app

import uuid
from decimal import Decimal
import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('groups', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='AuctionRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('auction_number', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('auction_month', models.CharField(max_length=30)),
                ('auction_date', models.DateField()),
                ('auction_time', models.TimeField()),
                ('winning_bid_amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('commission_amount', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('discount', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('net_discount', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('dividend_per_member', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('final_amount_to_be_paid', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('amount_paid_to_winner', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('notes', models.TextField(blank=True)),
                ('billed_at', models.DateTimeField(blank=True, null=True)),
                ('recorded_at', models.DateTimeField(auto_now_add=True)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='auction_records', to='groups.chitgroup')),
                ('winner', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='auctions_won', to=settings.AUTH_USER_MODEL)),
                ('recorded_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='auctions_recorded', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'auction_records',
                'ordering': ['group', 'auction_number'],
                'indexes': [
                    models.Index(fields=['group', 'auction_date'], name='auction_group_date_idx'),
                    models.Index(fields=['recorded_at'], name='auction_recorded_at_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('group', 'auction_number'), name='unique_group_auction_number'),
                    models.UniqueConstraint(fields=('group', 'winner'), name='unique_group_winner'),
                ],
            },
        ),
        migrations.CreateModel(
            name='InstallmentCharge',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('auction', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='charges', to='auctions.auctionrecord')),
                ('member', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='installment_charges', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'installment_charges',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['member', 'created_at'], name='charge_member_created_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('auction', 'member'), name='unique_auction_member_charge'),
                ],
            },
        ),
    ]
