# Generated manually for the chit ledger groups app

import uuid
from decimal import Decimal
import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ChitGroup',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('group_name', models.CharField(max_length=200, unique=True)),
                ('description', models.TextField(blank=True)),
                ('total_people', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('total_amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('tenure', models.PositiveIntegerField(help_text='Number of monthly auctions', validators=[django.core.validators.MinValueValidator(1)])),
                ('start_date', models.DateField()),
                ('rate', models.DecimalField(blank=True, decimal_places=2, help_text='Monthly installment before dividend', max_digits=12, null=True)),
                ('commission', models.DecimalField(blank=True, decimal_places=2, help_text='Foreman commission, percent of total amount', max_digits=5, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0')), django.core.validators.MaxValueValidator(Decimal('100'))])),
                ('bidding_type', models.CharField(choices=[('auction', 'Auction Based'), ('random', 'Random Draw'), ('pre-fixed', 'Pre-fixed')], default='auction', max_length=20)),
                ('min_bid', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('auction_month', models.CharField(blank=True, max_length=30)),
                ('auction_scheduled_date', models.DateField(blank=True, null=True)),
                ('auction_scheduled_time', models.TimeField(blank=True, null=True)),
                ('last_winning_bid_amount', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('last_auction_winner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'chit_groups',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['start_date'], name='chit_groups_start_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='GroupMembership',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('position', models.PositiveIntegerField()),
                ('joined_at', models.DateTimeField(auto_now_add=True)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='groups.chitgroup')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='chit_memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'group_memberships',
                'ordering': ['position'],
                'indexes': [
                    models.Index(fields=['user', 'joined_at'], name='membership_user_joined_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('group', 'user'), name='unique_group_member'),
                    models.UniqueConstraint(fields=('group', 'position'), name='unique_group_position'),
                ],
            },
        ),
    ]
