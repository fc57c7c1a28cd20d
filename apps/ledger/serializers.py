from decimal import Decimal

from rest_framework import serializers

from apps.groups.serializers import UserMinimalSerializer
from .models import (
    CollectionRecord,
    PaymentRecord,
    CreditRecord,
    ExpenseRecord,
    SalaryRecord,
    PaymentMode,
    PaymentType,
    ExpenseType,
)

MIN_TEXT_LENGTH = 3


def amount_field():
    return serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))


# =============================================================================
# Output serializers
# =============================================================================

class CollectionRecordSerializer(serializers.ModelSerializer):
    """A collection receipt with its snapshots."""

    group_name = serializers.CharField(source='group.group_name', read_only=True)
    user = UserMinimalSerializer(read_only=True)
    recorded_by = UserMinimalSerializer(read_only=True)
    due_number = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = CollectionRecord
        fields = [
            'id',
            'receipt_number',
            'company_name',
            'group',
            'group_name',
            'auction',
            'auction_number',
            'due_number',
            'user',
            'payment_date',
            'payment_time',
            'payment_type',
            'payment_mode',
            'amount',
            'chit_amount',
            'user_total_due_before_this_payment',
            'balance_amount',
            'total_paid_for_this_due',
            'balance_for_this_installment',
            'remarks',
            'collection_location',
            'virtual_transaction_id',
            'recorded_by',
            'recorded_at',
        ]
        read_only_fields = fields


class PaymentRecordSerializer(serializers.ModelSerializer):
    group_name = serializers.CharField(source='group.group_name', read_only=True)
    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = PaymentRecord
        fields = [
            'id',
            'group',
            'group_name',
            'auction',
            'auction_number',
            'user',
            'payment_date',
            'payment_time',
            'payment_type',
            'payment_mode',
            'amount',
            'remarks',
            'virtual_transaction_id',
            'recorded_at',
        ]
        read_only_fields = fields


class CreditRecordSerializer(serializers.ModelSerializer):

    class Meta:
        model = CreditRecord
        fields = [
            'id',
            'from_name',
            'credit_number',
            'payment_date',
            'payment_mode',
            'amount',
            'remarks',
            'virtual_transaction_id',
            'recorded_at',
        ]
        read_only_fields = fields


class ExpenseRecordSerializer(serializers.ModelSerializer):

    class Meta:
        model = ExpenseRecord
        fields = [
            'id',
            'expense_type',
            'amount',
            'expense_date',
            'expense_time',
            'reason',
            'from_person',
            'payment_mode',
            'remarks',
            'virtual_transaction_id',
            'recorded_at',
        ]
        read_only_fields = fields


class SalaryRecordSerializer(serializers.ModelSerializer):
    employee = UserMinimalSerializer(read_only=True)

    class Meta:
        model = SalaryRecord
        fields = ['id', 'employee', 'amount', 'payment_date', 'remarks', 'recorded_at']
        read_only_fields = fields


class DueReconciliationSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    username = serializers.CharField(allow_null=True)
    recorded_due = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_charged = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_collected = serializers.DecimalField(max_digits=12, decimal_places=2)
    expected_due = serializers.DecimalField(max_digits=12, decimal_places=2)
    drift = serializers.DecimalField(max_digits=12, decimal_places=2)
    corrected = serializers.BooleanField()


# =============================================================================
# Filter serializers (query parameters)
# =============================================================================

class CollectionFilterSerializer(serializers.Serializer):
    """
    Query Parameters:
        group (UUID): Filter by group ID
        user (UUID): Filter by member ID
        auction_number (int): Installment the collection was for
        date (date): Payment date
    """

    group = serializers.UUIDField(required=False)
    user = serializers.UUIDField(required=False)
    auction_number = serializers.IntegerField(required=False, min_value=1)
    date = serializers.DateField(required=False)


class PaymentFilterSerializer(serializers.Serializer):
    group = serializers.UUIDField(required=False)
    user = serializers.UUIDField(required=False)
    date = serializers.DateField(required=False)


class CreditFilterSerializer(serializers.Serializer):
    date = serializers.DateField(required=False)


class ExpenseFilterSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=ExpenseType.choices, required=False)
    date = serializers.DateField(required=False)


class SalaryFilterSerializer(serializers.Serializer):
    employee = serializers.UUIDField(required=False)
    date = serializers.DateField(required=False)


# =============================================================================
# Input serializers
# =============================================================================

class CollectionCreateSerializer(serializers.Serializer):
    group_id = serializers.UUIDField()
    user_id = serializers.UUIDField()
    auction_id = serializers.UUIDField(required=False, allow_null=True)
    amount = amount_field()
    payment_mode = serializers.ChoiceField(choices=PaymentMode.choices)
    payment_type = serializers.ChoiceField(choices=PaymentType.choices, default=PaymentType.FULL)
    payment_date = serializers.DateField()
    payment_time = serializers.TimeField()
    remarks = serializers.CharField(max_length=255, required=False, default='Auction Collection')
    collection_location = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')


class PaymentCreateSerializer(serializers.Serializer):
    group_id = serializers.UUIDField()
    user_id = serializers.UUIDField()
    auction_id = serializers.UUIDField(required=False, allow_null=True)
    amount = amount_field()
    payment_mode = serializers.ChoiceField(choices=PaymentMode.choices)
    payment_type = serializers.ChoiceField(choices=PaymentType.choices, default=PaymentType.FULL)
    payment_date = serializers.DateField()
    payment_time = serializers.TimeField()
    remarks = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')


class CreditCreateSerializer(serializers.Serializer):
    from_name = serializers.CharField(min_length=MIN_TEXT_LENGTH, max_length=150)
    credit_number = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    amount = amount_field()
    payment_mode = serializers.ChoiceField(choices=PaymentMode.choices)
    payment_date = serializers.DateField()
    remarks = serializers.CharField(max_length=255, required=False, default='Credit')


class ExpenseCreateSerializer(serializers.Serializer):
    expense_type = serializers.ChoiceField(choices=ExpenseType.choices)
    amount = amount_field()
    expense_date = serializers.DateField(required=False, allow_null=True)
    expense_time = serializers.TimeField(required=False, allow_null=True)
    reason = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    from_person = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    payment_mode = serializers.ChoiceField(
        choices=PaymentMode.choices, required=False, allow_blank=True, default=''
    )
    remarks = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')

    def validate(self, attrs):
        errors = {}
        if attrs['expense_type'] == ExpenseType.SPEND:
            if not attrs.get('expense_date'):
                errors['expense_date'] = 'Date is required for a spend.'
            if not attrs.get('expense_time'):
                errors['expense_time'] = 'Time is required for a spend.'
            if len(attrs['reason'].strip()) < MIN_TEXT_LENGTH:
                errors['reason'] = 'Reason must be at least 3 characters.'
        else:
            if len(attrs['from_person'].strip()) < MIN_TEXT_LENGTH:
                errors['from_person'] = 'From person must be at least 3 characters.'
            if not attrs['payment_mode']:
                errors['payment_mode'] = 'Payment mode is required for money received.'
        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class SalaryCreateSerializer(serializers.Serializer):
    employee_id = serializers.UUIDField()
    amount = amount_field()
    payment_date = serializers.DateField()
    remarks = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
