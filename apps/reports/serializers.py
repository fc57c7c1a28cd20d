"""
Serializers for the reports app.

Input serializers validate query parameters. Response serializers shape
the plain dicts returned by LedgerReports and document them in the
OpenAPI schema.
"""

from rest_framework import serializers


def money_field(**kwargs):
    return serializers.DecimalField(max_digits=14, decimal_places=2, **kwargs)


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class DaySheetQuerySerializer(serializers.Serializer):
    """
    Query Parameters:
        date (date): Day to report (YYYY-MM-DD). Defaults to today.
    """

    date = serializers.DateField(required=False)


class MasterRecordQuerySerializer(serializers.Serializer):
    """
    Query Parameters:
        days (int): Only the last N days (the office uses 7, 10 and 30).
            Omit for the full history.
    """

    days = serializers.IntegerField(required=False, min_value=1, max_value=3660)


class DueSheetQuerySerializer(serializers.Serializer):
    only_outstanding = serializers.BooleanField(required=False, default=False)


# =============================================================================
# Response Serializers
# =============================================================================

class LedgerRowSerializer(serializers.Serializer):
    """One line of the day sheet or master record."""
    kind = serializers.ChoiceField(choices=['opening', 'transaction', 'closing'])
    source = serializers.CharField(allow_null=True)
    direction = serializers.CharField(allow_null=True)
    recorded_at = serializers.DateTimeField()
    party = serializers.CharField(allow_blank=True)
    amount = money_field()
    mode = serializers.CharField(allow_blank=True)
    remarks = serializers.CharField(allow_blank=True)
    virtual_transaction_id = serializers.CharField(allow_blank=True)
    record_id = serializers.UUIDField(allow_null=True)


class DaySheetSerializer(serializers.Serializer):
    date = serializers.DateField()
    opening_balance = money_field()
    total_credits = money_field()
    total_debits = money_field()
    closing_balance = money_field()
    rows = LedgerRowSerializer(many=True)


class MasterRecordSerializer(serializers.Serializer):
    days = serializers.IntegerField(allow_null=True)
    total_credits = money_field()
    total_debits = money_field()
    net = money_field()
    rows = LedgerRowSerializer(many=True)


class DueSheetRowSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    username = serializers.CharField(allow_null=True)
    fullname = serializers.CharField()
    phone = serializers.CharField()
    due_amount = money_field()
    groups = serializers.ListField(child=serializers.CharField())


class DueSheetSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    total_outstanding = money_field()
    members = DueSheetRowSerializer(many=True)


class StatementMemberSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    username = serializers.CharField(allow_null=True)
    fullname = serializers.CharField()
    phone = serializers.CharField()


class StatementGroupSerializer(serializers.Serializer):
    group_id = serializers.UUIDField()
    group_name = serializers.CharField()
    position = serializers.IntegerField()


class StatementChargeSerializer(serializers.Serializer):
    auction_id = serializers.UUIDField()
    group_name = serializers.CharField()
    auction_number = serializers.IntegerField()
    auction_month = serializers.CharField()
    amount = money_field()
    created_at = serializers.DateTimeField()


class StatementCollectionSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    receipt_number = serializers.CharField()
    group_name = serializers.CharField()
    auction_number = serializers.IntegerField(allow_null=True)
    amount = money_field()
    payment_date = serializers.DateField()
    payment_mode = serializers.CharField()
    balance_for_this_installment = money_field(allow_null=True)
    recorded_at = serializers.DateTimeField()


class StatementPaymentSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    group_name = serializers.CharField()
    auction_number = serializers.IntegerField(allow_null=True)
    amount = money_field()
    payment_date = serializers.DateField()
    payment_mode = serializers.CharField()
    recorded_at = serializers.DateTimeField()


class MemberStatementSerializer(serializers.Serializer):
    """Response serializer for a member's payment history."""
    member = StatementMemberSerializer()
    due_amount = money_field()
    groups = StatementGroupSerializer(many=True)
    charges = StatementChargeSerializer(many=True)
    collections = StatementCollectionSerializer(many=True)
    payments = StatementPaymentSerializer(many=True)
    total_charged = money_field()
    total_collected = money_field()


class DashboardSerializer(serializers.Serializer):
    groups_count = serializers.IntegerField()
    members_count = serializers.IntegerField()
    employees_count = serializers.IntegerField()
    auctions_count = serializers.IntegerField()
    total_outstanding_due = money_field()
    today_collections_count = serializers.IntegerField()
    today_collections_total = money_field()


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    error = serializers.CharField()
