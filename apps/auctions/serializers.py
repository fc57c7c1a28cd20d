from rest_framework import serializers

from apps.accounts.models import User, UserRole
from apps.groups.models import ChitGroup
from apps.groups.serializers import UserMinimalSerializer
from .models import AuctionRecord, InstallmentCharge


class AuctionRecordSerializer(serializers.ModelSerializer):
    """Full auction record with its settlement."""

    group_name = serializers.CharField(source='group.group_name', read_only=True)
    winner = UserMinimalSerializer(read_only=True)
    recorded_by = UserMinimalSerializer(read_only=True)
    members_billed = serializers.SerializerMethodField()

    class Meta:
        model = AuctionRecord
        fields = [
            'id',
            'group',
            'group_name',
            'auction_number',
            'auction_month',
            'auction_date',
            'auction_time',
            'winner',
            'winning_bid_amount',
            'commission_amount',
            'discount',
            'net_discount',
            'dividend_per_member',
            'final_amount_to_be_paid',
            'amount_paid_to_winner',
            'notes',
            'recorded_by',
            'billed_at',
            'members_billed',
            'recorded_at',
        ]
        read_only_fields = fields

    def get_members_billed(self, obj):
        return obj.charges.count()


class AuctionListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    group_name = serializers.CharField(source='group.group_name', read_only=True)
    winner_name = serializers.CharField(source='winner.fullname', read_only=True)

    class Meta:
        model = AuctionRecord
        fields = [
            'id',
            'group',
            'group_name',
            'auction_number',
            'auction_month',
            'auction_date',
            'winner_name',
            'winning_bid_amount',
            'final_amount_to_be_paid',
        ]
        read_only_fields = fields


class AuctionFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for auction listing.

    Query Parameters:
        group (UUID): Only auctions of this group
    """

    group = serializers.UUIDField(required=False)


class StartAuctionSerializer(serializers.Serializer):
    """Input for recording an auction."""

    group = serializers.PrimaryKeyRelatedField(queryset=ChitGroup.objects.all())
    auction_number = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    auction_month = serializers.CharField(min_length=3, max_length=30)
    auction_date = serializers.DateField()
    auction_time = serializers.TimeField()
    winner = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(role=UserRole.MEMBER)
    )
    winning_bid_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class SettlementPreviewSerializer(serializers.Serializer):
    """Input for previewing a settlement without recording it."""

    group = serializers.PrimaryKeyRelatedField(queryset=ChitGroup.objects.all())
    winning_bid_amount = serializers.DecimalField(max_digits=12, decimal_places=2)


class SettlementSerializer(serializers.Serializer):
    commission_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    net_discount = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    dividend_per_member = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    final_amount_to_be_paid = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    amount_paid_to_winner = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)


class InstallmentChargeSerializer(serializers.ModelSerializer):
    member = UserMinimalSerializer(read_only=True)

    class Meta:
        model = InstallmentCharge
        fields = ['id', 'member', 'amount', 'created_at']
        read_only_fields = fields
