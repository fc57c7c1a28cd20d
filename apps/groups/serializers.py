from rest_framework import serializers
from .models import ChitGroup, GroupMembership, BiddingType
from apps.accounts.models import User, UserRole


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    class Meta:
        model = User
        fields = ['id', 'username', 'fullname', 'phone']
        read_only_fields = fields


class GroupMemberSerializer(serializers.ModelSerializer):
    """A seat in a group, with the member's running due."""

    user = UserMinimalSerializer(read_only=True)
    due_amount = serializers.DecimalField(
        source='user.due_amount', max_digits=12, decimal_places=2, read_only=True
    )

    class Meta:
        model = GroupMembership
        fields = ['id', 'user', 'position', 'due_amount', 'joined_at']
        read_only_fields = fields


class GroupSerializer(serializers.ModelSerializer):
    """Main serializer for groups."""

    last_auction_winner = UserMinimalSerializer(read_only=True)
    member_count = serializers.SerializerMethodField()
    commission_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    max_bid_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = ChitGroup
        fields = [
            'id',
            'group_name',
            'description',
            'total_people',
            'total_amount',
            'tenure',
            'start_date',
            'rate',
            'commission',
            'commission_amount',
            'max_bid_amount',
            'bidding_type',
            'min_bid',
            'member_count',
            'auction_month',
            'auction_scheduled_date',
            'auction_scheduled_time',
            'last_auction_winner',
            'last_winning_bid_amount',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_member_count(self, obj):
        return obj.memberships.count()


class GroupListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    member_count = serializers.SerializerMethodField()

    class Meta:
        model = ChitGroup
        fields = [
            'id',
            'group_name',
            'total_people',
            'total_amount',
            'tenure',
            'rate',
            'member_count',
            'auction_month',
        ]
        read_only_fields = fields

    def get_member_count(self, obj):
        return obj.memberships.count()


class GroupCreateSerializer(serializers.Serializer):
    """Input for creating a chit group."""

    group_name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    total_people = serializers.IntegerField(min_value=1)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=1)
    tenure = serializers.IntegerField(min_value=1)
    start_date = serializers.DateField()
    rate = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    commission = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=0, max_value=100,
        required=False, allow_null=True
    )
    bidding_type = serializers.ChoiceField(
        choices=BiddingType.choices, default=BiddingType.AUCTION
    )
    min_bid = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    members = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(role=UserRole.MEMBER),
        many=True,
        required=False,
        default=list
    )

    def validate(self, attrs):
        if len(attrs.get('members', [])) > attrs['total_people']:
            raise serializers.ValidationError({
                'members': 'More members selected than the group has seats.'
            })
        return attrs


class AddMemberSerializer(serializers.Serializer):
    """Input for seating a member in a group."""

    user_id = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(),
        source='user'
    )


class GroupAuctionStateSerializer(serializers.Serializer):
    completed_auction_numbers = serializers.ListField(child=serializers.IntegerField())
    previous_winner_ids = serializers.ListField(child=serializers.UUIDField())
    next_auction_number = serializers.IntegerField(allow_null=True)
