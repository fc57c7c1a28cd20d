from django.contrib import admin
from apps.groups.models import ChitGroup, GroupMembership


class GroupMembershipInline(admin.TabularInline):
    """Inline admin for group memberships."""
    model = GroupMembership
    extra = 0
    fields = ['position', 'user', 'joined_at']
    readonly_fields = ['joined_at']
    ordering = ['position']


@admin.register(ChitGroup)
class ChitGroupAdmin(admin.ModelAdmin):
    """Admin interface for chit groups."""

    list_display = [
        'group_name',
        'total_amount',
        'total_people',
        'member_count',
        'tenure',
        'rate',
        'auction_month',
        'created_at'
    ]
    list_filter = ['bidding_type', 'start_date']
    search_fields = ['group_name', 'description']
    readonly_fields = [
        'last_auction_winner', 'last_winning_bid_amount', 'created_at', 'updated_at'
    ]
    inlines = [GroupMembershipInline]
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('group_name', 'description', 'bidding_type')
        }),
        ('Scheme', {
            'fields': ('total_people', 'total_amount', 'tenure', 'start_date', 'rate', 'commission', 'min_bid')
        }),
        ('Next Auction', {
            'fields': (
                'auction_month', 'auction_scheduled_date', 'auction_scheduled_time',
                'last_auction_winner', 'last_winning_bid_amount',
            )
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def member_count(self, obj):
        """Show number of members."""
        return obj.memberships.count()
    member_count.short_description = 'Members'
