from django.contrib import admin
from .models import AuctionRecord, InstallmentCharge


class InstallmentChargeInline(admin.TabularInline):
    model = InstallmentCharge
    extra = 0
    fields = ['member', 'amount', 'created_at']
    readonly_fields = fields
    can_delete = False


@admin.register(AuctionRecord)
class AuctionRecordAdmin(admin.ModelAdmin):
    """Read-only admin for auction records."""

    list_display = [
        'group',
        'auction_number',
        'auction_month',
        'winner',
        'winning_bid_amount',
        'final_amount_to_be_paid',
        'billed_at',
    ]
    list_filter = ['group', 'auction_date']
    search_fields = ['group__group_name', 'winner__fullname', 'winner__username']
    inlines = [InstallmentChargeInline]
    date_hierarchy = 'auction_date'

    fieldsets = (
        ('Auction', {
            'fields': ('group', 'auction_number', 'auction_month', 'auction_date', 'auction_time', 'notes')
        }),
        ('Winner', {
            'fields': ('winner', 'winning_bid_amount', 'amount_paid_to_winner')
        }),
        ('Settlement', {
            'fields': (
                'commission_amount', 'discount', 'net_discount',
                'dividend_per_member', 'final_amount_to_be_paid',
            )
        }),
        ('Metadata', {
            'fields': ('recorded_by', 'billed_at', 'recorded_at'),
            'classes': ('collapse',)
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        return [f.name for f in self.model._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
