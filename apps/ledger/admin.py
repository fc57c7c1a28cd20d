from django.contrib import admin
from .models import (
    CollectionRecord,
    PaymentRecord,
    CreditRecord,
    ExpenseRecord,
    SalaryRecord,
)


class AppendOnlyAdmin(admin.ModelAdmin):
    """Ledger rows are never edited or deleted once written."""

    def get_readonly_fields(self, request, obj=None):
        return [f.name for f in self.model._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(CollectionRecord)
class CollectionRecordAdmin(AppendOnlyAdmin):
    list_display = [
        'receipt_number',
        'user',
        'group',
        'auction_number',
        'amount',
        'payment_mode',
        'payment_date',
        'recorded_by',
    ]
    list_filter = ['payment_mode', 'payment_type', 'group', 'payment_date']
    search_fields = ['receipt_number', 'user__fullname', 'user__username', 'virtual_transaction_id']
    date_hierarchy = 'recorded_at'


@admin.register(PaymentRecord)
class PaymentRecordAdmin(AppendOnlyAdmin):
    list_display = ['user', 'group', 'auction_number', 'amount', 'payment_mode', 'payment_date']
    list_filter = ['payment_mode', 'group']
    search_fields = ['user__fullname', 'user__username', 'virtual_transaction_id']
    date_hierarchy = 'recorded_at'


@admin.register(CreditRecord)
class CreditRecordAdmin(AppendOnlyAdmin):
    list_display = ['from_name', 'credit_number', 'amount', 'payment_mode', 'payment_date']
    search_fields = ['from_name', 'credit_number']
    date_hierarchy = 'recorded_at'


@admin.register(ExpenseRecord)
class ExpenseRecordAdmin(AppendOnlyAdmin):
    list_display = ['expense_type', 'amount', 'reason', 'from_person', 'expense_date']
    list_filter = ['expense_type']
    search_fields = ['reason', 'from_person']
    date_hierarchy = 'recorded_at'


@admin.register(SalaryRecord)
class SalaryRecordAdmin(AppendOnlyAdmin):
    list_display = ['employee', 'amount', 'payment_date', 'remarks']
    search_fields = ['employee__fullname', 'employee__username']
    date_hierarchy = 'recorded_at'
