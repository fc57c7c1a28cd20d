from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, SequenceCounter


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for office users.

    Members, employees and admins share one table and are told apart by role.
    """

    list_display = [
        'username',
        'fullname',
        'phone',
        'role',
        'due_amount',
        'is_active',
        'created_at',
    ]

    list_filter = ['role', 'is_active', 'is_staff', 'created_at']
    search_fields = ['username', 'fullname', 'phone']
    ordering = ['username']

    fieldsets = (
        ('Basic Information', {
            'fields': ('username', 'fullname', 'phone', 'role', 'password')
        }),
        ('Member', {
            'fields': (
                'dob', 'address', 'referral_person', 'due_amount',
                'aadhaar_card_url', 'pan_card_url', 'photo_url',
            ),
        }),
        ('Employee', {
            'fields': ('job_title', 'joining_date', 'salary', 'aadhaar_number', 'pan_card_number'),
            'classes': ('collapse',),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('phone', 'fullname', 'role', 'password1', 'password2'),
        }),
    )

    # due_amount only moves through auctions, collections and reconciliation
    readonly_fields = ['created_at', 'last_login', 'due_amount']
    filter_horizontal = ['groups', 'user_permissions']


@admin.register(SequenceCounter)
class SequenceCounterAdmin(admin.ModelAdmin):
    list_display = ['name', 'value', 'updated_at']
    readonly_fields = ['updated_at']
