from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, phone_validator


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'fullname',
            'phone',
            'role',
            'due_amount',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class MemberSerializer(serializers.ModelSerializer):
    """Member profile as shown to office staff."""

    groups = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'fullname',
            'phone',
            'dob',
            'address',
            'referral_person',
            'aadhaar_card_url',
            'pan_card_url',
            'photo_url',
            'due_amount',
            'groups',
            'created_at',
        ]
        read_only_fields = fields

    def get_groups(self, obj):
        return [
            {'id': str(m.group_id), 'group_name': m.group.group_name}
            for m in obj.chit_memberships.select_related('group')
        ]


class EmployeeSerializer(serializers.ModelSerializer):
    """Employee profile as shown to admins."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'fullname',
            'phone',
            'job_title',
            'joining_date',
            'salary',
            'address',
            'aadhaar_number',
            'pan_card_number',
            'photo_url',
            'created_at',
        ]
        read_only_fields = fields


class MemberCreateSerializer(serializers.Serializer):
    """Input for creating a member."""

    fullname = serializers.CharField(max_length=150)
    phone = serializers.CharField(max_length=10, validators=[phone_validator])
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    dob = serializers.DateField(required=False, allow_null=True)
    address = serializers.CharField(required=False, allow_blank=True, default='')
    referral_person = serializers.CharField(required=False, allow_blank=True, default='')
    aadhaar_card_url = serializers.URLField(required=False, allow_blank=True, default='')
    pan_card_url = serializers.URLField(required=False, allow_blank=True, default='')
    photo_url = serializers.URLField(required=False, allow_blank=True, default='')


class EmployeeCreateSerializer(serializers.Serializer):
    """Input for creating an employee."""

    fullname = serializers.CharField(max_length=150)
    phone = serializers.CharField(max_length=10, validators=[phone_validator])
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    job_title = serializers.CharField(required=False, allow_blank=True, default='')
    joining_date = serializers.DateField(required=False, allow_null=True)
    salary = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True, min_value=0
    )
    address = serializers.CharField(required=False, allow_blank=True, default='')
    aadhaar_number = serializers.RegexField(
        r'^\d{12}$', required=False, allow_blank=True, default='',
        error_messages={'invalid': 'Aadhaar number must be 12 digits.'}
    )
    pan_card_number = serializers.RegexField(
        r'^[A-Z]{5}\d{4}[A-Z]$', required=False, allow_blank=True, default='',
        error_messages={'invalid': 'PAN must look like ABCDE1234F.'}
    )
    photo_url = serializers.URLField(required=False, allow_blank=True, default='')


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    phone = serializers.CharField(required=True, max_length=20)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for displaying in groups, receipts, etc.)."""

    class Meta:
        model = User
        fields = ['id', 'username', 'fullname']
