from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.validators import RegexValidator
from django.db import models
from decimal import Decimal
import uuid


phone_validator = RegexValidator(
    regex=r'^\d{10}$',
    message='Phone number must be exactly 10 digits.'
)


class UserRole(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    EMPLOYEE = 'employee', 'Employee'
    MEMBER = 'member', 'Member'


class UserManager(BaseUserManager):
    """Custom user manager for phone-based authentication."""

    def create_user(self, phone, password=None, **extra_fields):
        if not phone:
            raise ValueError('Phone is required')

        user = self.model(phone=phone, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, phone, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', UserRole.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(phone, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Office user: admin, employee or chit member, logging in by phone."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Readable id (user001 / EMP001); admins created by hand may have none
    username = models.CharField(max_length=20, unique=True, null=True, blank=True)
    fullname = models.CharField(max_length=150)
    phone = models.CharField(
        max_length=10,
        unique=True,
        validators=[phone_validator],
        db_index=True
    )
    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.MEMBER
    )

    # Member profile
    dob = models.DateField(null=True, blank=True)
    address = models.TextField(blank=True)
    referral_person = models.CharField(max_length=150, blank=True)
    aadhaar_card_url = models.URLField(max_length=500, blank=True)
    pan_card_url = models.URLField(max_length=500, blank=True)
    photo_url = models.URLField(max_length=500, blank=True)

    # Running total owed across all groups; may go negative on overpayment
    due_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00')
    )

    # Employee profile
    job_title = models.CharField(max_length=100, blank=True)
    joining_date = models.DateField(null=True, blank=True)
    salary = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    aadhaar_number = models.CharField(max_length=12, blank=True)
    pan_card_number = models.CharField(max_length=10, blank=True)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'phone'
    REQUIRED_FIELDS = ['fullname']

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['role'], name='users_role_idx'),
            models.Index(fields=['created_at'], name='users_created_at_idx'),
        ]
        ordering = ['username', 'created_at']

    def __str__(self):
        return f"{self.username or self.phone} - {self.fullname}"

    @property
    def is_admin(self):
        return self.role == UserRole.ADMIN or self.is_superuser

    @property
    def is_employee(self):
        return self.role == UserRole.EMPLOYEE

    @property
    def is_member(self):
        return self.role == UserRole.MEMBER

    def get_display_name(self):
        """Return full name or readable id."""
        return self.fullname or self.username or self.phone


class SequenceCounter(models.Model):
    """Named integer counter for readable ids (users, employees, receipts)."""

    name = models.CharField(max_length=50, primary_key=True)
    value = models.PositiveBigIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sequence_counters'

    def __str__(self):
        return f"{self.name} = {self.value}"
