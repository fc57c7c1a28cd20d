"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    PhoneAlreadyRegisteredError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
)
from .sequence_counters import next_sequence_value
from .user_registration import create_member, create_employee
from .user_authentication import authenticate_user, normalize_phone

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'PhoneAlreadyRegisteredError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    # Services
    'next_sequence_value',
    'create_member',
    'create_employee',
    'authenticate_user',
    'normalize_phone',
]
