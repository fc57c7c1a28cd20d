"""
Phone + password login.

Staff type phone numbers the way they are printed on forms, so the
number is normalised to its 10 local digits before the lookup.
"""

import logging
import re

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

logger = logging.getLogger(__name__)

User = get_user_model()

_SEPARATORS = re.compile(r'[\s\-()]')


def normalize_phone(phone: str) -> str:
    """
    Reduce a phone number to its 10 local digits.

    Spaces, dashes and brackets are dropped, then a leading +91, 91 or 0
    trunk prefix on an otherwise 10-digit number.

    >>> normalize_phone('+91 98765-43210')
    '9876543210'
    """
    digits = _SEPARATORS.sub('', phone or '')
    for prefix in ('+91', '91', '0'):
        if digits.startswith(prefix) and len(digits) == len(prefix) + 10:
            return digits[len(prefix):]
    return digits


@transaction.atomic
def authenticate_user(*, phone: str, password: str) -> User:
    """
    Check a phone/password pair and stamp last_login.

    Raises:
        InvalidCredentialsError: Unknown phone or wrong password (same
            message for both)
        InactiveAccountError: If the account is deactivated
    """
    phone = normalize_phone(phone)

    user = User.objects.select_for_update().filter(phone=phone).first()
    if user is None or not user.check_password(password):
        logger.warning("Failed login for phone ending %s", phone[-4:])
        raise InvalidCredentialsError("Invalid phone number or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    logger.info("%s logged in (%s)", user.username or user.phone, user.role)
    return user
