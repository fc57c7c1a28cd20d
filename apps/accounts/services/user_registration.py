"""Member and employee registration services."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.contrib.auth import get_user_model

from ..models import UserRole
from .exceptions import PhoneAlreadyRegisteredError
from .sequence_counters import next_sequence_value

User = get_user_model()
logger = logging.getLogger(__name__)


def _ensure_phone_available(phone: str) -> None:
    if User.objects.filter(phone=phone).exists():
        raise PhoneAlreadyRegisteredError(
            f"Phone number {phone} is already registered"
        )


@transaction.atomic
def create_member(
    *,
    fullname: str,
    phone: str,
    password: str,
    dob: Optional[date] = None,
    address: str = "",
    referral_person: str = "",
    aadhaar_card_url: str = "",
    pan_card_url: str = "",
    photo_url: str = "",
) -> User:
    """
    Create a chit member with the next readable id (user001, user002, ...).

    Args:
        fullname: Member's full name
        phone: 10-digit phone number, used for login
        password: Initial password (will be hashed)
        dob: Date of birth
        address: Postal address
        referral_person: Who introduced the member
        aadhaar_card_url: Uploaded Aadhaar card location
        pan_card_url: Uploaded PAN card location
        photo_url: Uploaded photo location

    Returns:
        Created User with role=member and zero due

    Raises:
        PhoneAlreadyRegisteredError: If phone is taken
    """
    _ensure_phone_available(phone)

    sequence = next_sequence_value('user')
    user = User.objects.create_user(
        phone=phone,
        password=password,
        username=f"user{sequence:03d}",
        fullname=fullname,
        role=UserRole.MEMBER,
        dob=dob,
        address=address,
        referral_person=referral_person,
        aadhaar_card_url=aadhaar_card_url,
        pan_card_url=pan_card_url,
        photo_url=photo_url,
        due_amount=Decimal('0.00'),
    )

    logger.info("Member %s created (%s)", user.username, user.fullname)
    return user


@transaction.atomic
def create_employee(
    *,
    fullname: str,
    phone: str,
    password: str,
    job_title: str = "",
    joining_date: Optional[date] = None,
    salary: Optional[Decimal] = None,
    address: str = "",
    aadhaar_number: str = "",
    pan_card_number: str = "",
    photo_url: str = "",
) -> User:
    """
    Create an employee with the next readable id (EMP001, EMP002, ...).

    Raises:
        PhoneAlreadyRegisteredError: If phone is taken
    """
    _ensure_phone_available(phone)

    sequence = next_sequence_value('employee')
    user = User.objects.create_user(
        phone=phone,
        password=password,
        username=f"EMP{sequence:03d}",
        fullname=fullname,
        role=UserRole.EMPLOYEE,
        job_title=job_title,
        joining_date=joining_date,
        salary=salary,
        address=address,
        aadhaar_number=aadhaar_number,
        pan_card_number=pan_card_number,
        photo_url=photo_url,
    )

    logger.info("Employee %s created (%s)", user.username, user.fullname)
    return user
