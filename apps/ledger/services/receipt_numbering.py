"""
Receipt numbering.

Receipts carry a 7-digit number (1000000-9999999). Two strategies exist:
``sequence`` draws the next value from a locked counter, ``random`` picks
a random number and checks it against existing receipts. The
``receipt_number`` column is unique either way.
"""

import logging
import secrets
from typing import Optional

from django.conf import settings

from apps.accounts.services import next_sequence_value
from apps.ledger.models import CollectionRecord

from .exceptions import ReceiptNumberExhaustedError

logger = logging.getLogger(__name__)

RECEIPT_MIN = 1_000_000
RECEIPT_MAX = 9_999_999
RECEIPT_COUNTER = 'receipt'


def _max_retries(max_retries: Optional[int]) -> int:
    if max_retries is None:
        return settings.RECEIPT_NUMBER_MAX_RETRIES
    return max_retries


def _random_seven_digits() -> str:
    return str(RECEIPT_MIN + secrets.randbelow(RECEIPT_MAX - RECEIPT_MIN + 1))


def receipt_number_taken(number: str) -> bool:
    return CollectionRecord.objects.filter(receipt_number=number).exists()


def generate_unique_receipt_number(max_retries: Optional[int] = None) -> str:
    """
    Pick a random 7-digit receipt number not used by any collection.

    Args:
        max_retries: Attempts before giving up (default RECEIPT_NUMBER_MAX_RETRIES)

    Returns:
        Receipt number as a string

    Raises:
        ReceiptNumberExhaustedError: If every attempt collided
    """
    attempts = _max_retries(max_retries)
    for attempt in range(attempts):
        number = _random_seven_digits()
        if not receipt_number_taken(number):
            return number
        logger.warning(
            "Receipt number %s already used (attempt %d/%d)",
            number, attempt + 1, attempts
        )

    raise ReceiptNumberExhaustedError(
        f"Failed to generate a unique receipt number after {attempts} attempts"
    )


def allocate_receipt_number(max_retries: Optional[int] = None) -> str:
    """
    Draw the next receipt number from the receipt counter.

    Runs inside the caller's transaction: the counter row stays locked
    until the collection is written, so concurrent collections get
    distinct numbers. Values already taken by older random receipts are
    skipped.

    Raises:
        ReceiptNumberExhaustedError: If the 7-digit range is used up or
            too many consecutive values are taken
    """
    attempts = _max_retries(max_retries)
    for attempt in range(attempts):
        value = next_sequence_value(RECEIPT_COUNTER, start=RECEIPT_MIN - 1)
        if value > RECEIPT_MAX:
            raise ReceiptNumberExhaustedError("The 7-digit receipt number range is used up")

        number = str(value)
        if not receipt_number_taken(number):
            return number
        logger.warning(
            "Receipt number %s already used, skipping (attempt %d/%d)",
            number, attempt + 1, attempts
        )

    raise ReceiptNumberExhaustedError(
        f"Failed to allocate a free receipt number after {attempts} attempts"
    )


def next_receipt_number(max_retries: Optional[int] = None) -> str:
    """Receipt number from the strategy named by RECEIPT_NUMBER_STRATEGY."""
    if settings.RECEIPT_NUMBER_STRATEGY == 'random':
        return generate_unique_receipt_number(max_retries)
    return allocate_receipt_number(max_retries)


def generate_virtual_transaction_id() -> str:
    """Cosmetic 7-digit transaction id printed on slips; not unique."""
    return _random_seven_digits()
