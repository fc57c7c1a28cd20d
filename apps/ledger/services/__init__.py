"""
Ledger app services layer.

Every entry is append-only. Collections are the only entries that move
a member's running due.
"""

from .exceptions import (
    LedgerServiceError,
    ReceiptNumberExhaustedError,
    MemberNotFoundError,
    NotGroupMemberError,
    AuctionNotFoundError,
    NotEmployeeError,
    InvalidExpenseError,
)

from .receipt_numbering import (
    generate_unique_receipt_number,
    allocate_receipt_number,
    next_receipt_number,
    generate_virtual_transaction_id,
)

from .collection_management import (
    DueReconciliation,
    record_collection,
    reconcile_member_due,
)

from .ledger_entries import (
    record_payment,
    record_credit,
    record_expense,
    record_salary,
)


__all__ = [
    # Exceptions
    'LedgerServiceError',
    'ReceiptNumberExhaustedError',
    'MemberNotFoundError',
    'NotGroupMemberError',
    'AuctionNotFoundError',
    'NotEmployeeError',
    'InvalidExpenseError',

    # Receipt Numbering
    'generate_unique_receipt_number',
    'allocate_receipt_number',
    'next_receipt_number',
    'generate_virtual_transaction_id',

    # Collections
    'DueReconciliation',
    'record_collection',
    'reconcile_member_due',

    # Other Entries
    'record_payment',
    'record_credit',
    'record_expense',
    'record_salary',
]
