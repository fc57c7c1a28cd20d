"""Sequential counters for readable ids."""

from django.db import transaction

from ..models import SequenceCounter


@transaction.atomic
def next_sequence_value(name: str, *, start: int = 0) -> int:
    """
    Increment the named counter and return its new value.

    The counter row is created on first use with value ``start`` and then
    locked with select_for_update(), so concurrent callers never see the
    same value. When called inside an outer atomic block, the increment
    commits or rolls back together with the caller's writes.

    Args:
        name: Counter name ('user', 'employee', 'receipt')
        start: Value the counter holds before its first increment

    Returns:
        The incremented counter value
    """
    SequenceCounter.objects.get_or_create(name=name, defaults={'value': start})
    counter = SequenceCounter.objects.select_for_update().get(name=name)
    counter.value += 1
    counter.save(update_fields=['value', 'updated_at'])
    return counter.value
