"""
Membership management service.

Handles seating members in chit groups with concurrency protection.
"""

import logging
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Max, QuerySet

from apps.accounts.models import User, UserRole
from apps.groups.models import ChitGroup, GroupMembership

from .exceptions import (
    GroupNotFoundError,
    GroupFullError,
    AlreadyMemberError,
    NotEligibleMemberError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def add_member(*, group_id: UUID, user: User) -> GroupMembership:
    """
    Seat a member at the next position of a group.

    Locks the group row so concurrent adds cannot overfill it or
    take the same position.

    Raises:
        GroupNotFoundError: If group doesn't exist
        NotEligibleMemberError: If user is not a member account
        AlreadyMemberError: If user is already in the group
        GroupFullError: If the group has no free seat
    """
    try:
        group = (
            ChitGroup.objects
            .select_for_update()
            .get(id=group_id)
        )
    except ChitGroup.DoesNotExist:
        raise GroupNotFoundError(f"Group with ID {group_id} not found")

    if user.role != UserRole.MEMBER:
        raise NotEligibleMemberError(
            f"{user.get_display_name()} is not a member account"
        )

    if group.has_member(user):
        raise AlreadyMemberError(
            f"{user.get_display_name()} is already a member of {group.group_name}"
        )

    if group.is_full():
        raise GroupFullError(
            f"{group.group_name} already has {group.total_people} members"
        )

    last_position = group.memberships.aggregate(last=Max('position'))['last'] or 0

    try:
        membership = GroupMembership.objects.create(
            user=user,
            group=group,
            position=last_position + 1
        )
    except IntegrityError:
        raise AlreadyMemberError(
            f"{user.get_display_name()} is already a member of {group.group_name}"
        )

    logger.info(
        "%s joined %s at position %d",
        user.username, group.group_name, membership.position
    )
    return membership


def get_group_members(*, group_id: UUID) -> QuerySet[GroupMembership]:
    """
    Get all memberships of a group in seating order.

    Raises:
        GroupNotFoundError: If group doesn't exist
    """
    if not ChitGroup.objects.filter(id=group_id).exists():
        raise GroupNotFoundError(f"Group with ID {group_id} not found")

    return (
        GroupMembership.objects
        .filter(group_id=group_id)
        .select_related('user')
        .order_by('position')
    )
