from dataclasses import asdict

from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole, IsStaffRole

from .models import ChitGroup
from .serializers import (
    GroupSerializer,
    GroupCreateSerializer,
    GroupListSerializer,
    GroupMemberSerializer,
    AddMemberSerializer,
    GroupAuctionStateSerializer,
)

from apps.groups.services import (
    create_group,
    add_member,
    get_group_members,
    get_group_auction_state,
    # Exceptions
    GroupNotFoundError,
    GroupFullError,
    AlreadyMemberError,
    NotEligibleMemberError,
    DuplicateGroupNameError,
)


class GroupPagination(PageNumberPagination):
    """Custom pagination for groups."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class GroupViewSet(viewsets.ModelViewSet):
    """
    ViewSet for chit groups.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Staff see every group, members only their own
    create: Create a new group (admin only)
    retrieve: Get a specific group
    """

    serializer_class = GroupSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = GroupPagination
    # Groups change only through member seating and auctions
    http_method_names = ['get', 'post', 'head', 'options']

    def get_queryset(self):
        user = self.request.user
        queryset = ChitGroup.objects.select_related('last_auction_winner').prefetch_related('memberships')
        if getattr(self, 'swagger_fake_view', False):
            return queryset.none()
        if user.is_admin or user.is_employee:
            return queryset
        return queryset.filter(memberships__user=user).distinct()

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'list':
            return GroupListSerializer
        elif self.action == 'create':
            return GroupCreateSerializer
        return GroupSerializer

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action in ['create', 'add_member']:
            return [IsAuthenticated(), IsAdminRole()]
        if self.action == 'auction_state':
            return [IsAuthenticated(), IsStaffRole()]
        return [IsAuthenticated()]

    @extend_schema(request=GroupCreateSerializer, responses={201: GroupSerializer}, tags=['groups'])
    def create(self, request, *args, **kwargs):
        """Create a new group."""
        serializer = GroupCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            group = create_group(**serializer.validated_data)
        except DuplicateGroupNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except (GroupFullError, AlreadyMemberError, NotEligibleMemberError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        output_serializer = GroupSerializer(group, context={'request': request})
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: GroupMemberSerializer(many=True)}, tags=['groups'])
    @action(detail=True, methods=['get'])
    def members(self, request, pk=None):
        """Get all members of the group in seating order."""
        group = self.get_object()
        memberships = get_group_members(group_id=group.id)
        serializer = GroupMemberSerializer(memberships, many=True)
        return Response(serializer.data)

    @extend_schema(request=AddMemberSerializer, responses={201: GroupMemberSerializer}, tags=['groups'])
    @action(detail=True, methods=['post'])
    def add_member(self, request, pk=None):
        """Seat a member at the next free position."""
        serializer = AddMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            membership = add_member(group_id=pk, user=serializer.validated_data['user'])
        except GroupNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except AlreadyMemberError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except (GroupFullError, NotEligibleMemberError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(GroupMemberSerializer(membership).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: GroupAuctionStateSerializer}, tags=['groups'])
    @action(detail=True, methods=['get'])
    def auction_state(self, request, pk=None):
        """Completed auction numbers, previous winners and the next free number."""
        group = self.get_object()
        state = get_group_auction_state(group=group)
        return Response(GroupAuctionStateSerializer(asdict(state)).data)


@extend_schema(
    responses={200: GroupListSerializer(many=True)},
    description="Get the groups the current member is seated in.",
    tags=['groups'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_groups(request):
    """Get groups the current user belongs to."""
    groups = ChitGroup.objects.filter(
        memberships__user=request.user
    ).prefetch_related('memberships').distinct()

    serializer = GroupListSerializer(groups, many=True)
    return Response(serializer.data)
