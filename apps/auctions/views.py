from dataclasses import asdict

from rest_framework import mixins, viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsStaffRole
from apps.groups.services import GroupNotFoundError

from .models import AuctionRecord
from .serializers import (
    AuctionRecordSerializer,
    AuctionListSerializer,
    AuctionFilterSerializer,
    StartAuctionSerializer,
    SettlementPreviewSerializer,
    SettlementSerializer,
    InstallmentChargeSerializer,
)
from .services import (
    start_auction,
    calculate_settlement,
    validate_bid,
    # Exceptions
    AuctionsServiceError,
    DuplicateAuctionNumberError,
    WinnerAlreadyWonError,
    InvalidBidAmountError,
)


class AuctionPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


@extend_schema(tags=['auctions'])
class AuctionRecordViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """
    Auction records. Append-only: there is no update or delete.

    list: Auctions, newest first; filter with ?group=<id>
    create: Record an auction and bill every member
    retrieve: One auction with its settlement
    """

    permission_classes = [IsAuthenticated, IsStaffRole]
    pagination_class = AuctionPagination

    def get_queryset(self):
        queryset = (
            AuctionRecord.objects
            .select_related('group', 'winner', 'recorded_by')
            .order_by('-auction_date', '-recorded_at')
        )
        filter_serializer = AuctionFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        group_id = filter_serializer.validated_data.get('group')
        if group_id:
            queryset = queryset.filter(group_id=group_id)
        return queryset

    def get_serializer_class(self):
        if self.action == 'list':
            return AuctionListSerializer
        elif self.action == 'create':
            return StartAuctionSerializer
        return AuctionRecordSerializer

    @extend_schema(parameters=[AuctionFilterSerializer])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=StartAuctionSerializer, responses={201: AuctionRecordSerializer})
    def create(self, request, *args, **kwargs):
        """Record an auction."""
        serializer = StartAuctionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            auction = start_auction(
                group_id=data['group'].id,
                winner=data['winner'],
                winning_bid_amount=data['winning_bid_amount'],
                auction_month=data['auction_month'],
                auction_date=data['auction_date'],
                auction_time=data['auction_time'],
                auction_number=data.get('auction_number'),
                notes=data.get('notes', ''),
                recorded_by=request.user,
            )
        except GroupNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (DuplicateAuctionNumberError, WinnerAlreadyWonError) as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
        except AuctionsServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        output_serializer = AuctionRecordSerializer(auction)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: InstallmentChargeSerializer(many=True)})
    @action(detail=True, methods=['get'])
    def charges(self, request, pk=None):
        """Installment charged to each member by this auction."""
        auction = self.get_object()
        charges = auction.charges.select_related('member').order_by('member__username')
        return Response(InstallmentChargeSerializer(charges, many=True).data)

    @extend_schema(request=SettlementPreviewSerializer, responses={200: SettlementSerializer})
    @action(detail=False, methods=['post'])
    def preview(self, request):
        """Compute the settlement for a bid without recording anything."""
        serializer = SettlementPreviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        group = serializer.validated_data['group']
        amount = serializer.validated_data['winning_bid_amount']

        try:
            validate_bid(group, amount)
        except InvalidBidAmountError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        settlement = calculate_settlement(group, amount)
        return Response(SettlementSerializer(asdict(settlement)).data)
