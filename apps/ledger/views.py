from rest_framework import mixins, viewsets, status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, inline_serializer

from apps.accounts.permissions import IsAdminRole, IsStaffRole
from apps.groups.services import GroupNotFoundError

from .models import (
    CollectionRecord,
    PaymentRecord,
    CreditRecord,
    ExpenseRecord,
    SalaryRecord,
)
from .serializers import (
    CollectionRecordSerializer,
    CollectionCreateSerializer,
    CollectionFilterSerializer,
    PaymentRecordSerializer,
    PaymentCreateSerializer,
    PaymentFilterSerializer,
    CreditRecordSerializer,
    CreditCreateSerializer,
    CreditFilterSerializer,
    ExpenseRecordSerializer,
    ExpenseCreateSerializer,
    ExpenseFilterSerializer,
    SalaryRecordSerializer,
    SalaryCreateSerializer,
    SalaryFilterSerializer,
    DueReconciliationSerializer,
)
from .services import (
    record_collection,
    record_payment,
    record_credit,
    record_expense,
    record_salary,
    reconcile_member_due,
    # Exceptions
    LedgerServiceError,
    MemberNotFoundError,
    AuctionNotFoundError,
    ReceiptNumberExhaustedError,
)


class LedgerPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


def _error_response(error):
    """Map a service error to an HTTP response."""
    if isinstance(error, (GroupNotFoundError, MemberNotFoundError, AuctionNotFoundError)):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ReceiptNumberExhaustedError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    return Response({'error': str(error)}, status=code)


class LedgerEntryViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    Base for append-only ledger endpoints: list, retrieve and create only.

    Subclasses name the input serializer and implement `record()`, which
    calls the service with validated data. `filter_serializer_class`
    validates the query parameters and `filter_fields` maps them to
    queryset lookups.
    """

    permission_classes = [IsAuthenticated, IsStaffRole]
    pagination_class = LedgerPagination
    input_serializer_class = None
    filter_serializer_class = None
    filter_fields = {}

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.filter_serializer_class is None:
            return queryset

        filter_serializer = self.filter_serializer_class(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        for param, lookup in self.filter_fields.items():
            if params.get(param) is not None:
                queryset = queryset.filter(**{lookup: params[param]})
        return queryset

    def record(self, data):
        raise NotImplementedError

    def create(self, request, *args, **kwargs):
        serializer = self.input_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            entry = self.record(serializer.validated_data)
        except (LedgerServiceError, GroupNotFoundError) as e:
            return _error_response(e)

        return Response(self.get_serializer(entry).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['ledger'])
class CollectionViewSet(LedgerEntryViewSet):
    """Collections received from members. Filters: ?group, ?user, ?auction_number, ?date"""

    queryset = CollectionRecord.objects.select_related('group', 'user', 'recorded_by')
    serializer_class = CollectionRecordSerializer
    input_serializer_class = CollectionCreateSerializer
    filter_serializer_class = CollectionFilterSerializer
    filter_fields = {
        'group': 'group_id',
        'user': 'user_id',
        'auction_number': 'auction_number',
        'date': 'payment_date',
    }

    @extend_schema(parameters=[CollectionFilterSerializer])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=CollectionCreateSerializer, responses={201: CollectionRecordSerializer})
    def create(self, request, *args, **kwargs):
        return super().create(request, *args, **kwargs)

    def record(self, data):
        return record_collection(recorded_by=self.request.user, **data)


@extend_schema(tags=['ledger'])
class PaymentViewSet(LedgerEntryViewSet):
    """Payments made to members. Filters: ?group, ?user, ?date"""

    queryset = PaymentRecord.objects.select_related('group', 'user')
    serializer_class = PaymentRecordSerializer
    input_serializer_class = PaymentCreateSerializer
    filter_serializer_class = PaymentFilterSerializer
    filter_fields = {
        'group': 'group_id',
        'user': 'user_id',
        'date': 'payment_date',
    }

    @extend_schema(parameters=[PaymentFilterSerializer])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=PaymentCreateSerializer, responses={201: PaymentRecordSerializer})
    def create(self, request, *args, **kwargs):
        return super().create(request, *args, **kwargs)

    def record(self, data):
        return record_payment(recorded_by=self.request.user, **data)


@extend_schema(tags=['ledger'])
class CreditViewSet(LedgerEntryViewSet):
    """Money received from outside parties. Filters: ?date"""

    queryset = CreditRecord.objects.all()
    serializer_class = CreditRecordSerializer
    input_serializer_class = CreditCreateSerializer
    filter_serializer_class = CreditFilterSerializer
    filter_fields = {'date': 'payment_date'}

    @extend_schema(parameters=[CreditFilterSerializer])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=CreditCreateSerializer, responses={201: CreditRecordSerializer})
    def create(self, request, *args, **kwargs):
        return super().create(request, *args, **kwargs)

    def record(self, data):
        return record_credit(recorded_by=self.request.user, **data)


@extend_schema(tags=['ledger'])
class ExpenseViewSet(LedgerEntryViewSet):
    """Office spends and miscellaneous receipts. Filters: ?type, ?date"""

    queryset = ExpenseRecord.objects.all()
    serializer_class = ExpenseRecordSerializer
    input_serializer_class = ExpenseCreateSerializer
    filter_serializer_class = ExpenseFilterSerializer
    filter_fields = {
        'type': 'expense_type',
        'date': 'expense_date',
    }

    @extend_schema(parameters=[ExpenseFilterSerializer])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=ExpenseCreateSerializer, responses={201: ExpenseRecordSerializer})
    def create(self, request, *args, **kwargs):
        return super().create(request, *args, **kwargs)

    def record(self, data):
        return record_expense(recorded_by=self.request.user, **data)


@extend_schema(tags=['ledger'])
class SalaryViewSet(LedgerEntryViewSet):
    """Salaries paid to employees (admins only). Filters: ?employee, ?date"""

    queryset = SalaryRecord.objects.select_related('employee')
    serializer_class = SalaryRecordSerializer
    input_serializer_class = SalaryCreateSerializer
    filter_serializer_class = SalaryFilterSerializer
    permission_classes = [IsAuthenticated, IsAdminRole]
    filter_fields = {
        'employee': 'employee_id',
        'date': 'payment_date',
    }

    @extend_schema(parameters=[SalaryFilterSerializer])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=SalaryCreateSerializer, responses={201: SalaryRecordSerializer})
    def create(self, request, *args, **kwargs):
        return super().create(request, *args, **kwargs)

    def record(self, data):
        return record_salary(recorded_by=self.request.user, **data)


@extend_schema(
    request=inline_serializer(
        name='ReconcileRequest',
        fields={'apply': serializers.BooleanField(required=False, default=True)},
    ),
    responses={200: DueReconciliationSerializer},
    description="Recompute a member's due from installment charges and collections.",
    tags=['ledger'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def reconcile_member(request, pk):
    """Recompute and (unless apply=false) correct a member's due."""
    apply = serializers.BooleanField().to_internal_value(request.data.get('apply', True))

    try:
        result = reconcile_member_due(user_id=pk, apply=apply)
    except MemberNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(DueReconciliationSerializer(result).data)
