from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from django.utils import timezone
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsStaffRole

from .reports import LedgerReports
from .serializers import (
    # Input serializers
    DaySheetQuerySerializer,
    MasterRecordQuerySerializer,
    DueSheetQuerySerializer,
    # Response serializers
    DaySheetSerializer,
    MasterRecordSerializer,
    DueSheetSerializer,
    MemberStatementSerializer,
    DashboardSerializer,
    ErrorSerializer,
)
from .permissions import IsStatementOwnerOrStaff
from .exceptions import MemberNotFoundError


@extend_schema(
    parameters=[
        OpenApiParameter('date', OpenApiTypes.DATE, description='Day to report (YYYY-MM-DD), default today'),
    ],
    responses={200: DaySheetSerializer, 400: ErrorSerializer},
    description="Opening balance, every transaction of the day and the closing balance.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def day_sheet(request):
    """Day sheet - thin HTTP handler."""
    query_serializer = DaySheetQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    target_date = query_serializer.validated_data.get('date') or timezone.localdate()

    data = LedgerReports.day_sheet(target_date)
    return Response(DaySheetSerializer(data).data)


@extend_schema(
    parameters=[
        OpenApiParameter('days', OpenApiTypes.INT, description='Only the last N days; omit for all'),
    ],
    responses={200: MasterRecordSerializer, 400: ErrorSerializer},
    description="Every ledger transaction, newest first.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def master_record(request):
    """Master record - thin HTTP handler."""
    query_serializer = MasterRecordQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = LedgerReports.master_record(days=query_serializer.validated_data.get('days'))
    return Response(MasterRecordSerializer(data).data)


@extend_schema(
    parameters=[
        OpenApiParameter('only_outstanding', OpenApiTypes.BOOL, description='Skip members who owe nothing'),
    ],
    responses={200: DueSheetSerializer},
    description="Members and their running dues, highest first.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def due_sheet(request):
    """Due sheet - thin HTTP handler."""
    query_serializer = DueSheetQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = LedgerReports.due_sheet(
        only_outstanding=query_serializer.validated_data['only_outstanding']
    )
    return Response(DueSheetSerializer(data).data)


@extend_schema(
    responses={200: MemberStatementSerializer, 403: ErrorSerializer, 404: ErrorSerializer},
    description="A member's groups, installments charged, collections and payouts.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStatementOwnerOrStaff])
def member_statement(request, user_id):
    """Member statement - thin HTTP handler."""
    try:
        data = LedgerReports.member_statement(user_id)
    except MemberNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(MemberStatementSerializer(data).data)


@extend_schema(
    responses={200: DashboardSerializer},
    description="Headline counts and totals for the office.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def dashboard(request):
    """Dashboard summary - thin HTTP handler."""
    return Response(DashboardSerializer(LedgerReports.dashboard()).data)
