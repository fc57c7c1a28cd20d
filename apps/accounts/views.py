from rest_framework import status, generics, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
from .models import User, UserRole
from .permissions import IsAdminRole, IsStaffRole
from .serializers import (
    UserLoginSerializer,
    UserSerializer,
    MemberSerializer,
    MemberCreateSerializer,
    EmployeeSerializer,
    EmployeeCreateSerializer,
)
from .services import (
    authenticate_user,
    create_member,
    create_employee,
    InvalidCredentialsError,
    InactiveAccountError,
    PhoneAlreadyRegisteredError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with phone number and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with phone and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    refresh = RefreshToken.for_user(user)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


class MemberListCreateView(generics.ListCreateAPIView):
    """
    List chit members or create a new one.

    Staff may list; only admins create.
    """

    serializer_class = MemberSerializer
    queryset = User.objects.filter(role=UserRole.MEMBER).order_by('username')

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated(), IsStaffRole()]

    @extend_schema(
        request=MemberCreateSerializer,
        responses={201: MemberSerializer, 409: ErrorResponseSerializer},
        tags=['members'],
    )
    def post(self, request, *args, **kwargs):
        serializer = MemberCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            member = create_member(**serializer.validated_data)
        except PhoneAlreadyRegisteredError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(MemberSerializer(member).data, status=status.HTTP_201_CREATED)


class MemberDetailView(generics.RetrieveAPIView):
    """Retrieve a member profile (staff only)."""

    serializer_class = MemberSerializer
    queryset = User.objects.filter(role=UserRole.MEMBER)
    permission_classes = [IsAuthenticated, IsStaffRole]


class EmployeeListCreateView(generics.ListCreateAPIView):
    """List or create employees (admins only)."""

    serializer_class = EmployeeSerializer
    queryset = User.objects.filter(role=UserRole.EMPLOYEE).order_by('username')
    permission_classes = [IsAuthenticated, IsAdminRole]

    @extend_schema(
        request=EmployeeCreateSerializer,
        responses={201: EmployeeSerializer, 409: ErrorResponseSerializer},
        tags=['employees'],
    )
    def post(self, request, *args, **kwargs):
        serializer = EmployeeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            employee = create_employee(**serializer.validated_data)
        except PhoneAlreadyRegisteredError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED)
