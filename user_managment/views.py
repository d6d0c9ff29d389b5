import logging

from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken, TokenError

from .serializers import UserDetailSerializer, UserLoginSerializer

logger = logging.getLogger(__name__)


class TokenCheckView(APIView):
    permission_classes = [AllowAny]  # No authentication required to check token

    def get(self, request, *args, **kwargs):
        token = request.headers.get("Authorization", "").split("Bearer ")[-1]

        if not token or token == "Bearer":
            return Response({"success": False, "message": "Token missing"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            decoded_token = AccessToken(token)
        except TokenError:
            return Response({"success": False, "message": "Token is invalid or expired"}, status=status.HTTP_401_UNAUTHORIZED)
        return Response({"success": True, "message": "success", "user_id": decoded_token["user_id"]}, status=status.HTTP_200_OK)


class UserLogin(APIView):
    permission_classes = [AllowAny]

    @method_decorator(csrf_exempt)
    def post(self, request):
        serializer = UserLoginSerializer(data=request.data)

        if not serializer.is_valid():
            return Response(
                {'success': False, 'message': 'Incorrect email or password', 'errors': serializer.errors},
                status=status.HTTP_401_UNAUTHORIZED
            )

        user = serializer.validated_data['user']
        if user.status != 'Active':
            return Response(
                {'success': False, 'message': 'Your account has been deactivated. Contact the administrator.'},
                status=status.HTTP_403_FORBIDDEN
            )

        refresh = RefreshToken.for_user(user)
        logger.info(f"User {user.pk} logged in with role {user.role}")

        return Response({
            'success': True,
            'result': {
                "id": user.id,
                "access_token": str(refresh.access_token),
                "refresh_token": str(refresh),
                "first_name": user.first_name,
                "last_name": user.last_name,
                "role": user.role,
                "department": user.department_id,
                "level": user.level,
                "email": user.email,
            },
            'message': 'Login successful! Welcome back.',
        }, status=status.HTTP_200_OK)


class UserLogout(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        refresh_token = request.data.get("refresh") or request.data.get("refresh_token")
        if not refresh_token:
            return Response(
                {"success": False, "message": "Refresh token required."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            token = RefreshToken(refresh_token)
            token.blacklist()
        except TokenError:
            return Response(
                {"success": False, "message": "Invalid or expired refresh token."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(
            {"success": True, "message": "You have been successfully logged out."},
            status=status.HTTP_200_OK,
        )


class UserView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({
            'success': True,
            'data': UserDetailSerializer(request.user, context={'request': request}).data,
            'message': 'User profile retrieved.'
        }, status=status.HTTP_200_OK)
