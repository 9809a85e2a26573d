import logging

from rest_framework import generics, permissions
from rest_framework.response import Response

from .serializers import ChangePasswordSerializer, RegisterSerializer, UserSerializer

logger = logging.getLogger(__name__)


class RegisterView(generics.CreateAPIView):
    """POST /api/auth/register/ : compte redacteur (ouvert)."""

    serializer_class = RegisterSerializer
    permission_classes = [permissions.AllowAny]

    def perform_create(self, serializer):
        user = serializer.save()
        logger.info(f"[auth] Rédacteur {user.username} inscrit (id={user.pk}, unité={user.unit_name or '-'})")


class MeView(generics.RetrieveUpdateAPIView):
    """GET / PATCH /api/auth/me/ : profil, approbateur pre-rempli, compteurs de documents."""

    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]
    http_method_names = ["get", "patch", "options"]

    def get_object(self):
        return self.request.user


class ChangePasswordView(generics.GenericAPIView):
    serializer_class = ChangePasswordSerializer
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"[auth] Mot de passe changé pour {user.username}")
        return Response({"detail": "Mot de passe modifié avec succès."})
