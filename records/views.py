import logging

from rest_framework import permissions, status
from rest_framework.generics import get_object_or_404
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from pets.models import Pet
from .models import SharedRecord
from .serializers import (
    ShareCreateSerializer, ShareCreatedSerializer, ShareListQuerySerializer,
    SharedRecordSerializer, PublicSharedRecordSerializer,
)

logger = logging.getLogger(__name__)

LINK_EXPIRED = "This shared record link has expired. Please ask the pet owner to generate a new link."


class ShareListCreateView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        qs = SharedRecord.objects.filter(owner=request.user)\
            .select_related("pet").prefetch_related("checks")
        query = ShareListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        pet_id = query.validated_data.get("pet")
        if pet_id:
            qs = qs.filter(pet_id=pet_id)
        return Response(SharedRecordSerializer(qs, many=True).data)

    @swagger_auto_schema(
        request_body=ShareCreateSerializer,
        responses={201: ShareCreatedSerializer},
        operation_description="Crée un lien de partage (7 jours) vers une sélection d'analyses."
    )
    def post(self, request):
        pet_id = request.data.get("pet_id")
        if not pet_id:
            return Response({"pet_id": ["Ce champ est obligatoire."]}, status=status.HTTP_400_BAD_REQUEST)
        pet = get_object_or_404(Pet, id=pet_id, owner=request.user)

        ser = ShareCreateSerializer(data=request.data, context={"request": request, "pet": pet})
        ser.is_valid(raise_exception=True)
        record = ser.save()
        logger.info("Lien de partage créé pour pet=%s (%d analyse(s))", pet.id, record.checks.count())

        out = ShareCreatedSerializer({
            "share_url": record.share_url,
            "share_token": record.share_token,
            "expires_at": record.expires_at,
        }).data
        return Response(out, status=status.HTTP_201_CREATED)


class ShareRevokeView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def delete(self, request, token):
        record = get_object_or_404(SharedRecord, share_token=token, owner=request.user)
        record.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)


class SharedRecordView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @swagger_auto_schema(
        responses={200: PublicSharedRecordSerializer, 404: "Lien inconnu", 410: "Lien expiré"},
        operation_description="Dossier partagé en lecture seule ; chaque consultation est comptée."
    )
    def get(self, request, token):
        record = get_object_or_404(SharedRecord.objects.select_related("pet"), share_token=token)

        if record.is_expired():
            # lien expiré : on refuse sans rien supprimer
            return Response({"detail": LINK_EXPIRED}, status=status.HTTP_410_GONE)

        record.register_view()
        return Response(PublicSharedRecordSerializer(record).data, status=status.HTTP_200_OK)
