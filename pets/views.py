from rest_framework import viewsets, permissions
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from triage.serializers import SymptomCheckSerializer
from .models import Pet
from .permissions import IsPetOwner
from .serializers import PetSerializer, SpeciesCategorySerializer, species_catalogue


class PetViewSet(viewsets.ModelViewSet):
    serializer_class = PetSerializer
    permission_classes = [permissions.IsAuthenticated, IsPetOwner]

    def get_queryset(self):
        # un animal d'un autre utilisateur est simplement introuvable (404)
        return Pet.objects.filter(owner=self.request.user)

    def perform_create(self, serializer):
        serializer.save(owner=self.request.user)

    @action(detail=True, methods=["get"])
    def history(self, request, pk=None):
        pet = self.get_object()
        checks = pet.symptom_checks.order_by("-created_at", "-id")
        return Response(SymptomCheckSerializer(checks, many=True).data)


class SpeciesListView(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response(SpeciesCategorySerializer(species_catalogue(), many=True).data)
