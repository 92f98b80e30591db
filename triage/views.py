# triage/views.py
from collections import Counter, defaultdict
from datetime import timedelta
import logging

from django.db.models import Count
from django.utils import timezone

from rest_framework import generics, permissions, status
from rest_framework.generics import get_object_or_404
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema

from pets.models import Pet
from .llm.client import LLMTransportError, analyze_symptoms
from .logic.emergency import detect_emergency_keywords
from .logic.validation import (
    SEVERITY_CATEGORIES, AnalysisParseError, AnalysisValidationError,
)
from .models import ErrorLog, SymptomCheck
from .serializers import (
    AnalyzeInputSerializer, AnalyzeOutputSerializer, SymptomCheckSerializer,
    EmergencyCheckInputSerializer, EmergencyCheckOutputSerializer,
    StatsOutputSerializer,
)

logger = logging.getLogger(__name__)

SERVICE_UNAVAILABLE = "AI service temporarily unavailable. Please try again later."
ANALYSIS_FAILED = "Failed to analyze symptoms. Please try again."


def _log_error(err_type: str, message: str = "", payload: dict | None = None):
    try:
        ErrorLog.objects.create(type=err_type, message=message[:250], payload=payload or {})
    except Exception:
        # on ne casse jamais la réponse pour un problème de log
        logger.exception("Impossible d'enregistrer l'ErrorLog %s", err_type)


class AnalyzeView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @swagger_auto_schema(
        request_body=AnalyzeInputSerializer,
        responses={200: AnalyzeOutputSerializer, 502: "Réponse IA invalide", 503: "Service IA indisponible"},
        operation_description="Analyse les symptômes d'un animal et enregistre le résultat."
    )
    def post(self, request):
        ser = AnalyzeInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        symptoms = ser.validated_data["symptoms"]
        images = ser.validated_data["media"]

        pet = get_object_or_404(Pet, id=ser.validated_data["pet_id"], owner=request.user)

        try:
            analysis, trace = analyze_symptoms(symptoms, pet.to_prompt_info(), images)
        except LLMTransportError as e:
            logger.error("Analyse impossible pour pet=%s : %s", pet.id, e)
            _log_error(ErrorLog.TYPE_LLM_ERROR, message="analyze_generate_failed", payload={"detail": str(e)})
            return Response({"detail": SERVICE_UNAVAILABLE}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
        except AnalysisValidationError as e:
            err_type = ErrorLog.TYPE_NON_JSON if isinstance(e, AnalysisParseError) else ErrorLog.TYPE_INVALID_STRUCTURE
            logger.warning("Réponse IA rejetée pour pet=%s : %s", pet.id, e)
            _log_error(err_type, message=str(e), payload={"raw": (getattr(e, "raw", "") or "")[:2000]})
            return Response({"detail": ANALYSIS_FAILED}, status=status.HTTP_502_BAD_GATEWAY)

        check = SymptomCheck.from_analysis(
            pet, symptoms, analysis, media_count=len(images), model_trace=trace
        )

        out = AnalyzeOutputSerializer({
            "check_id": check.id,
            "analysis": analysis,
            "emergency_keywords": detect_emergency_keywords(symptoms),
        }).data
        return Response(out, status=status.HTTP_200_OK)


class SymptomCheckDetailView(generics.RetrieveDestroyAPIView):
    serializer_class = SymptomCheckSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return SymptomCheck.objects.select_related("pet").filter(pet__owner=self.request.user)


class EmergencyCheckView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    @swagger_auto_schema(
        request_body=EmergencyCheckInputSerializer,
        responses={200: EmergencyCheckOutputSerializer},
        operation_description="Détecte les mots-clés d'urgence dans une description de symptômes."
    )
    def post(self, request):
        ser = EmergencyCheckInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        keywords = detect_emergency_keywords(ser.validated_data["text"])
        return Response(EmergencyCheckOutputSerializer({
            "is_emergency": bool(keywords),
            "keywords": keywords,
        }).data)


class StatsView(APIView):
    permission_classes = [permissions.IsAdminUser]

    def get(self, request):
        since = timezone.now() - timedelta(days=30)
        qs = SymptomCheck.objects.filter(created_at__gte=since)

        by_severity = {s: 0 for s in SEVERITY_CATEGORIES}
        for row in qs.order_by().values("severity_category").annotate(n=Count("id")):
            by_severity[row["severity_category"]] = row["n"]

        engines = Counter()
        per_day = defaultdict(int)
        for created_at, trace in qs.values_list("created_at", "model_trace"):
            per_day[created_at.date().isoformat()] += 1
            engines[(trace or {}).get("engine") or "unknown"] += 1

        errors = ErrorLog.objects.filter(created_at__gte=since)\
            .values("type").annotate(n=Count("id"))

        out = StatsOutputSerializer({
            "total_checks": qs.count(),
            "by_severity": by_severity,
            "by_engine": dict(engines),
            "checks_per_day": [{"day": k, "count": v} for k, v in sorted(per_day.items())],
            "errors_by_type": {row["type"]: row["n"] for row in errors},
        }).data
        return Response(out, status=status.HTTP_200_OK)
