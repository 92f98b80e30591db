from rest_framework import serializers

from .logic.validation import SEVERITY_CATEGORIES
from .models import SymptomCheck


class AnalyzeInputSerializer(serializers.Serializer):
    pet_id = serializers.IntegerField()
    symptoms = serializers.CharField(max_length=5000)
    media = serializers.ListField(
        child=serializers.JSONField(allow_null=True), required=False, allow_null=True, default=list
    )

    def validate_media(self, value):
        # seules les images en data URL sont transmises à l'IA, le reste est ignoré
        return [
            m["data"] for m in value or []
            if isinstance(m, dict)
            and m.get("type") == "image"
            and isinstance(m.get("data"), str)
            and m["data"].startswith("data:image")
        ]


class AnalysisSerializer(serializers.Serializer):
    possibleCauses = serializers.ListField(child=serializers.CharField())
    severityCategory = serializers.ChoiceField(choices=SEVERITY_CATEGORIES)
    recommendations = serializers.ListField(child=serializers.CharField())
    whenToVisitVet = serializers.CharField()
    disclaimer = serializers.CharField()


class AnalyzeOutputSerializer(serializers.Serializer):
    check_id = serializers.IntegerField()
    analysis = AnalysisSerializer()
    emergency_keywords = serializers.ListField(child=serializers.CharField())


class SymptomCheckSerializer(serializers.ModelSerializer):
    class Meta:
        model = SymptomCheck
        fields = [
            "id", "pet", "symptoms", "possible_causes", "severity_category",
            "recommendations", "when_to_visit_vet", "disclaimer", "media_count", "created_at",
        ]
        read_only_fields = fields


# bandeau d'urgence
class EmergencyCheckInputSerializer(serializers.Serializer):
    text = serializers.CharField(allow_blank=True)


class EmergencyCheckOutputSerializer(serializers.Serializer):
    is_emergency = serializers.BooleanField()
    keywords = serializers.ListField(child=serializers.CharField())


# stats
class StatsOutputSerializer(serializers.Serializer):
    total_checks = serializers.IntegerField()
    by_severity = serializers.DictField(child=serializers.IntegerField())
    by_engine = serializers.DictField(child=serializers.IntegerField())
    checks_per_day = serializers.ListField(child=serializers.DictField())
    errors_by_type = serializers.DictField(child=serializers.IntegerField())
