from django.db import models
from django.utils import timezone

from pets.models import Pet
from .logic.validation import SEVERITY_CATEGORIES


class SymptomCheck(models.Model):
    SEVERITY_CHOICES = [(s, s) for s in SEVERITY_CATEGORIES]

    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name="symptom_checks")
    symptoms = models.TextField()                                  # texte saisi par le propriétaire

    possible_causes = models.JSONField(default=list, blank=True)
    severity_category = models.CharField(max_length=16, choices=SEVERITY_CHOICES)
    recommendations = models.JSONField(default=list, blank=True)
    when_to_visit_vet = models.TextField(blank=True)
    disclaimer = models.TextField(blank=True)

    media_count = models.PositiveSmallIntegerField(default=0)     # images jointes à l'analyse
    model_trace = models.JSONField(default=dict, blank=True)      # moteur/modèle pour audit
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [models.Index(fields=["pet", "created_at"], name="triage_pet_created_idx")]

    def __str__(self):
        return f"Check #{self.id} {self.pet.name} severity={self.severity_category}"

    @classmethod
    def from_analysis(cls, pet, symptoms, analysis, media_count=0, model_trace=None):
        return cls.objects.create(
            pet=pet,
            symptoms=symptoms,
            possible_causes=analysis["possibleCauses"],
            severity_category=analysis["severityCategory"],
            recommendations=analysis["recommendations"],
            when_to_visit_vet=analysis["whenToVisitVet"],
            disclaimer=analysis["disclaimer"],
            media_count=media_count,
            model_trace=model_trace or {},
        )


class ErrorLog(models.Model):
    TYPE_LLM_ERROR = "LLM_ERROR"
    TYPE_NON_JSON = "NON_JSON_RESPONSE"
    TYPE_INVALID_STRUCTURE = "INVALID_STRUCTURE"

    type = models.CharField(max_length=32)
    message = models.CharField(max_length=256, blank=True)
    payload = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"[{self.created_at:%Y-%m-%d %H:%M}] {self.type} - {self.message or ''}"
