from django.conf import settings
from django.db import models

from .species import get_species_info


class Pet(models.Model):
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="pets")
    name = models.CharField(max_length=100)
    species = models.CharField(max_length=32)                # code du référentiel, ex: "dog", "gecko"
    breed = models.CharField(max_length=100, blank=True)
    age = models.PositiveIntegerField()                      # en mois
    weight = models.FloatField(null=True, blank=True)        # kg, grammes ou cm selon l'espèce
    photo_url = models.URLField(max_length=500, blank=True)

    known_conditions = models.JSONField(default=list, blank=True)
    allergies = models.JSONField(default=list, blank=True)
    medications = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [models.Index(fields=["owner", "created_at"], name="pets_owner_created_idx")]

    def __str__(self):
        return f"{self.name} ({self.species})"

    @property
    def species_info(self):
        return get_species_info(self.species)

    def to_prompt_info(self) -> dict:
        """Attributs utilisés par le prompt d'analyse."""
        return {
            "name": self.name,
            "species": self.species,
            "breed": self.breed or None,
            "age": self.age,
            "weight": self.weight,
            "known_conditions": list(self.known_conditions or []),
            "allergies": list(self.allergies or []),
            "medications": list(self.medications or []),
        }
