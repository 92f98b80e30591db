from rest_framework import serializers

from .models import Pet
from .species import ANIMAL_CATEGORIES, VET_TYPES, species_choices


class StringListField(serializers.ListField):
    child = serializers.CharField(max_length=200, allow_blank=False, trim_whitespace=True)


class PetSerializer(serializers.ModelSerializer):
    known_conditions = StringListField(required=False)
    allergies = StringListField(required=False)
    medications = StringListField(required=False)
    species_label = serializers.SerializerMethodField()
    vet_type = serializers.SerializerMethodField()

    class Meta:
        model = Pet
        fields = [
            "id", "name", "species", "species_label", "vet_type", "breed", "age", "weight",
            "photo_url", "known_conditions", "allergies", "medications",
            "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def get_species_label(self, obj):
        return obj.species_info.label

    def get_vet_type(self, obj):
        return obj.species_info.vet_type

    def validate_species(self, value):
        value = (value or "").strip().lower()
        if not value:
            raise serializers.ValidationError("L'espèce est requise.")
        if value not in dict(species_choices()):
            raise serializers.ValidationError(f"Espèce inconnue : {value}.")
        return value

    def validate_weight(self, value):
        if value is not None and value <= 0:
            raise serializers.ValidationError("Le poids doit être positif.")
        return value


class SpeciesCategorySerializer(serializers.Serializer):
    code = serializers.CharField()
    label = serializers.CharField()
    species = serializers.ListField(child=serializers.DictField())


def species_catalogue():
    data = []
    for code, cat in ANIMAL_CATEGORIES.items():
        data.append({
            "code": code,
            "label": cat["label"],
            "species": [
                {
                    "value": sp.value,
                    "label": sp.label,
                    "icon": sp.icon,
                    "vet_type": sp.vet_type,
                    "vet": VET_TYPES[sp.vet_type]["label"],
                }
                for sp in cat["species"]
            ],
        })
    return data
