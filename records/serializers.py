from rest_framework import serializers

from pets.species import VET_TYPES
from triage.models import SymptomCheck
from .models import SharedRecord


class ShareCreateSerializer(serializers.Serializer):
    pet_id = serializers.IntegerField()
    selected_check_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), required=False, default=list
    )
    care_notes = serializers.CharField(required=False, allow_blank=True, default="")
    vet_name = serializers.CharField(required=False, allow_blank=True, max_length=120, default="")
    vet_email = serializers.EmailField(required=False, allow_blank=True, default="")

    def validate(self, data):
        # le contexte porte l'animal déjà vérifié (propriétaire) par la vue
        pet = self.context["pet"]
        ids = list(dict.fromkeys(data.get("selected_check_ids") or []))
        checks = list(SymptomCheck.objects.filter(pet=pet, id__in=ids))
        if len(checks) != len(ids):
            raise serializers.ValidationError(
                {"selected_check_ids": "Certaines analyses n'appartiennent pas à cet animal."}
            )
        data["checks"] = checks
        return data

    def create(self, validated_data):
        record = SharedRecord.objects.create(
            pet=self.context["pet"],
            owner=self.context["request"].user,
            care_notes=validated_data.get("care_notes", ""),
            vet_name=validated_data.get("vet_name", ""),
            vet_email=validated_data.get("vet_email", ""),
        )
        record.checks.set(validated_data["checks"])
        return record


class ShareListQuerySerializer(serializers.Serializer):
    pet = serializers.IntegerField(required=False, min_value=1)


class ShareCreatedSerializer(serializers.Serializer):
    share_url = serializers.CharField()
    share_token = serializers.CharField()
    expires_at = serializers.DateTimeField()


class SharedRecordSerializer(serializers.ModelSerializer):
    pet_name = serializers.CharField(source="pet.name", read_only=True)
    check_ids = serializers.SerializerMethodField()
    is_expired = serializers.SerializerMethodField()

    class Meta:
        model = SharedRecord
        fields = [
            "id", "share_token", "share_url", "pet", "pet_name", "check_ids",
            "care_notes", "vet_name", "vet_email",
            "view_count", "created_at", "expires_at", "is_expired",
        ]
        read_only_fields = fields

    def get_check_ids(self, obj):
        return sorted(c.id for c in obj.checks.all())

    def get_is_expired(self, obj):
        return obj.is_expired()


# vue publique (lecture seule, sans identifiants internes du propriétaire)
class SharedCheckSerializer(serializers.ModelSerializer):
    class Meta:
        model = SymptomCheck
        fields = [
            "id", "symptoms", "possible_causes", "severity_category",
            "recommendations", "when_to_visit_vet", "disclaimer", "created_at",
        ]


class PublicSharedRecordSerializer(serializers.ModelSerializer):
    pet = serializers.SerializerMethodField()
    checks = serializers.SerializerMethodField()

    class Meta:
        model = SharedRecord
        fields = ["pet", "checks", "care_notes", "vet_name", "view_count", "created_at", "expires_at"]

    def get_pet(self, obj):
        pet = obj.pet
        info = pet.species_info
        return {
            "name": pet.name,
            "species": pet.species,
            "species_label": info.label,
            "icon": info.icon,
            "vet_type": info.vet_type,
            "vet": VET_TYPES[info.vet_type]["label"],
            "breed": pet.breed,
            "age": pet.age,
            "weight": pet.weight,
            "known_conditions": pet.known_conditions or [],
            "allergies": pet.allergies or [],
            "medications": pet.medications or [],
        }

    def get_checks(self, obj):
        # seules les analyses de cet animal, les plus récentes d'abord
        qs = obj.checks.filter(pet=obj.pet).order_by("-created_at", "-id")
        return SharedCheckSerializer(qs, many=True).data
