"""
Tests CRUD des animaux (restreint au propriétaire)
"""
import pytest
from rest_framework import status

from pets.models import Pet

pytestmark = pytest.mark.django_db


def test_create_pet(auth_client, user):
    r = auth_client.post("/api/pets/", {
        "name": "Spike",
        "species": "Bearded_Dragon ",
        "age": 18,
        "weight": 0.4,
        "known_conditions": ["Metabolic bone disease"],
        "allergies": [],
    }, format="json")
    assert r.status_code == status.HTTP_201_CREATED
    data = r.json()
    assert data["species"] == "bearded_dragon"
    assert data["species_label"] == "Bearded Dragon"
    assert data["vet_type"] == "reptile"
    assert data["medications"] == []
    pet = Pet.objects.get(id=data["id"])
    assert pet.owner == user
    assert pet.known_conditions == ["Metabolic bone disease"]


def test_create_pet_requires_name_species_age(auth_client):
    r = auth_client.post("/api/pets/", {"name": "Nameless"}, format="json")
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert {"species", "age"} <= set(r.json())


def test_create_pet_rejects_unknown_species(auth_client):
    r = auth_client.post("/api/pets/", {"name": "Nessie", "species": "dragon", "age": 12}, format="json")
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert "species" in r.json()
    assert not Pet.objects.exists()


def test_list_only_own_pets(auth_client, pet, other_user):
    Pet.objects.create(owner=other_user, name="Tom", species="cat", age=20)
    r = auth_client.get("/api/pets/")
    assert r.status_code == status.HTTP_200_OK
    assert [p["name"] for p in r.json()] == ["Rex"]


def test_other_user_cannot_see_or_delete_pet(other_client, pet):
    assert other_client.get(f"/api/pets/{pet.id}/").status_code == status.HTTP_404_NOT_FOUND
    assert other_client.delete(f"/api/pets/{pet.id}/").status_code == status.HTTP_404_NOT_FOUND
    assert Pet.objects.filter(id=pet.id).exists()


def test_update_pet(auth_client, pet):
    r = auth_client.patch(f"/api/pets/{pet.id}/", {"age": 40, "medications": ["Carprofen"]}, format="json")
    assert r.status_code == status.HTTP_200_OK
    pet.refresh_from_db()
    assert pet.age == 40
    assert pet.medications == ["Carprofen"]


def test_delete_pet(auth_client, pet):
    assert auth_client.delete(f"/api/pets/{pet.id}/").status_code == status.HTTP_204_NO_CONTENT
    assert not Pet.objects.filter(id=pet.id).exists()


def test_pet_history_newest_first(auth_client, pet, symptom_check):
    from triage.models import SymptomCheck
    from conftest import VALID_ANALYSIS
    newer = SymptomCheck.from_analysis(pet, "Lethargic", dict(VALID_ANALYSIS, severityCategory="Urgent"))

    r = auth_client.get(f"/api/pets/{pet.id}/history/")
    assert r.status_code == status.HTTP_200_OK
    assert [c["id"] for c in r.json()] == [newer.id, symptom_check.id]


def test_species_catalogue_is_public(api_client):
    r = api_client.get("/api/pets/species/")
    assert r.status_code == status.HTTP_200_OK
    categories = {c["code"]: c for c in r.json()}
    assert set(categories) == {"mammal", "bird", "reptile", "fish", "amphibian"}
    assert categories["fish"]["species"][0]["vet_type"] == "aquatic"


def test_pets_require_auth(api_client):
    assert api_client.get("/api/pets/").status_code == status.HTTP_401_UNAUTHORIZED
