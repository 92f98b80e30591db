"""
Fixtures pytest communes (pytest-django + client DRF)
"""
import json

import pytest
from rest_framework.test import APIClient

from pets.models import Pet
from triage.models import SymptomCheck


VALID_ANALYSIS = {
    "possibleCauses": ["Dietary indiscretion", "Gastroenteritis"],
    "severityCategory": "Non-Urgent",
    "recommendations": ["Withhold food for 12 hours", "Offer small amounts of water"],
    "whenToVisitVet": "If vomiting continues beyond 24 hours.",
    "disclaimer": "This is not a diagnosis.",
}


@pytest.fixture
def api_client():
    """Client DRF non authentifié"""
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        email="owner@example.com", password="Sup3r-Secret-Pass", first_name="Alice"
    )


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        email="other@example.com", password="Sup3r-Secret-Pass", first_name="Bob"
    )


@pytest.fixture
def auth_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def other_client(other_user):
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


@pytest.fixture
def pet(user):
    return Pet.objects.create(
        owner=user,
        name="Rex",
        species="dog",
        breed="Labrador",
        age=36,
        weight=28.5,
        known_conditions=["Hip dysplasia"],
        allergies=["Chicken"],
        medications=[],
    )


@pytest.fixture
def symptom_check(pet):
    return SymptomCheck.from_analysis(pet, "Vomiting since this morning", VALID_ANALYSIS)


@pytest.fixture
def analysis_text():
    """Réponse brute typique du modèle (JSON dans un bloc de code)"""
    return "Here is my assessment:\n```json\n" + json.dumps(VALID_ANALYSIS) + "\n```\nTake care!"
