"""
Tests de l'endpoint d'analyse des symptômes (IA patchée)
"""
import json
from unittest import mock

import pytest
from rest_framework import status

from triage.llm.client import LLMClient, LLMTransportError
from triage.models import ErrorLog, SymptomCheck
from conftest import VALID_ANALYSIS

pytestmark = pytest.mark.django_db

URL = "/api/triage/analyze/"


def test_analyze_stores_check(auth_client, pet, analysis_text):
    with mock.patch.object(LLMClient, "generate", return_value=analysis_text) as gen:
        r = auth_client.post(URL, {"pet_id": pet.id, "symptoms": "Vomiting since this morning"}, format="json")

    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["analysis"] == VALID_ANALYSIS
    assert data["emergency_keywords"] == []

    check = SymptomCheck.objects.get(id=data["check_id"])
    assert check.pet == pet
    assert check.severity_category == "Non-Urgent"
    assert check.possible_causes == VALID_ANALYSIS["possibleCauses"]
    assert check.model_trace["engine"] == "ollama"

    prompt = gen.call_args.args[0]
    assert "- Known conditions: Hip dysplasia" in prompt
    assert "- Allergies/Sensitivities: Chicken" in prompt


def test_analyze_coerces_unknown_severity(auth_client, pet):
    raw = json.dumps(dict(VALID_ANALYSIS, severityCategory="Critical"))
    with mock.patch.object(LLMClient, "generate", return_value=raw):
        r = auth_client.post(URL, {"pet_id": pet.id, "symptoms": "Seizure an hour ago"}, format="json")

    assert r.status_code == status.HTTP_200_OK
    assert r.json()["analysis"]["severityCategory"] == "Non-Urgent"
    assert r.json()["emergency_keywords"] == ["seizure"]


def test_analyze_filters_media(auth_client, pet, analysis_text):
    media = [
        {"type": "image", "data": "data:image/png;base64,AAAA"},
        {"type": "video", "data": "data:video/mp4;base64,AAAA"},
        {"type": "image", "data": "https://example.com/x.png"},
    ]
    with mock.patch.object(LLMClient, "generate", return_value=analysis_text) as gen:
        r = auth_client.post(URL, {"pet_id": pet.id, "symptoms": "Rash", "media": media}, format="json")

    assert r.status_code == status.HTTP_200_OK
    assert gen.call_args.kwargs["images"] == ["data:image/png;base64,AAAA"]
    assert SymptomCheck.objects.get(id=r.json()["check_id"]).media_count == 1


def test_analyze_drops_malformed_media_entries(auth_client, pet, analysis_text):
    media = ["not-a-dict", 42, None, {"type": "image", "data": "data:image/png;base64,AAAA"}]
    with mock.patch.object(LLMClient, "generate", return_value=analysis_text) as gen:
        r = auth_client.post(URL, {"pet_id": pet.id, "symptoms": "Rash", "media": media}, format="json")

    assert r.status_code == status.HTTP_200_OK
    assert gen.call_args.kwargs["images"] == ["data:image/png;base64,AAAA"]
    assert SymptomCheck.objects.get(id=r.json()["check_id"]).media_count == 1


def test_analyze_null_media_means_no_images(auth_client, pet, analysis_text):
    with mock.patch.object(LLMClient, "generate", return_value=analysis_text) as gen:
        r = auth_client.post(URL, {"pet_id": pet.id, "symptoms": "Rash", "media": None}, format="json")

    assert r.status_code == status.HTTP_200_OK
    assert gen.call_args.kwargs["images"] == []
    assert SymptomCheck.objects.get(id=r.json()["check_id"]).media_count == 0


def test_transport_error_returns_503(auth_client, pet):
    with mock.patch.object(LLMClient, "generate", side_effect=LLMTransportError("AI API error: refused")):
        r = auth_client.post(URL, {"pet_id": pet.id, "symptoms": "Coughing"}, format="json")

    assert r.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert "unavailable" in r.json()["detail"]
    assert not SymptomCheck.objects.exists()
    assert ErrorLog.objects.filter(type=ErrorLog.TYPE_LLM_ERROR).count() == 1


def test_unparseable_reply_returns_502(auth_client, pet):
    with mock.patch.object(LLMClient, "generate", return_value="Sorry, I cannot help."):
        r = auth_client.post(URL, {"pet_id": pet.id, "symptoms": "Coughing"}, format="json")

    assert r.status_code == status.HTTP_502_BAD_GATEWAY
    assert not SymptomCheck.objects.exists()
    assert ErrorLog.objects.filter(type=ErrorLog.TYPE_NON_JSON).exists()


def test_incomplete_reply_returns_502(auth_client, pet):
    raw = json.dumps({k: v for k, v in VALID_ANALYSIS.items() if k != "disclaimer"})
    with mock.patch.object(LLMClient, "generate", return_value=raw):
        r = auth_client.post(URL, {"pet_id": pet.id, "symptoms": "Coughing"}, format="json")

    assert r.status_code == status.HTTP_502_BAD_GATEWAY
    assert ErrorLog.objects.filter(type=ErrorLog.TYPE_INVALID_STRUCTURE).exists()


def test_analyze_other_users_pet_is_404(other_client, pet):
    with mock.patch.object(LLMClient, "generate") as gen:
        r = other_client.post(URL, {"pet_id": pet.id, "symptoms": "Coughing"}, format="json")
    assert r.status_code == status.HTTP_404_NOT_FOUND
    gen.assert_not_called()


def test_analyze_requires_symptoms(auth_client, pet):
    r = auth_client.post(URL, {"pet_id": pet.id}, format="json")
    assert r.status_code == status.HTTP_400_BAD_REQUEST


def test_check_detail_and_delete(auth_client, other_client, symptom_check):
    url = f"/api/triage/checks/{symptom_check.id}/"
    assert other_client.get(url).status_code == status.HTTP_404_NOT_FOUND
    r = auth_client.get(url)
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["severity_category"] == "Non-Urgent"
    assert auth_client.delete(url).status_code == status.HTTP_204_NO_CONTENT
    assert not SymptomCheck.objects.exists()


def test_stats_admin_only(auth_client, django_user_model, symptom_check):
    assert auth_client.get("/api/triage/stats/").status_code == status.HTTP_403_FORBIDDEN

    admin = django_user_model.objects.create_superuser(email="admin@example.com", password="Adm1n-Pass-Word")
    auth_client.force_authenticate(user=admin)
    r = auth_client.get("/api/triage/stats/")
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["total_checks"] == 1
    assert data["by_severity"] == {"Emergency": 0, "Urgent": 0, "Non-Urgent": 1, "Monitor": 0}
