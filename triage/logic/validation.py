# triage/logic/validation.py
"""
Validation de la réponse brute du modèle.

Le modèle doit renvoyer un objet JSON unique :
    {possibleCauses: [str], severityCategory: str, recommendations: [str],
     whenToVisitVet: str, disclaimer: str}
mais il l'entoure parfois de commentaires ou d'un bloc ```json. On extrait le
premier objet, on vérifie les champs obligatoires et on ramène la sévérité à
l'une des quatre catégories connues.
"""
import json
from typing import Any, Dict

EMERGENCY = "Emergency"
URGENT = "Urgent"
NON_URGENT = "Non-Urgent"
MONITOR = "Monitor"

SEVERITY_CATEGORIES = (EMERGENCY, URGENT, NON_URGENT, MONITOR)
DEFAULT_SEVERITY = NON_URGENT

REQUIRED_FIELDS = (
    "possibleCauses",
    "severityCategory",
    "recommendations",
    "whenToVisitVet",
    "disclaimer",
)
LIST_FIELDS = ("possibleCauses", "recommendations")
TEXT_FIELDS = ("whenToVisitVet", "disclaimer")

_decoder = json.JSONDecoder()


class AnalysisValidationError(ValueError):
    pass


class AnalysisParseError(AnalysisValidationError):
    """Aucun objet JSON exploitable dans le texte."""


class AnalysisStructureError(AnalysisValidationError):
    """Objet JSON trouvé mais incomplet."""


def extract_json_object(text: str) -> Dict[str, Any]:
    if not text or "{" not in text:
        raise AnalysisParseError("Could not parse AI response as JSON: no JSON object found")

    start = text.find("{")
    while start != -1:
        try:
            obj, _ = _decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            obj = None
        if isinstance(obj, dict):
            return obj
        start = text.find("{", start + 1)

    raise AnalysisParseError("Could not parse AI response as JSON: invalid JSON object")


def normalize_severity(value: Any) -> str:
    if value in SEVERITY_CATEGORIES:
        return value
    key = str(value or "").strip().lower().replace(" ", "-").replace("_", "-")
    for category in SEVERITY_CATEGORIES:
        if category.lower() == key:
            return category
    return DEFAULT_SEVERITY


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def validate_analysis(data: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise AnalysisStructureError("Invalid AI response structure: not an object")

    missing = [f for f in REQUIRED_FIELDS if _is_blank(data.get(f))]
    if missing:
        raise AnalysisStructureError(f"Invalid AI response structure: missing {', '.join(missing)}")

    out = {}
    for field in LIST_FIELDS:
        value = data[field]
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            raise AnalysisStructureError(f"Invalid AI response structure: {field} must be a list")
        out[field] = [str(item).strip() for item in value if not _is_blank(item)]

    for field in TEXT_FIELDS:
        out[field] = str(data[field]).strip()

    out["severityCategory"] = normalize_severity(data["severityCategory"])

    return {f: out[f] for f in REQUIRED_FIELDS}


def parse_analysis(text: str) -> Dict[str, Any]:
    return validate_analysis(extract_json_object(text))
