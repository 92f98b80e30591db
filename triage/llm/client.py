import logging
import re

import requests
from django.conf import settings

from ..logic.validation import AnalysisValidationError, parse_analysis
from .prompts import SYSTEM_PROMPT, build_user_prompt, with_image_context

logger = logging.getLogger(__name__)

PROVIDER_OLLAMA = "ollama"
PROVIDER_ANTHROPIC = "anthropic"

IMAGE_MEDIA_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")
_DATA_URL_RE = re.compile(r"^data:([^;]+);base64,(.+)$", re.DOTALL)


class LLMTransportError(RuntimeError):
    """Le backend IA est injoignable ou a répondu en erreur."""


def get_provider() -> str:
    # anthropic uniquement si une clé est configurée, sinon modèle local
    provider = (getattr(settings, "LLM_PROVIDER", PROVIDER_OLLAMA) or PROVIDER_OLLAMA).lower()
    if provider == PROVIDER_ANTHROPIC and settings.ANTHROPIC_API_KEY:
        return PROVIDER_ANTHROPIC
    return PROVIDER_OLLAMA


def get_model(provider: str) -> str:
    if provider == PROVIDER_ANTHROPIC:
        return settings.ANTHROPIC_MODEL
    return settings.OLLAMA_MODEL


def image_block(data_url: str):
    """data:image/png;base64,xxx -> bloc image Anthropic (None si invalide)."""
    m = _DATA_URL_RE.match(data_url or "")
    if not m:
        return None
    media_type = m.group(1) if m.group(1) in IMAGE_MEDIA_TYPES else "image/jpeg"
    return {
        "type": "image",
        "source": {"type": "base64", "media_type": media_type, "data": m.group(2)},
    }


def _post(url: str, **kwargs) -> dict:
    try:
        r = requests.post(url, timeout=settings.LLM_TIMEOUT, **kwargs)
        r.raise_for_status()
        return r.json()
    except requests.RequestException as e:
        raise LLMTransportError(f"AI API error: {e}") from e
    except ValueError as e:
        raise LLMTransportError(f"AI API error: invalid response body ({e})") from e


class LLMClient:
    @staticmethod
    def _gen_ollama(prompt: str) -> str:
        base = (settings.OLLAMA_BASE_URL or "http://127.0.0.1:11434").strip().rstrip("/")
        payload = {
            "model": settings.OLLAMA_MODEL,
            "prompt": f"{SYSTEM_PROMPT}\n\n{prompt}",
            "options": {"temperature": settings.LLM_TEMPERATURE, "num_predict": settings.LLM_MAX_TOKENS},
            "format": "json",
            "stream": False,
        }
        data = _post(f"{base}/api/generate", json=payload, proxies={"http": None, "https": None})
        text = (data.get("response") or "").strip()
        if not text:
            raise LLMTransportError("AI API error: empty response from Ollama")
        return text

    @staticmethod
    def _gen_anthropic(prompt: str, images=None) -> str:
        base = (settings.ANTHROPIC_BASE_URL or "https://api.anthropic.com/v1").strip().rstrip("/")
        blocks = [b for b in (image_block(img) for img in images or []) if b]
        blocks.append({"type": "text", "text": with_image_context(prompt, len(blocks))})

        payload = {
            "model": settings.ANTHROPIC_MODEL,
            "max_tokens": settings.LLM_MAX_TOKENS,
            "system": SYSTEM_PROMPT,
            "messages": [{"role": "user", "content": blocks}],
        }
        headers = {
            "x-api-key": settings.ANTHROPIC_API_KEY,
            "anthropic-version": settings.ANTHROPIC_VERSION,
            "content-type": "application/json",
        }
        data = _post(f"{base}/messages", json=payload, headers=headers)

        parts = [
            item.get("text", "").strip()
            for item in data.get("content") or []
            if isinstance(item, dict) and item.get("type") == "text"
        ]
        text = "\n".join(p for p in parts if p).strip()
        if not text:
            raise LLMTransportError("AI API error: no text response from Anthropic")
        return text

    @staticmethod
    def generate(prompt: str, images=None) -> str:
        provider = get_provider()
        if provider == PROVIDER_ANTHROPIC:
            logger.info("Analyse via Anthropic (%s), %d image(s)", settings.ANTHROPIC_MODEL, len(images or []))
            return LLMClient._gen_anthropic(prompt, images)

        logger.info("Analyse via Ollama (%s)", settings.OLLAMA_MODEL)
        if images:
            logger.warning("Ollama ne gère pas les images : %d image(s) ignorée(s).", len(images))
        return LLMClient._gen_ollama(prompt)


def analyze_symptoms(symptoms: str, pet_info: dict, images=None):
    """
    Pipeline complet : prompt -> backend IA -> validation.
    Retourne (analysis, trace) ; lève LLMTransportError ou AnalysisValidationError.
    """
    provider = get_provider()
    prompt = build_user_prompt(symptoms, pet_info)
    raw = LLMClient.generate(prompt, images=images)
    try:
        analysis = parse_analysis(raw)
    except AnalysisValidationError as e:
        e.raw = raw
        raise
    trace = {"engine": provider, "model": get_model(provider)}
    return analysis, trace
