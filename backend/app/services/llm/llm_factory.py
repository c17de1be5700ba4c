# backend/app/services/llm/llm_factory.py
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from app.core.config import settings
from langchain_openai import ChatOpenAI

log = logging.getLogger("app.services.llm.llm_factory")

_DEFAULT_BASE_URL = "https://api.openai.com/v1"


@lru_cache(maxsize=8)
def _mk_llm_cached(model: str, temperature: float, max_tokens: int) -> ChatOpenAI:
    """
    Erzeugt einen ChatOpenAI-Client (LangChain):
    - timeout aus den Settings
    - max_retries aus den Settings (Default 0: kein Retry, kein Backoff)
    - optional base_url (OpenAI-kompatibler Proxy)
    """
    api_key = settings.openai_api_key
    if not api_key:
        raise RuntimeError("OPENAI_API_KEY fehlt in der Konfiguration")

    base_url = settings.openai_base_url or _DEFAULT_BASE_URL

    llm = ChatOpenAI(
        model=model,
        api_key=api_key,
        base_url=base_url,
        temperature=temperature,
        max_tokens=max_tokens,
        timeout=settings.openai_timeout,
        max_retries=settings.openai_max_retries,
    )
    log.info(
        "LLM-INIT: model=%s, temp=%.2f, max_tokens=%s, base_url=%s",
        model, temperature, max_tokens, ("default" if not settings.openai_base_url else base_url),
    )
    return llm


def get_llm(
    *,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
) -> ChatOpenAI:
    """
    Öffentliche Fabrikfunktion (wird vom Tutor genutzt).
    """
    active_model = model or settings.openai_model
    temp = settings.openai_temperature if temperature is None else float(temperature)
    limit = settings.openai_max_tokens if max_tokens is None else int(max_tokens)
    return _mk_llm_cached(active_model, temp, limit)
