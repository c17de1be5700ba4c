# backend/app/services/prompt/prompting.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

log = logging.getLogger(__name__)

_BASE = Path(__file__).resolve().parent
_TEMPLATES = _BASE / "templates"

SYSTEM_TEMPLATE = "geography_system.jinja2"
QUESTION_TEMPLATE = "geography_question.jinja2"
DEFAULT_DIFFICULTY = "medium"


def _collect_template_dirs() -> List[Path]:
    # Optional: zusätzliche Pfade per ENV (z. B. "/app/custom_prompts:/mnt/prompts")
    env_paths: List[Path] = []
    raw = os.getenv("GEOTUTOR_TEMPLATE_DIRS", "").strip()
    if raw:
        for p in raw.split(":"):
            pp = Path(p).resolve()
            if pp.is_dir():
                env_paths.append(pp)
    return env_paths + [_TEMPLATES]


_ENV = Environment(
    loader=FileSystemLoader([str(p) for p in _collect_template_dirs()]),
    autoescape=False,
    undefined=StrictUndefined,  # Fail-fast
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(name: str, /, **kwargs: Any) -> str:
    """Rendert ein Jinja2-Template; Whitespace am Rand wird entfernt."""
    tpl = _ENV.get_template(name)
    log.debug("[prompting] loaded template '%s' from '%s'", name, getattr(tpl, "filename", None) or "?")
    return tpl.render(**kwargs).strip()


def build_user_prompt(question: str, topic: Optional[str] = None, difficulty: Optional[str] = None) -> str:
    """
    Mit Topic: "Topic: …\\nDifficulty: …\\nQuestion: …" (Difficulty fällt auf "medium" zurück).
    Ohne Topic: die Frage unverändert.
    """
    return render_template(
        QUESTION_TEMPLATE,
        question=question,
        topic=topic,
        difficulty=difficulty,
        default_difficulty=DEFAULT_DIFFICULTY,
    )


def build_tutor_messages(
    question: str, topic: Optional[str] = None, difficulty: Optional[str] = None
) -> List[BaseMessage]:
    return [
        SystemMessage(content=render_template(SYSTEM_TEMPLATE)),
        HumanMessage(content=build_user_prompt(question, topic, difficulty)),
    ]
