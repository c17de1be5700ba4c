# backend/tests/test_prompting.py
from __future__ import annotations

from app.services.prompt.prompting import build_tutor_messages, build_user_prompt


def test_question_without_topic_is_passed_through():
    assert build_user_prompt("Where is Nepal?") == "Where is Nepal?"


def test_topic_prefix_defaults_difficulty_to_medium():
    out = build_user_prompt("Where is Nepal?", topic="Countries & Continents")
    assert out == "Topic: Countries & Continents\nDifficulty: medium\nQuestion: Where is Nepal?"


def test_topic_prefix_uses_given_difficulty():
    out = build_user_prompt("Why monsoons?", topic="Climate & Weather", difficulty="hard")
    assert out == "Topic: Climate & Weather\nDifficulty: hard\nQuestion: Why monsoons?"


def test_system_prompt_limits_length():
    system, _ = build_tutor_messages("Where is Nepal?")
    assert system.content.startswith("You are a knowledgeable geography teacher")
    assert "2-4 paragraphs max" in system.content
