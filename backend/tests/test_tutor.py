# backend/tests/test_tutor.py
from __future__ import annotations

import pytest
from langchain_core.messages import HumanMessage, SystemMessage
from sqlalchemy.exc import SQLAlchemyError

from app.services.chat.chat_store import list_recent_exchanges
from app.services.chat.tutor import GENERIC_FAILURE_MESSAGE, TutorUnavailableError, ask_geography_question
from conftest import FakeLLM, run, with_session


def _ask(llm, question, **kwargs):
    async def _go(db):
        return await ask_geography_question(db, "user-1", question, llm=llm, **kwargs)
    return run(with_session(_go))


def _history(owner="user-1"):
    async def _go(db):
        return await list_recent_exchanges(db, owner)
    return run(with_session(_go))


def test_successful_ask_appends_exactly_one_exchange():
    llm = FakeLLM(answer="  Canberra.  ")
    answer = _ask(llm, "  What is the capital of Australia? ")

    assert answer == "Canberra."
    rows = _history()
    assert len(rows) == 1
    assert rows[0].owner_id == "user-1"
    assert rows[0].question == "What is the capital of Australia?"
    assert rows[0].answer == "Canberra."
    assert rows[0].topic is None and rows[0].difficulty is None


def test_prompt_has_system_and_user_message():
    llm = FakeLLM()
    _ask(llm, "What is the capital of France?")

    system, user = llm.calls[0]
    assert isinstance(system, SystemMessage)
    assert "geography teacher" in system.content
    assert isinstance(user, HumanMessage)
    assert user.content == "What is the capital of France?"


def test_difficulty_without_topic_keeps_bare_question_but_is_stored():
    llm = FakeLLM()
    _ask(llm, "What is a fjord?", difficulty="easy")

    assert llm.calls[0][1].content == "What is a fjord?"
    assert _history()[0].difficulty == "easy"


def test_failure_raises_generic_error_without_write():
    llm = FakeLLM(exc=TimeoutError("upstream timeout"))
    with pytest.raises(TutorUnavailableError) as err:
        _ask(llm, "Where is Mali?")
    assert err.value.message == GENERIC_FAILURE_MESSAGE
    assert _history() == []


def test_duplicate_submissions_are_stored_twice():
    llm = FakeLLM()
    _ask(llm, "Where is Mali?")
    _ask(llm, "Where is Mali?")
    assert len(_history()) == 2
    assert len(llm.calls) == 2


def test_empty_question_never_calls_llm():
    llm = FakeLLM()
    with pytest.raises(ValueError):
        _ask(llm, "   ")
    assert llm.calls == []


def test_save_failure_surfaces_as_generic_error(monkeypatch):
    import app.services.chat.tutor as tutor

    async def _broken_append(db, **_kwargs):
        raise SQLAlchemyError("disk I/O error")

    monkeypatch.setattr(tutor, "append_exchange", _broken_append)
    llm = FakeLLM()
    with pytest.raises(TutorUnavailableError) as err:
        _ask(llm, "Where is Mali?")
    assert err.value.message == GENERIC_FAILURE_MESSAGE
    assert len(llm.calls) == 1
    assert _history() == []
