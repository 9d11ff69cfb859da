from types import SimpleNamespace

import openai
import pytest

from hangman.config import Settings
from hangman.services import llm_picker


def _reply(text):
    message = SimpleNamespace(content=text)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Stands in for openai.OpenAI; replies are consumed in order."""

    replies = []
    calls = 0

    def __init__(self, api_key):
        self.api_key = api_key
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        FakeOpenAI.calls += 1
        reply = FakeOpenAI.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if reply is None:
            return SimpleNamespace(choices=[])
        return _reply(reply)


@pytest.fixture
def fake_openai(monkeypatch):
    FakeOpenAI.replies = []
    FakeOpenAI.calls = 0
    monkeypatch.setattr(llm_picker, "OpenAI", FakeOpenAI)
    return FakeOpenAI


@pytest.fixture
def online():
    return Settings(offline=False, openai_api_key="sk-test")


def test_offline_returns_none_without_calling(fake_openai):
    assert llm_picker.pick_with_llm(settings=Settings(offline=True, openai_api_key="sk")) is None
    assert fake_openai.calls == 0


def test_missing_key_returns_none(fake_openai):
    assert llm_picker.pick_with_llm(settings=Settings(offline=False)) is None
    assert fake_openai.calls == 0


def test_cleans_valid_reply(fake_openai, online):
    fake_openai.replies = ['"Planet".']
    assert llm_picker.pick_with_llm(settings=online) == "planet"


def test_retries_on_invalid_reply(fake_openai, online):
    fake_openai.replies = ["two words", "café", "garden"]
    assert llm_picker.pick_with_llm(retries=2, settings=online) == "garden"
    assert fake_openai.calls == 3


def test_retries_on_api_error_then_gives_up(fake_openai, online):
    fake_openai.replies = [openai.OpenAIError("boom"), "", "123"]
    assert llm_picker.pick_with_llm(retries=2, settings=online) is None
    assert fake_openai.calls == 3


def test_pick_word_falls_back_to_local(fake_openai, tmp_path):
    (tmp_path / "medium.txt").write_text("kitten\n", encoding="utf-8")
    settings = Settings(offline=True, wordlist_dir=tmp_path)
    assert llm_picker.pick_word("medium", settings=settings) == ("kitten", "local")


def test_pick_word_prefers_llm(fake_openai, online):
    fake_openai.replies = ["rocket"]
    assert llm_picker.pick_word("hard", settings=online) == ("rocket", "llm")


def test_retries_on_empty_choices(fake_openai, online):
    fake_openai.replies = [None, "forest"]
    assert llm_picker.pick_with_llm(retries=2, settings=online) == "forest"
    assert fake_openai.calls == 2


def test_empty_choices_every_time_gives_none(fake_openai, online):
    fake_openai.replies = [None, None]
    assert llm_picker.pick_with_llm(retries=1, settings=online) is None
