"""Tests for the AI service client: JSON cleanup, backend calls and sharing."""

from __future__ import annotations

import json
from datetime import date
from unittest import mock
from urllib.parse import unquote

import pytest
import requests

from noorhub import ai_service, config, proxy
from noorhub.i18n import t


@pytest.fixture
def in_process(monkeypatch):
    """Route backend calls to a fake in-process generator"""
    monkeypatch.setattr(config, "BACKEND_URL", "")
    monkeypatch.setattr(config, "OPENAI_API_KEY", "sk-test")
    calls = []

    def install(reply):
        def fake_generate(action, payload, options, client=None):
            calls.append((action, payload, options))
            if isinstance(reply, Exception):
                raise reply
            return reply
        monkeypatch.setattr(proxy, "generate", fake_generate)
        return calls
    return install


def backend_response(status=200, body=None):
    response = mock.Mock()
    response.ok = status < 400
    response.status_code = status
    response.json.return_value = body if body is not None else {}
    return response


@pytest.mark.parametrize("text, expected", [
    ('[{"a": 1}]', [{"a": 1}]),
    ('```json\n{"a": 1}\n```', {"a": 1}),
    ('Here you go: [1, 2] hope it helps', [1, 2]),
    ('Sure! {"list": [1, 2]} done', {"list": [1, 2]}),
    ("no json at all", None),
    ("", None),
    (None, None),
])
def test_sanitize_json(text, expected):
    assert ai_service.sanitize_json(text) == expected


def test_call_backend_over_http(monkeypatch):
    monkeypatch.setattr(config, "BACKEND_URL", "https://backend.test/api")
    with mock.patch.object(ai_service.requests, "post", return_value=backend_response(body={"text": "ok"})) as post:
        assert ai_service.call_backend("verse", "prompt", {"temperature": 0.1}) == {"text": "ok"}
    assert post.call_args.args[0] == "https://backend.test/api"
    assert post.call_args.kwargs["json"] == {
        "action": "verse",
        "payload": "prompt",
        "config": {"temperature": 0.1},
    }


@pytest.mark.parametrize("response", [
    backend_response(500, {"error": "boom", "details": "trace"}),
    backend_response(200, {"error": "boom"}),
])
def test_call_backend_raises_on_error_body(monkeypatch, response):
    monkeypatch.setattr(config, "BACKEND_URL", "https://backend.test/api")
    with mock.patch.object(ai_service.requests, "post", return_value=response):
        with pytest.raises(ai_service.BackendError):
            ai_service.call_backend("verse", "prompt", {})


@pytest.mark.parametrize("response", [
    backend_response(502, "Bad Gateway"),
    backend_response(200, ["not", "an", "object"]),
])
def test_call_backend_rejects_non_object_bodies(monkeypatch, response):
    monkeypatch.setattr(config, "BACKEND_URL", "https://backend.test/api")
    with mock.patch.object(ai_service.requests, "post", return_value=response):
        with pytest.raises(ai_service.BackendError):
            ai_service.call_backend("hadith", "prompt", {})
        assert ai_service.get_daily_verse("en") is None
        assert ai_service.get_daily_adhkar("en") == []


def test_call_backend_raises_on_network_error(monkeypatch):
    monkeypatch.setattr(config, "BACKEND_URL", "https://backend.test/api")
    with mock.patch.object(ai_service.requests, "post", side_effect=requests.ConnectionError("offline")):
        with pytest.raises(ai_service.BackendError):
            ai_service.call_backend("verse", "prompt", {})


def test_call_backend_in_process_needs_key(monkeypatch):
    monkeypatch.setattr(config, "BACKEND_URL", "")
    monkeypatch.setattr(config, "OPENAI_API_KEY", "")
    with pytest.raises(ai_service.BackendError):
        ai_service.call_backend("scholar", "salam", {})


def test_call_backend_in_process(in_process):
    calls = in_process("answer")
    assert ai_service.call_backend("scholar", "salam", {"temperature": 0.7}) == {"text": "answer"}
    assert calls == [("scholar", "salam", {"temperature": 0.7})]


def test_scholar_reply_language_follows_query(in_process, monkeypatch):
    calls = in_process("Wudu is ...")
    monkeypatch.setattr(ai_service, "detect_language", lambda text, default="ur": "en")
    assert ai_service.get_scholar_response("How do I perform wudu?", lang="ur") == "Wudu is ..."
    options = calls[0][2]
    assert options["temperature"] == 0.7
    assert "English" in options["systemInstruction"]


def test_scholar_error_and_empty_reply(in_process, monkeypatch):
    monkeypatch.setattr(ai_service, "detect_language", lambda text, default="ur": default)
    in_process(ValueError("bad key"))
    assert ai_service.get_scholar_response("سوال", lang="ur") == t("scholar_error", "ur")
    in_process("")
    assert ai_service.get_scholar_response("question", lang="en") == t("scholar_unavailable", "en")


def test_search_hadith_applies_filters(in_process):
    hadiths = [{"text": "Actions are by intentions", "source": "Sahih Bukhari",
                "narrator": "Umar", "authenticity": "Sahih"}]
    calls = in_process(json.dumps(hadiths))
    result = ai_service.search_hadith("niyyah", "en", "Sahih Bukhari", "Sahih")
    assert result == hadiths
    action, prompt, options = calls[0]
    assert action == "hadith"
    assert "primarily Sahih Bukhari" in prompt
    assert "authenticity must be Sahih" in prompt
    assert options["responseSchema"] is ai_service.HADITH_SCHEMA


def test_search_hadith_without_filters(in_process):
    calls = in_process("[]")
    assert ai_service.search_hadith("sabr", "ur", "all", "all") == []
    assert "primarily" not in calls[0][1]
    assert "Urdu" in calls[0][1]


def test_search_hadith_non_list_is_empty(in_process):
    in_process('{"text": "single"}')
    assert ai_service.search_hadith("sabr") == []


def test_search_hadith_propagates_backend_failure(in_process):
    in_process(ValueError("quota"))
    with pytest.raises(ai_service.BackendError):
        ai_service.search_hadith("sabr")


def test_daily_content_failures_fall_back(in_process):
    in_process(ValueError("down"))
    assert ai_service.get_daily_verse("en") is None
    assert ai_service.get_daily_adhkar("en") == []


def test_daily_adhkar_prompt_carries_date(in_process):
    adhkar = [{"id": 1, "arabic": "سُبْحَانَ ٱللَّٰهِ", "translation": "Glory be to Allah"}]
    calls = in_process(json.dumps(adhkar, ensure_ascii=False))
    assert ai_service.get_daily_adhkar("en", today=date(2026, 10, 19)) == adhkar
    assert "Date: Mon Oct 19 2026" in calls[0][1]


def test_load_daily_content(in_process):
    verse = {"text": "إِنَّ مَعَ ٱلْعُسْرِ يُسْرًا", "translation": "With hardship comes ease",
             "surah": "Ash-Sharh", "number": 6}
    in_process(json.dumps(verse, ensure_ascii=False))
    daily_verse, adhkar = ai_service.load_daily_content("en")
    assert daily_verse == verse
    # an object is not a valid adhkar list
    assert adhkar == []


def test_share_urls():
    hadith = {"text": "Smiling is charity", "source": "Tirmidhi", "narrator": "Abu Dharr"}
    whatsapp = ai_service.share_url("wa", hadith, "en")
    assert whatsapp.startswith("https://wa.me/?text=")
    assert "Source: Tirmidhi" in unquote(whatsapp)
    assert ai_service.share_url("tw", hadith, "en").startswith("https://twitter.com/intent/tweet?text=")
    facebook = ai_service.share_url("fb", hadith, "en")
    assert facebook.startswith("https://www.facebook.com/sharer/sharer.php?u=")
    with pytest.raises(ValueError):
        ai_service.share_url("mail", hadith)
