"""Tests for Quran text fetching, verse combination and audio URLs."""

from __future__ import annotations

import pytest
import requests

from noorhub import quran
from noorhub.surahs import SURAHS


@pytest.fixture(autouse=True)
def fresh_cache():
    quran.fetch_surah.cache_clear()
    quran.fetch_juz.cache_clear()
    yield
    quran.fetch_surah.cache_clear()
    quran.fetch_juz.cache_clear()


def ayah(global_number, in_surah, text, surah_name="الفاتحة"):
    return {"number": global_number, "numberInSurah": in_surah, "text": text, "surah": {"name": surah_name}}


def fake_api(responses):
    def fetch(url, params=None, timeout=None):
        for suffix, payload in responses.items():
            if url.endswith(suffix):
                if isinstance(payload, Exception):
                    raise payload
                return payload
        raise AssertionError(f"unexpected url {url}")
    return fetch


def test_surah_table_is_complete():
    assert len(SURAHS) == 114
    assert [s.id for s in SURAHS] == list(range(1, 115))
    assert sum(s.verses for s in SURAHS) == 6236


def test_fetch_surah_zips_arabic_and_translation(monkeypatch):
    monkeypatch.setattr(quran, "fetch_json", fake_api({
        "surah/1/quran-uthmani": {"code": 200, "data": {"ayahs": [ayah(1, 1, "بِسْمِ"), ayah(2, 2, "ٱلْحَمْدُ")]}},
        "surah/1/ur.jalandhry": {"code": 200, "data": {"ayahs": [{"text": "شروع اللہ کا نام لے کر"}]}},
    }))
    verses = quran.fetch_surah(1, "ur")
    assert [v.number for v in verses] == [1, 2]
    assert verses[0].translation == "شروع اللہ کا نام لے کر"
    assert verses[1].translation == quran.MISSING_TRANSLATION
    assert verses[1].audio == "https://cdn.islamic.network/quran/audio/128/ar.alafasy/2.mp3"
    assert verses[0].surah_name is None


def test_fetch_surah_uses_english_edition(monkeypatch):
    monkeypatch.setattr(quran, "fetch_json", fake_api({
        "surah/112/quran-uthmani": {"code": 200, "data": {"ayahs": [ayah(6222, 1, "قُلْ")]}},
        "surah/112/en.sahih": {"code": 200, "data": {"ayahs": [{"text": "Say, He is Allah"}]}},
    }))
    assert quran.fetch_surah(112, "en")[0].translation == "Say, He is Allah"


def test_fetch_juz_keeps_surah_names(monkeypatch):
    monkeypatch.setattr(quran, "fetch_json", fake_api({
        "juz/30/quran-uthmani": {"code": 200, "data": {"ayahs": [ayah(5673, 1, "عَمَّ", "سورة النبأ")]}},
        "juz/30/ur.jalandhry": {"code": 200, "data": {"ayahs": [{"text": "یہ لوگ"}]}},
    }))
    verses = quran.fetch_juz(30)
    assert verses[0].surah_name == "سورة النبأ"


@pytest.mark.parametrize("responses", [
    {"quran-uthmani": {"code": 404, "data": "Not found"}, "ur.jalandhry": {"code": 200, "data": {"ayahs": []}}},
    {"quran-uthmani": {"code": 200, "data": {"ayahs": []}}, "ur.jalandhry": {"code": 200, "data": {"ayahs": []}}},
    {"quran-uthmani": requests.ConnectionError("offline"), "ur.jalandhry": {"code": 200, "data": {}}},
])
def test_fetch_surah_errors(monkeypatch, responses):
    monkeypatch.setattr(quran, "fetch_json", fake_api(responses))
    with pytest.raises(quran.QuranServiceError):
        quran.fetch_surah(2)


@pytest.mark.parametrize("body", [["oops"], "Bad Gateway", {"code": 200, "data": ["x"]}])
def test_non_object_bodies_are_service_errors(monkeypatch, body):
    monkeypatch.setattr(quran, "fetch_json", lambda url, params=None, timeout=None: body)
    with pytest.raises(quran.QuranServiceError):
        quran.fetch_surah(3)


@pytest.mark.parametrize("bad_ayah", [
    {"number": 1, "text": "x"},
    {"numberInSurah": 1, "text": "x"},
    {"number": 1, "numberInSurah": 1},
    "not an ayah",
])
def test_malformed_ayahs_are_service_errors(monkeypatch, bad_ayah):
    monkeypatch.setattr(quran, "fetch_json", fake_api({
        "surah/4/quran-uthmani": {"code": 200, "data": {"ayahs": [bad_ayah]}},
        "surah/4/ur.jalandhry": {"code": 200, "data": {"ayahs": [{"text": "t"}]}},
    }))
    with pytest.raises(quran.QuranServiceError):
        quran.fetch_surah(4)


def test_malformed_translation_entry_is_a_service_error(monkeypatch):
    monkeypatch.setattr(quran, "fetch_json", fake_api({
        "surah/5/quran-uthmani": {"code": 200, "data": {"ayahs": [ayah(670, 1, "يَا")]}},
        "surah/5/ur.jalandhry": {"code": 200, "data": {"ayahs": ["plain string"]}},
    }))
    with pytest.raises(quran.QuranServiceError):
        quran.fetch_surah(5)


def test_ids_are_validated():
    with pytest.raises(ValueError):
        quran.fetch_surah(115)
    with pytest.raises(ValueError):
        quran.fetch_juz(0)


def test_search_surahs():
    assert quran.search_surahs("")[0].id == 1
    assert [s.id for s in quran.search_surahs("cow")] == [2]
    assert [s.id for s in quran.search_surahs("112")] == [112]
    assert quran.search_surahs("nothing like this") == []


def test_surah_audio_url():
    assert quran.surah_audio_url(36) == "https://cdn.islamic.network/quran/audio-surah/128/ar.alafasy/36.mp3"
