"""
单词信息聚合服务 - 单元测试
"""

import asyncio
from datetime import datetime, timedelta

import pytest

from models.fetch_result import FetchResult
from models.word_info_models import PhrasePair
from services.word_info.word_cache import WordCache
from services.word_info.word_info_service import WordInfoService


class FakeClock:
    def __init__(self):
        self.now = datetime(2025, 1, 20, 8, 0, 0)

    def __call__(self):
        return self.now


class FakeTranslationFetcher:
    def __init__(self, result=None, error=None):
        self.result = result or FetchResult.ok(["casa", "lar"], "reverso")
        self.error = error
        self.calls = 0

    async def fetch(self, word):
        self.calls += 1
        if self.error:
            raise self.error
        return self.result


class FakePhraseSource:
    def __init__(self, phrases=None):
        self.phrases = phrases if phrases is not None else [
            PhrasePair(english="My house.", portuguese="Minha casa.")
        ]
        self.calls = 0

    async def fetch(self, word):
        self.calls += 1
        return FetchResult.ok(self.phrases, "reverso")


class FakeIpaDictionary:
    def __init__(self, entries=None):
        self.entries = entries if entries is not None else {"house": ("/ˈhaʊs/", "raus")}

    def get_details_of_transcription(self, word):
        return self.entries.get(word)


class FakeAudio:
    def __init__(self, error=None, delay=0):
        self.error = error
        self.delay = delay
        self.calls = 0
        self.completed = False

    async def synthesize(self, text):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        self.completed = True
        return "/static/audio.mp3"


def make_service(translation=None, phrases=None, ipa=None, audio=None, clock=None):
    return WordInfoService(
        cache=WordCache(ttl=timedelta(hours=24), clock=clock or FakeClock()),
        translation_fetcher=translation or FakeTranslationFetcher(),
        phrase_source=phrases or FakePhraseSource(),
        ipa_dictionary=ipa or FakeIpaDictionary(),
        audio_synthesizer=audio or FakeAudio(),
    )


# ============ 聚合 测试 ============

@pytest.mark.asyncio
async def test_aggregates_all_sources():
    """测试合并四个数据源"""
    service = make_service()

    info = await service.get_info_word("  House ")

    assert info.word == "house"
    assert info.translation == ("casa", "lar")
    assert info.phrases[0].english == "My house."
    assert info.ipa == "/ˈhaʊs/"
    assert info.pronounce == "raus"
    assert info.audio == "/static/audio.mp3"


@pytest.mark.asyncio
async def test_audio_failure_is_isolated():
    """测试音频失败不影响其他字段"""
    service = make_service(audio=FakeAudio(error=RuntimeError("gtts down")))

    info = await service.get_info_word("house")

    assert info.audio is None
    assert info.translation == ("casa", "lar")


@pytest.mark.asyncio
async def test_missing_ipa_uses_sentinels():
    """测试词典未收录时使用占位值"""
    service = make_service(ipa=FakeIpaDictionary(entries={}))

    info = await service.get_info_word("house")

    assert info.ipa == "IPA indisponível"
    assert info.pronounce == "Pronúncia indisponível"


@pytest.mark.asyncio
async def test_empty_phrases_allowed():
    """测试例句可以为空"""
    service = make_service(phrases=FakePhraseSource(phrases=[]))

    info = await service.get_info_word("house")

    assert info.phrases == ()
    assert info.translation


@pytest.mark.asyncio
async def test_unexpected_error_returns_default():
    """测试异常时返回默认结果且不缓存"""
    translation = FakeTranslationFetcher(error=RuntimeError("boom"))
    service = make_service(translation=translation)

    info = await service.get_info_word("House")

    assert info.word == "house"
    assert info.translation == ("Tradução indisponível",)
    assert info.phrases == ()
    assert info.audio is None
    assert service.cache.size() == 0


# ============ 缓存 测试 ============

@pytest.mark.asyncio
async def test_second_call_hits_cache():
    """测试24小时内第二次查询不再请求网络"""
    translation = FakeTranslationFetcher()
    phrases = FakePhraseSource()
    audio = FakeAudio()
    service = make_service(translation=translation, phrases=phrases, audio=audio)

    first = await service.get_info_word("house")
    second = await service.get_info_word("HOUSE")

    assert second is first
    assert translation.calls == 1
    assert phrases.calls == 1
    assert audio.calls == 1


@pytest.mark.asyncio
async def test_expired_entry_is_refetched():
    """测试缓存过期后重新获取"""
    clock = FakeClock()
    translation = FakeTranslationFetcher()
    service = make_service(translation=translation, clock=clock)

    first = await service.get_info_word("house")
    clock.now += timedelta(hours=24)
    second = await service.get_info_word("house")

    assert translation.calls == 2
    assert second is not first
    assert second == first


@pytest.mark.asyncio
async def test_failed_branch_waits_for_other_branches():
    """测试某个分支异常时，其他分支完成后才返回默认结果"""
    audio = FakeAudio(delay=0.05)
    translation = FakeTranslationFetcher(error=RuntimeError("boom"))
    service = make_service(translation=translation, audio=audio)

    info = await service.get_info_word("house")

    assert info.translation == ("Tradução indisponível",)
    assert audio.completed
    assert service.cache.size() == 0


@pytest.mark.asyncio
async def test_cached_result_cannot_be_modified():
    """测试调用方无法修改缓存中的结果"""
    service = make_service()

    first = await service.get_info_word("house")
    with pytest.raises(AttributeError):
        first.translation.append("HACKED")
    with pytest.raises(AttributeError):
        first.phrases.append(first.phrases[0])

    second = await service.get_info_word("house")

    assert second.translation == ("casa", "lar")
    assert len(second.phrases) == 1
