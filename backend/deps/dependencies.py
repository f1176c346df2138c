# -*- coding: utf-8 -*-
"""
依赖项 - WordCoach V1.0
按配置组装服务实例，供 FastAPI 路由依赖注入
"""

import asyncio
import logging
from datetime import timedelta
from functools import lru_cache
from typing import Optional

from config.settings import settings
from services.daily_word.daily_word_service import DailyWordService
from services.daily_word.daily_word_store import DailyWordStore
from services.daily_word.definition_translator import DefinitionTranslator
from services.daily_word.dictionary_api_client import DictionaryApiClient
from services.vocabulary.ipa_dictionary import IpaDictionary
from services.word_info.audio_synthesizer import AudioSynthesizer
from services.word_info.mymemory_client import MyMemoryClient
from services.word_info.phrase_source import LivePhraseSource, PhraseSource, StaticPhraseSource
from services.word_info.reverso_client import ReversoClient
from services.word_info.translation_fetcher import UPSTREAM_ERRORS, TranslationFetcher
from services.word_info.word_cache import WordCache
from services.word_info.word_info_service import WordInfoService
from utils.api_config_loader import api_config_loader
from utils.retry_policy import RetryPolicy, fixed_backoff

logger = logging.getLogger(__name__)


@lru_cache
def get_ipa_dictionary() -> IpaDictionary:
    """获取IPA词典（全局共享）"""
    return IpaDictionary(settings.ipa_dict_file or None)


def _build_reverso_client() -> Optional[ReversoClient]:
    if not api_config_loader.is_reverso_enabled():
        return None
    config = api_config_loader.get_reverso_config()
    return ReversoClient(
        context_url=config['context_url'],
        source_lang=config.get('source_lang', 'en'),
        target_lang=config.get('target_lang', 'pt'),
        timeout=config.get('timeout', 15),
    )


def _build_mymemory_client() -> Optional[MyMemoryClient]:
    if not api_config_loader.is_mymemory_enabled():
        return None
    config = api_config_loader.get_mymemory_config()
    return MyMemoryClient(
        base_url=config['base_url'],
        email=config.get('email', ''),
        timeout=config.get('timeout', 10),
    )


def _build_phrase_source(reverso: Optional[ReversoClient]) -> PhraseSource:
    if settings.phrase_source == "static" or reverso is None:
        logger.info("📝 例句来源: 内置例句表")
        return StaticPhraseSource()

    logger.info("📝 例句来源: Reverso在线例句")
    return LivePhraseSource(
        reverso=reverso,
        retry_policy=RetryPolicy(
            max_attempts=settings.phrase_max_attempts,
            backoff=fixed_backoff(settings.phrase_retry_delay),
            retry_on=(asyncio.TimeoutError,) + UPSTREAM_ERRORS,
        ),
        timeout=settings.phrase_timeout,
        min_phrases=settings.min_phrases,
    )


@lru_cache
def get_word_info_service() -> WordInfoService:
    """获取单词信息聚合服务（全局单例，缓存随进程存在）"""
    reverso = _build_reverso_client()
    gtts_config = api_config_loader.get_gtts_config()

    return WordInfoService(
        cache=WordCache(ttl=timedelta(seconds=settings.word_cache_ttl_seconds)),
        translation_fetcher=TranslationFetcher(reverso, _build_mymemory_client()),
        phrase_source=_build_phrase_source(reverso),
        ipa_dictionary=get_ipa_dictionary(),
        audio_synthesizer=AudioSynthesizer(
            audio_file=settings.audio_file,
            public_url=settings.audio_public_url,
            lang=gtts_config.get('lang', 'en'),
            tld=gtts_config.get('tld', 'com'),
        ),
    )


@lru_cache
def get_daily_word_service() -> DailyWordService:
    """获取每日单词服务（全局单例）"""
    dictionary_config = api_config_loader.get_free_dictionary_config()
    translate_config = api_config_loader.get_google_translate_config()

    return DailyWordService(
        store=DailyWordStore(settings.daily_word_file),
        ipa_dictionary=get_ipa_dictionary(),
        dictionary_api=DictionaryApiClient(
            base_url=dictionary_config.get('base_url', 'https://api.dictionaryapi.dev/api/v2/entries/en'),
            timeout=dictionary_config.get('timeout', 5),
        ),
        translator=DefinitionTranslator(
            source_lang=translate_config.get('source_lang', 'auto'),
            target_lang=translate_config.get('target_lang', 'pt'),
        ),
        max_attempts=settings.daily_word_max_attempts,
    )
