# -*- coding: utf-8 -*-
"""
每日单词服务 - WordCoach V1.0

流程：
1. 当天已生成过则直接返回缓存文件中的记录
2. 最多尝试N个随机单词：音标 -> 英文释义 -> 葡语翻译
3. 全部失败时使用固定的默认单词
4. 覆盖写入缓存文件后返回
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from models.daily_word_models import PHONETIC_UNAVAILABLE, DailyWordRecord
from services.daily_word.daily_word_store import DailyWordStore
from services.daily_word.definition_translator import DefinitionTranslator
from services.daily_word.dictionary_api_client import DictionaryApiClient
from services.vocabulary.ipa_dictionary import IpaDictionary

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y/%m/%d"

FALLBACK_WORD = "welcome"
FALLBACK_DEFINITION = "An expression of greeting"
FALLBACK_PHONETIC = "/ˈwelkəm/"
FALLBACK_TRANSLATED_DEFINITION = "Uma expressão de cumprimento"


def fallback_record(date: str) -> DailyWordRecord:
    """固定的默认每日单词"""
    return DailyWordRecord(
        date=date,
        daily_word=FALLBACK_WORD,
        definition=FALLBACK_DEFINITION,
        phonetic=FALLBACK_PHONETIC,
        translated_definition=FALLBACK_TRANSLATED_DEFINITION,
    )


class DailyWordService:
    """每日单词生成服务"""

    def __init__(
        self,
        store: DailyWordStore,
        ipa_dictionary: IpaDictionary,
        dictionary_api: DictionaryApiClient,
        translator: DefinitionTranslator,
        max_attempts: int = 3,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        初始化每日单词服务

        Args:
            store: 缓存文件存储
            ipa_dictionary: 随机单词和音标来源
            dictionary_api: 英文释义API
            translator: 释义翻译器
            max_attempts: 最多尝试的候选单词数
            clock: 时间来源（本地时间），测试时可注入
        """
        self.store = store
        self.ipa_dictionary = ipa_dictionary
        self.dictionary_api = dictionary_api
        self.translator = translator
        self.max_attempts = max_attempts
        self._clock = clock

    def today(self) -> str:
        """今天的日期字符串 YYYY/MM/DD"""
        return self._clock().strftime(DATE_FORMAT)

    def get_cached_daily_word(self) -> Optional[DailyWordRecord]:
        """读取今天已生成的每日单词，没有或已过期返回None"""
        cached = self.store.load()
        if cached is None:
            return None

        if cached.date != self.today():
            logger.info(f"ℹ️ 每日单词缓存已过期: {cached.date}")
            return None

        logger.info(f"✓ 使用缓存的每日单词: \"{cached.daily_word}\"")
        return cached

    async def _try_candidate(self, date: str) -> Optional[DailyWordRecord]:
        """尝试一个随机单词，查不到释义返回None"""
        word = self.ipa_dictionary.generate_random_word()

        details = self.ipa_dictionary.get_details_of_transcription(word)
        ipa_symbols, phonetic_transcription = details or (None, None)
        phonetic = phonetic_transcription or ipa_symbols or PHONETIC_UNAVAILABLE

        definition = await self.dictionary_api.get_definition(word)
        if not definition:
            logger.info(f"⚠ 单词 \"{word}\" 没有查到释义，尝试下一个...")
            return None

        translated = await self.translator.translate(definition)
        logger.info(f"✓ 每日单词生成: \"{word}\"")
        return DailyWordRecord(
            date=date,
            daily_word=word,
            definition=definition,
            phonetic=phonetic,
            translated_definition=translated,
        )

    async def generate_daily_word(self) -> DailyWordRecord:
        """
        获取今天的每日单词

        Returns:
            DailyWordRecord: 每日单词记录；任何异常都返回默认单词
        """
        try:
            cached = self.get_cached_daily_word()
            if cached is not None:
                return cached

            logger.info("🔄 正在生成新的每日单词...")
            today = self.today()
            record = None

            for attempt in range(1, self.max_attempts + 1):
                try:
                    record = await self._try_candidate(today)
                except Exception as e:
                    logger.warning(f"⚠ 第 {attempt} 次尝试失败: {e}")
                    continue
                if record is not None:
                    break

            if record is None:
                logger.warning("⚠ 所有候选单词都失败，使用默认单词")
                record = fallback_record(today)

            self.store.save(record)
            return record

        except Exception as e:
            logger.exception(f"❌ 生成每日单词异常: {e}")
            return fallback_record(self.today())
