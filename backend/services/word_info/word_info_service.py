# -*- coding: utf-8 -*-
"""
单词信息聚合服务 - WordCoach V1.0

流程：
1. 规范化单词并检查缓存
2. 并发获取翻译、例句、IPA音标、发音音频
3. 合并结果（降级数据替换为占位值）并缓存
4. 任何异常都返回默认结果，不向调用方抛出
"""

import asyncio
import logging
from typing import Optional, Tuple

from models.fetch_result import FetchResult
from models.word_info_models import (
    IPA_UNAVAILABLE,
    PRONOUNCE_UNAVAILABLE,
    TRANSLATION_UNAVAILABLE,
    PhrasePair,
    WordInfo,
)
from services.vocabulary.ipa_dictionary import IpaDictionary
from services.word_info.audio_synthesizer import AudioSynthesizer
from services.word_info.phrase_source import PhraseSource
from services.word_info.translation_fetcher import TranslationFetcher
from services.word_info.word_cache import WordCache, normalize_word

logger = logging.getLogger(__name__)


class WordInfoService:
    """单词信息聚合服务"""

    def __init__(
        self,
        cache: WordCache,
        translation_fetcher: TranslationFetcher,
        phrase_source: PhraseSource,
        ipa_dictionary: IpaDictionary,
        audio_synthesizer: Optional[AudioSynthesizer],
    ):
        """
        初始化聚合服务

        Args:
            cache: 单词缓存
            translation_fetcher: 翻译获取器
            phrase_source: 例句来源（在线或内置表）
            ipa_dictionary: IPA词典
            audio_synthesizer: 发音合成器，None表示不生成音频
        """
        self.cache = cache
        self.translation_fetcher = translation_fetcher
        self.phrase_source = phrase_source
        self.ipa_dictionary = ipa_dictionary
        self.audio_synthesizer = audio_synthesizer

    async def _fetch_ipa(self, word: str) -> FetchResult[tuple]:
        try:
            details = self.ipa_dictionary.get_details_of_transcription(word)
        except OSError as e:
            logger.error(f"❌ 读取IPA词典失败: {e}")
            return FetchResult.failed(str(e), "ipa-dict")
        if details is None:
            return FetchResult.degraded(
                (IPA_UNAVAILABLE, PRONOUNCE_UNAVAILABLE), "ipa-dict", "词典未收录"
            )
        return FetchResult.ok(details, "ipa-dict")

    async def _fetch_audio(self, word: str) -> FetchResult[str]:
        if self.audio_synthesizer is None:
            return FetchResult.failed("未启用发音合成")
        try:
            return FetchResult.ok(await self.audio_synthesizer.synthesize(word), "gtts")
        except Exception as e:
            logger.warning(f"⚠️ 生成音频失败 '{word}': {e}")
            return FetchResult.failed(str(e), "gtts")

    async def get_info_word(self, word: str) -> WordInfo:
        """
        获取单词完整信息

        Args:
            word: 要查询的英文单词

        Returns:
            WordInfo: 单词信息；出错时返回占位值填充的默认结果
        """
        text = normalize_word(word)

        try:
            cached = self.cache.get(text)
            if cached is not None:
                logger.info(f"✅ 从缓存返回: {text}")
                return cached

            logger.info(f"📖 查询单词信息: {text}")

            results = await asyncio.gather(
                self.translation_fetcher.fetch(text),
                self.phrase_source.fetch(text),
                self._fetch_ipa(text),
                self._fetch_audio(text),
                return_exceptions=True,
            )

            # 所有分支都已结束后再处理异常
            errors = [r for r in results if isinstance(r, BaseException)]
            if errors:
                for error in errors:
                    logger.error(f"❌ 单词信息分支异常 '{text}': {error!r}")
                return WordInfo.unavailable(text)

            translation, phrases, ipa, audio = results

            for name, result in (("translation", translation), ("phrases", phrases),
                                 ("ipa", ipa), ("audio", audio)):
                if not result.is_ok:
                    logger.info(f"ℹ️ {name} 降级 ({result.status.value}): {result.reason}")

            ipa_symbols, pronounce = ipa.value or (IPA_UNAVAILABLE, PRONOUNCE_UNAVAILABLE)
            translations: Tuple[str, ...] = tuple(translation.value or (TRANSLATION_UNAVAILABLE,))
            phrase_pairs: Tuple[PhrasePair, ...] = tuple(phrases.value or ())

            word_info = WordInfo(
                word=text,
                audio=audio.value,
                translation=translations,
                phrases=phrase_pairs,
                ipa=ipa_symbols,
                pronounce=pronounce,
            )

            logger.info(
                f"✅ 单词信息生成完成: {text} "
                f"(翻译 {len(word_info.translation)} 条, 例句 {len(word_info.phrases)} 条, "
                f"音频 {'有' if word_info.audio else '无'})"
            )

            self.cache.set(text, word_info)
            return word_info

        except Exception as e:
            logger.exception(f"❌ 获取单词信息异常 '{text}': {e}")
            return WordInfo.unavailable(text)
