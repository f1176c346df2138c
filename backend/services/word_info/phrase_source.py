# -*- coding: utf-8 -*-
"""
例句来源 - WordCoach V1.0

两种实现，由配置在启动时选择:
- LivePhraseSource: Reverso上下文例句（带重试和超时），不足时回退到内置表
- StaticPhraseSource: 仅使用内置例句表
"""

import asyncio
import logging
from typing import Dict, List, Protocol

from models.fetch_result import FetchResult
from models.word_info_models import PhrasePair
from services.word_info.reverso_client import ReversoClient
from services.word_info.static_tables import STATIC_PHRASES, static_phrases
from services.word_info.translation_fetcher import UPSTREAM_ERRORS
from utils.retry_policy import RetryPolicy

logger = logging.getLogger(__name__)


def build_phrase_pairs(examples: List[Dict[str, str]]) -> List[PhrasePair]:
    """将原始例句转换为例句对，丢弃英文或葡文为空的条目"""
    pairs = []
    for example in examples:
        english = (example.get("source") or "").strip()
        portuguese = (example.get("target") or "").strip()
        if english and portuguese:
            pairs.append(PhrasePair(english=english, portuguese=portuguese))
    return pairs


class PhraseSource(Protocol):
    """例句来源接口"""

    async def fetch(self, word: str) -> FetchResult[List[PhrasePair]]:
        ...


class StaticPhraseSource:
    """内置例句表"""

    async def fetch(self, word: str) -> FetchResult[List[PhrasePair]]:
        source = "static" if word in STATIC_PHRASES else "template"
        return FetchResult.degraded(static_phrases(word), source, "使用内置例句")


class LivePhraseSource:
    """Reverso在线例句"""

    def __init__(
        self,
        reverso: ReversoClient,
        retry_policy: RetryPolicy,
        timeout: float = 15,
        min_phrases: int = 1,
    ):
        """
        初始化在线例句来源

        Args:
            reverso: Reverso客户端
            retry_policy: 重试策略
            timeout: 单次请求超时（秒）
            min_phrases: 有效例句少于该数量时重试，用尽后回退到内置表
        """
        self.reverso = reverso
        self.retry_policy = retry_policy
        self.timeout = timeout
        self.min_phrases = min_phrases
        self.fallback = StaticPhraseSource()

    async def fetch(self, word: str) -> FetchResult[List[PhrasePair]]:
        """
        获取例句

        Args:
            word: 已规范化的单词

        Returns:
            FetchResult[List[PhrasePair]]: 在线例句足够时为OK，否则为内置表的DEGRADED结果
        """
        async def attempt() -> List[Dict[str, str]]:
            return await asyncio.wait_for(self.reverso.get_context(word), timeout=self.timeout)

        try:
            examples = await self.retry_policy.run(
                attempt,
                accept=lambda examples: len(build_phrase_pairs(examples)) >= self.min_phrases,
                name=f"Reverso例句 '{word}'",
            )
        except (asyncio.TimeoutError,) + UPSTREAM_ERRORS as e:
            logger.warning(f"⚠️ 在线例句获取失败 '{word}': {e}")
            result = await self.fallback.fetch(word)
            return FetchResult.degraded(result.value, result.source, f"reverso: {e}")

        phrases = build_phrase_pairs(examples)
        logger.info(f"📝 有效例句 '{word}': {len(phrases)}/{len(examples)}")

        if len(phrases) < self.min_phrases:
            result = await self.fallback.fetch(word)
            return FetchResult.degraded(
                result.value, result.source, f"reverso: 有效例句不足 ({len(phrases)})"
            )

        return FetchResult.ok(phrases, "reverso")
