# -*- coding: utf-8 -*-
"""
翻译获取 - WordCoach V1.0

按顺序尝试:
1. Reverso（主翻译源）
2. MyMemory（备用翻译源）
3. 内置翻译表 / 模板占位
"""

import logging
import httpx
from typing import List, Optional

from models.fetch_result import FetchResult
from services.word_info.mymemory_client import MyMemoryClient
from services.word_info.reverso_client import ReversoClient
from services.word_info.static_tables import STATIC_TRANSLATIONS, static_translation

logger = logging.getLogger(__name__)

# 上游不可用/响应异常时的错误类型
UPSTREAM_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError)


def dedupe(items: List[str]) -> List[str]:
    """去重并保持首次出现的顺序"""
    return list(dict.fromkeys(items))


class TranslationFetcher:
    """带回退链的翻译获取器"""

    def __init__(self, reverso: Optional[ReversoClient], mymemory: Optional[MyMemoryClient]):
        """
        初始化翻译获取器

        Args:
            reverso: 主翻译源，None表示未启用
            mymemory: 备用翻译源，None表示未启用
        """
        self.reverso = reverso
        self.mymemory = mymemory

    async def fetch(self, word: str) -> FetchResult[List[str]]:
        """
        获取单词翻译

        Args:
            word: 已规范化的单词

        Returns:
            FetchResult[List[str]]: 在线源成功为OK，回退到内置表为DEGRADED；结果始终非空
        """
        reasons = []

        if self.reverso is not None:
            try:
                translations = dedupe(await self.reverso.get_translation(word))
                if translations:
                    return FetchResult.ok(translations, "reverso")
                reasons.append("reverso: 空结果")
            except UPSTREAM_ERRORS as e:
                logger.warning(f"⚠️ Reverso翻译失败 '{word}': {e}")
                reasons.append(f"reverso: {e}")

        if self.mymemory is not None:
            try:
                translated = await self.mymemory.translate(word)
                if translated:
                    return FetchResult.ok([translated], "mymemory")
                reasons.append("mymemory: 空结果")
            except UPSTREAM_ERRORS as e:
                logger.warning(f"⚠️ MyMemory翻译失败 '{word}': {e}")
                reasons.append(f"mymemory: {e}")

        source = "static" if word in STATIC_TRANSLATIONS else "template"
        return FetchResult.degraded(static_translation(word), source, "; ".join(reasons) or "无在线翻译源")
