# -*- coding: utf-8 -*-
"""
释义翻译 - WordCoach V1.0
使用 deep-translator 的 GoogleTranslator 将英文释义翻译为葡萄牙语
"""

import asyncio
import logging
from typing import Optional

from deep_translator import GoogleTranslator

logger = logging.getLogger(__name__)


class DefinitionTranslator:
    """释义翻译器"""

    def __init__(self, source_lang: str = "auto", target_lang: str = "pt"):
        self.source_lang = source_lang
        self.target_lang = target_lang

    def _translate_sync(self, text: str) -> Optional[str]:
        return GoogleTranslator(source=self.source_lang, target=self.target_lang).translate(text)

    async def translate(self, text: Optional[str]) -> Optional[str]:
        """
        翻译文本

        Args:
            text: 英文释义

        Returns:
            Optional[str]: 葡语译文，文本为空或翻译失败返回None
        """
        if not text:
            return None
        try:
            translated = await asyncio.to_thread(self._translate_sync, text)
        except Exception as e:
            logger.warning(f"⚠️ 翻译释义失败: {e}")
            return None

        return translated or None
