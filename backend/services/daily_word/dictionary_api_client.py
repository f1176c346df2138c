# -*- coding: utf-8 -*-
"""
Free Dictionary API客户端 - WordCoach V1.0
查询英文单词的英文释义，未收录的单词返回404
"""

import logging
import httpx
from typing import Any, Optional

logger = logging.getLogger(__name__)


def extract_first_definition(entries: Any) -> Optional[str]:
    """
    提取第一条释义

    Args:
        entries: API返回的JSON（单词条目列表）

    Returns:
        Optional[str]: 第一个词条中第一条释义，结构异常或为空时返回None
    """
    if not isinstance(entries, list) or not entries or not isinstance(entries[0], dict):
        return None

    for meaning in entries[0].get("meanings") or []:
        if not isinstance(meaning, dict):
            continue
        for definition in meaning.get("definitions") or []:
            if isinstance(definition, dict):
                text = definition.get("definition")
                if isinstance(text, str) and text.strip():
                    return text.strip()
    return None


class DictionaryApiClient:
    """Free Dictionary API客户端"""

    def __init__(self, base_url: str, timeout: float = 5, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        初始化客户端

        Args:
            base_url: API基础URL（不含单词）
            timeout: 请求超时时间（秒）
            transport: 自定义httpx传输层（测试用）
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def get_word_info(self, word: str) -> Optional[Any]:
        """
        查询单词条目

        Args:
            word: 英文单词

        Returns:
            Optional[Any]: API返回的JSON；单词未收录、超时或网络错误时返回None
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(f"{self.base_url}/{word}")

            if response.status_code == 404:
                # 单词未收录，不是错误
                logger.debug(f"📕 词典未收录: {word}")
                return None

            response.raise_for_status()
            return response.json()

        except httpx.TimeoutException as e:
            logger.warning(f"⏱️ 词典API超时: {word} ({e})")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"⚠️ 词典API请求失败: {word} ({e})")
            return None

    async def get_definition(self, word: str) -> Optional[str]:
        """查询单词的第一条释义，查不到返回None"""
        return extract_first_definition(await self.get_word_info(word))
