# -*- coding: utf-8 -*-
"""
MyMemory翻译客户端 - WordCoach V1.0
Reverso不可用时的备用翻译源
"""

import logging
import httpx
from typing import Optional

logger = logging.getLogger(__name__)


class MyMemoryClient:
    """MyMemory翻译API客户端"""

    def __init__(
        self,
        base_url: str,
        email: str = "",
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化MyMemory客户端

        Args:
            base_url: API地址
            email: 可选邮箱（提高免费额度）
            timeout: 请求超时时间（秒）
            transport: 自定义httpx传输层（测试用）
        """
        self.base_url = base_url
        self.email = email
        self.timeout = timeout
        self._transport = transport

    async def translate(self, text: str, source: str = "en", target: str = "pt") -> Optional[str]:
        """
        翻译文本

        Args:
            text: 要翻译的文本
            source: 源语言
            target: 目标语言

        Returns:
            Optional[str]: 翻译结果，服务返回错误状态时为None

        Raises:
            httpx.HTTPError: 网络错误或非2xx响应
        """
        params = {
            "q": text,
            "langpair": f"{source}|{target}",
        }
        if self.email:
            params["de"] = self.email

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(self.base_url, params=params)
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, dict) or data.get("responseStatus") != 200:
            logger.warning(f"⚠️ [MyMemory] 翻译失败: {text}")
            return None

        translated = (data.get("responseData") or {}).get("translatedText")
        if not isinstance(translated, str) or not translated.strip():
            return None

        logger.info(f"🌐 [MyMemory] 翻译 '{text}' -> '{translated}'")
        return translated.strip()
