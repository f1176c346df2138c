# -*- coding: utf-8 -*-
"""
Reverso Context客户端 - WordCoach V1.0
查询单词的葡萄牙语翻译和双语上下文例句
"""

import logging
import re
import httpx
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")


class ReversoResponseError(ValueError):
    """Reverso返回了无法识别的数据结构"""


class ReversoClient:
    """Reverso Context API客户端"""

    def __init__(
        self,
        context_url: str,
        source_lang: str = "en",
        target_lang: str = "pt",
        timeout: float = 15,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化Reverso客户端

        Args:
            context_url: bst-query-service 接口地址
            source_lang: 源语言
            target_lang: 目标语言
            timeout: 请求超时时间（秒）
            transport: 自定义httpx传输层（测试用）
        """
        self.context_url = context_url
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.timeout = timeout
        self._transport = transport
        self.headers = {
            "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko)",
            "Content-Type": "application/json; charset=UTF-8",
        }

    async def _query(self, word: str) -> Dict:
        """调用上下文查询接口，返回JSON对象"""
        payload = {
            "source_text": word,
            "target_text": "",
            "source_lang": self.source_lang,
            "target_lang": self.target_lang,
            "npage": 1,
            "mode": 0,
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(self.context_url, json=payload, headers=self.headers)
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, dict):
            raise ReversoResponseError(f"响应不是JSON对象: {type(data).__name__}")
        return data

    async def get_translation(self, word: str) -> List[str]:
        """
        查询单词翻译

        Args:
            word: 英文单词

        Returns:
            List[str]: 翻译列表（可能为空）

        Raises:
            httpx.HTTPError: 网络错误或非2xx响应
            ReversoResponseError: 响应结构异常
        """
        data = await self._query(word)
        entries = data.get("dictionary_entry_list")
        if not isinstance(entries, list):
            raise ReversoResponseError("缺少 dictionary_entry_list")

        terms = [
            _TAG_RE.sub("", entry["term"]).strip()
            for entry in entries
            if isinstance(entry, dict) and isinstance(entry.get("term"), str)
        ]
        logger.info(f"🌐 [Reverso] 翻译 '{word}': {len(terms)} 条")
        return [term for term in terms if term]

    async def get_context(self, word: str) -> List[Dict[str, str]]:
        """
        查询双语上下文例句

        Args:
            word: 英文单词

        Returns:
            List[Dict]: 原始例句列表 [{"source": 英文, "target": 葡文}]，字段可能为空

        Raises:
            httpx.HTTPError: 网络错误或非2xx响应
            ReversoResponseError: 响应结构异常
        """
        data = await self._query(word)
        examples = data.get("list")
        if not isinstance(examples, list):
            raise ReversoResponseError("缺少 list")

        result = []
        for example in examples:
            if not isinstance(example, dict):
                continue
            result.append({
                "source": _TAG_RE.sub("", example.get("s_text") or "").strip(),
                "target": _TAG_RE.sub("", example.get("t_text") or "").strip(),
            })

        logger.info(f"🌐 [Reverso] 例句 '{word}': {len(result)} 条")
        return result
