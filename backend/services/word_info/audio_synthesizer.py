# -*- coding: utf-8 -*-
"""
单词发音合成 - WordCoach V1.0
使用gTTS生成单词发音，写入固定路径的音频文件（每次合成覆盖）
"""

import asyncio
import logging
from pathlib import Path

from gtts import gTTS

logger = logging.getLogger(__name__)


class AudioSynthesizer:
    """gTTS发音合成器"""

    def __init__(self, audio_file: str, public_url: str, lang: str = "en", tld: str = "com"):
        """
        初始化合成器

        Args:
            audio_file: 音频文件保存路径
            public_url: 前端访问该文件的URL
            lang: 发音语言
            tld: Google域名后缀（决定口音）
        """
        self.audio_file = Path(audio_file)
        self.public_url = public_url
        self.lang = lang
        self.tld = tld

    def _synthesize_sync(self, text: str):
        """同步合成并保存（gTTS为阻塞调用）"""
        self.audio_file.parent.mkdir(parents=True, exist_ok=True)
        self.audio_file.unlink(missing_ok=True)
        gTTS(text=text, lang=self.lang, tld=self.tld).save(str(self.audio_file))

    async def synthesize(self, text: str) -> str:
        """
        合成语音

        Args:
            text: 要合成的文本（单词或短语）

        Returns:
            str: 音频文件的访问URL

        Raises:
            Exception: gTTS请求或文件写入失败
        """
        logger.info(f"🔊 [TTS] 合成语音: '{text}'")
        await asyncio.to_thread(self._synthesize_sync, text)
        logger.info(f"✅ [TTS] 合成成功: {self.audio_file}")
        return self.public_url
