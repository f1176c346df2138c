"""
WordCoach Backend Configuration Settings
配置管理模块，负责加载环境变量和项目设置
"""

import os
from typing import Literal
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# 加载环境变量
load_dotenv()

class Settings(BaseSettings):
    """应用程序设置类"""

    # 服务器配置
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "true").lower() == "true"

    # 日志配置
    log_level: str = os.getenv("LOG_LEVEL", "info")

    # 数据文件
    daily_word_file: str = os.getenv("DAILY_WORD_FILE", "data/dailyWord.json")
    ipa_dict_file: str = os.getenv("IPA_DICT_FILE", "")  # 为空时使用CMU词典
    static_dir: str = os.getenv("STATIC_DIR", "static")
    audio_file: str = os.getenv("AUDIO_FILE", "static/audio.mp3")
    audio_public_url: str = os.getenv("AUDIO_PUBLIC_URL", "/static/audio.mp3")

    # 单词缓存
    word_cache_ttl_seconds: int = int(os.getenv("WORD_CACHE_TTL_SECONDS", "86400"))

    # 例句来源: live=Reverso在线抓取, static=内置例句表（生产环境Reverso不稳定时使用）
    phrase_source: Literal["live", "static"] = os.getenv("PHRASE_SOURCE", "live")
    min_phrases: int = int(os.getenv("MIN_PHRASES", "1"))
    phrase_max_attempts: int = int(os.getenv("PHRASE_MAX_ATTEMPTS", "3"))
    phrase_retry_delay: float = float(os.getenv("PHRASE_RETRY_DELAY", "2"))
    phrase_timeout: float = float(os.getenv("PHRASE_TIMEOUT", "15"))

    # 每日单词
    daily_word_max_attempts: int = int(os.getenv("DAILY_WORD_MAX_ATTEMPTS", "3"))

    # 项目信息
    app_name: str = "WordCoach Backend"
    version: str = "1.0.0"
    description: str = "WordCoach English-Portuguese Vocabulary Helper Backend"

    class Config:
        env_file = ".env"
        extra = "ignore"

# 全局设置实例
settings = Settings()
