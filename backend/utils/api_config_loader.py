# -*- coding: utf-8 -*-
"""
API配置加载器 - WordCoach V1.0
从 YAML 文件中加载第三方API配置
"""

import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class APIConfigLoader:
    """API配置加载器"""

    def __init__(self, config_file: Optional[Path] = None):
        """
        初始化配置加载器

        Args:
            config_file: 配置文件路径，默认为 config/external_apis.yaml
        """
        # 配置文件路径
        backend_dir = Path(__file__).parent.parent
        self.config_file = config_file or backend_dir / "config" / "external_apis.yaml"

        # 加载配置
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """从YAML文件加载配置"""
        try:
            if not self.config_file.exists():
                logger.warning(f"⚠️ 配置文件不存在: {self.config_file}")
                return {}

            with open(self.config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
                logger.info(f"✅ API配置加载成功: {self.config_file}")
                return config or {}

        except (OSError, yaml.YAMLError) as e:
            logger.error(f"❌ 加载配置文件失败: {e}")
            return {}

    def get_config(self) -> Dict[str, Any]:
        """获取完整配置"""
        return self.config

    def get_reverso_config(self) -> Dict[str, Any]:
        """获取Reverso配置"""
        return self.config.get('reverso', {})

    def get_mymemory_config(self) -> Dict[str, Any]:
        """获取MyMemory翻译配置"""
        return self.config.get('mymemory', {})

    def get_free_dictionary_config(self) -> Dict[str, Any]:
        """获取Free Dictionary API配置"""
        return self.config.get('free_dictionary', {})

    def get_google_translate_config(self) -> Dict[str, Any]:
        """获取Google翻译配置"""
        return self.config.get('google_translate', {})

    def get_gtts_config(self) -> Dict[str, Any]:
        """获取gTTS配置"""
        return self.config.get('gtts', {})

    def is_reverso_enabled(self) -> bool:
        """检查Reverso是否启用"""
        return self.get_reverso_config().get('enabled', False)

    def is_mymemory_enabled(self) -> bool:
        """检查MyMemory是否启用"""
        return self.get_mymemory_config().get('enabled', False)


# 创建全局单例
api_config_loader = APIConfigLoader()
