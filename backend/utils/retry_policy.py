# -*- coding: utf-8 -*-
"""
重试策略 - WordCoach V1.0
统一的异步重试工具，与具体的抓取逻辑分离
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fixed_backoff(delay: float) -> Callable[[int], float]:
    """固定间隔退避：每次重试前等待相同的秒数"""
    return lambda attempt: delay


@dataclass
class RetryPolicy:
    """
    重试策略

    Attributes:
        max_attempts: 最大尝试次数（包含第一次）
        backoff: 根据已失败次数返回下一次等待秒数
        retry_on: 触发重试的异常类型
    """
    max_attempts: int = 3
    backoff: Callable[[int], float] = field(default_factory=lambda: fixed_backoff(2.0))
    retry_on: tuple = (Exception,)
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts 必须 >= 1")

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        accept: Optional[Callable[[T], bool]] = None,
        name: str = "operation",
    ) -> T:
        """
        执行操作直到成功或尝试次数用尽

        Args:
            operation: 无参异步函数，每次尝试调用一次
            accept: 可选的结果校验函数，返回False视为失败并重试
            name: 日志中使用的操作名称

        Returns:
            T: 第一次被接受的结果；若所有尝试都返回不被接受的结果，返回最后一次结果

        Raises:
            Exception: 最后一次尝试抛出的异常
        """
        result = None
        for attempt in range(1, self.max_attempts + 1):
            logger.debug(f"🔁 {name}: 第 {attempt}/{self.max_attempts} 次尝试")
            try:
                result = await operation()
            except self.retry_on as e:
                logger.warning(f"⚠️ {name}: 第 {attempt} 次尝试失败: {e}")
                if attempt == self.max_attempts:
                    logger.error(f"❌ {name}: 已达到最大尝试次数")
                    raise
            else:
                if accept is None or accept(result):
                    return result
                logger.warning(f"⚠️ {name}: 第 {attempt} 次尝试结果无效")
                if attempt == self.max_attempts:
                    return result

            await self.sleep(self.backoff(attempt))

        return result
