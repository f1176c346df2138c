"""
WordCoach Backend 主程序入口
FastAPI 应用程序启动和配置
"""

import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager

from config.settings import settings
from routers import word_router, daily_word_router, pronunciation_router

# 配置应用日志
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(levelname)s:%(name)s:%(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用程序生命周期管理"""
    # 启动时执行
    logger.info("🚀 WordCoach Backend 正在启动...")
    logger.info(f"📱 应用名称: {settings.app_name}")
    logger.info(f"🔢 版本: {settings.version}")
    logger.info(f"📝 例句来源: {settings.phrase_source}")

    Path(settings.static_dir).mkdir(parents=True, exist_ok=True)
    logger.info(f"📁 静态文件目录: {settings.static_dir}")

    yield

    # 关闭时执行
    logger.info("👋 WordCoach Backend 正在关闭...")


# 创建 FastAPI 应用
app = FastAPI(
    title=settings.app_name,
    description=settings.description,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan
)

# 配置 CORS 中间件
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 开发阶段允许所有来源
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 发音音频等静态文件（目录在启动时创建）
app.mount("/static", StaticFiles(directory=settings.static_dir, check_dir=False), name="static")


# 注册路由
app.include_router(word_router.router)
app.include_router(daily_word_router.router)
app.include_router(pronunciation_router.router)


# 根路径
@app.get("/")
async def root():
    """根路径 - 健康检查"""
    return {
        "app": settings.app_name,
        "version": settings.version,
        "status": "running",
        "message": "WordCoach Backend API 正在运行"
    }


# 健康检查端点
@app.get("/health")
async def health_check():
    """健康检查端点"""
    return {
        "status": "healthy",
        "service": "WordCoach Backend",
        "version": settings.version
    }


if __name__ == "__main__":
    logger.info(f"🌟 启动 {settings.app_name}")
    logger.info(f"🔧 调试模式: {'开启' if settings.debug else '关闭'}")
    logger.info(f"🌐 服务地址: http://{settings.host}:{settings.port}")
    logger.info(f"📚 API文档: http://{settings.host}:{settings.port}/docs")

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level
    )
