from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


# 项目根目录（config.py 位于 backend/foodweb/core/config.py）
PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Global configuration for the food web analyzer."""

    app_name: str = "FoodWeb"

    # 日志配置
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_dir: str = Field(default=str(PROJECT_ROOT / "data/logs"))
    log_to_file: bool = Field(default=False, alias="LOG_TO_FILE")
    log_to_console: bool = Field(default=True, alias="LOG_TO_CONSOLE")

    model_config = {
        "env_file": str(PROJECT_ROOT / ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }


def setup_logging(settings: Settings) -> None:
    """配置全局日志系统

    控制台日志写入 stderr，stdout 保留给食物网报告。

    Args:
        settings: 应用配置对象
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 清除已存在的handlers，避免重复输出
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 文件handler
    if settings.log_to_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            log_dir / "foodweb.log",
            encoding='utf-8',
            mode='a'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # 控制台handler（StreamHandler 默认写 stderr）
    if settings.log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    root_logger.debug(f"日志系统初始化完成 - 级别: {settings.log_level}, 目录: {settings.log_dir}")


def get_settings() -> Settings:
    """Return settings instance."""

    return Settings()
