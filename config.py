from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    max_query_length: int = 65536
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """从环境变量读取服务配置"""
    env = os.environ if environ is None else environ
    return Settings(
        host=env.get("HOST", "127.0.0.1"),
        port=int(env.get("PORT", "8000")),
        debug=env.get("DEBUG", "").strip().lower() in _TRUE,
        max_query_length=int(env.get("MAX_QUERY_LENGTH", "65536")),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )
