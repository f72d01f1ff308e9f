"""
shared_config 모듈
헤더 추출 패키지들이 공통으로 사용하는 로깅 설정을 관리합니다.
"""

from .logger import (
    logger,
    get_logger,
    configure_console,
    setup_file_logging,
    LogStage,
)

__all__ = [
    "logger",
    "get_logger",
    "configure_console",
    "setup_file_logging",
    "LogStage",
]
