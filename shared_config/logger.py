"""
Loguru 기반 로깅 설정
헤더 추출 파이프라인의 단계별 로그를 파일/함수/라인 정보와 함께 출력합니다.
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# 기본 로거 제거 (중복 방지)
logger.remove()

# =============================================================================
# 포맷 설정
# =============================================================================

# 콘솔용 포맷 (컬러 + file.path:line 형식)
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <7}</level> | "
    "<cyan>{file.path}</cyan>:<cyan>{line}</cyan> in <cyan>{function}()</cyan> | "
    "<level>{message}</level>"
)

# 파일용 포맷 (플레인 텍스트)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level: <7} | "
    "{file.path}:{line} in {function}() | "
    "{message}"
)

# 라이브러리로 import될 때는 경고 이상만 출력
DEFAULT_CONSOLE_LEVEL = "WARNING"

_console_handler_id: Optional[int] = logger.add(
    sys.stderr,
    format=CONSOLE_FORMAT,
    level=DEFAULT_CONSOLE_LEVEL,
    colorize=True,
)


def configure_console(level: str = DEFAULT_CONSOLE_LEVEL, colorize: bool = True) -> int:
    """
    콘솔 핸들러를 새 레벨로 교체

    Args:
        level: 로그 레벨 (예: "DEBUG", "INFO")
        colorize: 컬러 출력 여부

    Returns:
        새 핸들러 ID
    """
    global _console_handler_id

    if _console_handler_id is not None:
        try:
            logger.remove(_console_handler_id)
        except ValueError:
            # 외부에서 이미 제거된 핸들러
            pass

    _console_handler_id = logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level.upper(),
        colorize=colorize,
    )
    return _console_handler_id


def setup_file_logging(
    log_dir: str = "./logs",
    level: str = "DEBUG",
    rotation: str = "1 day",
    retention: str = "7 days"
) -> int:
    """
    파일 로깅 설정

    Args:
        log_dir: 로그 디렉토리 경로
        level: 로그 레벨
        rotation: 로테이션 주기
        retention: 보관 기간

    Returns:
        추가된 핸들러 ID
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    handler_id = logger.add(
        str(log_path / "{time:YYYY-MM-DD}_extract.log"),
        format=FILE_FORMAT,
        level=level,
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
    )

    logger.info(f"파일 로깅 시작: {log_path}")
    return handler_id


def get_logger(module_name: str = None):
    """
    모듈별 로거 반환

    사용 예:
        log = get_logger("macro_preprocessor")
        log.debug("세그먼트 처리")
    """
    if module_name:
        return logger.bind(module=module_name)
    return logger


# =============================================================================
# 단계 추적 컨텍스트 매니저
# =============================================================================

class LogStage:
    """
    파이프라인 단계 추적 컨텍스트 매니저

    사용 예:
        with LogStage("구조체 추출", chars=len(text)):
            structs = extractor.extract(text)
    """

    def __init__(self, stage_name: str, **context):
        self.stage_name = stage_name
        self.context = context

    def __enter__(self):
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        if context_str:
            logger.debug(f"[시작] {self.stage_name} ({context_str})")
        else:
            logger.debug(f"[시작] {self.stage_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            logger.error(f"[실패] {self.stage_name}: {exc_val}")
        else:
            logger.debug(f"[완료] {self.stage_name}")
        return False


__all__ = [
    "logger",
    "get_logger",
    "configure_console",
    "setup_file_logging",
    "LogStage",
    "CONSOLE_FORMAT",
    "FILE_FORMAT",
    "DEFAULT_CONSOLE_LEVEL",
]
