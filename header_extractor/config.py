"""
헤더 추출기 설정 모듈

ExtractorConfig 클래스를 통해 추출 동작을 설정합니다.
YAML 파일 또는 딕셔너리에서 값을 덮어쓸 수 있습니다.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

import yaml
from loguru import logger


def default_comment_formatting() -> Dict[str, str]:
    # 선언 순서대로 적용됩니다
    return {
        "\\sa": "@see",
        "\\brief ": "",
        "\\note": "@remarks",
        "\\return": "@returns",
        "\\li": "*",
        "\\param": "@param",
    }


@dataclass
class ExtractorConfig:
    """헤더 추출기 설정"""

    # extern 구문에서 제거할 토큰 (단어 단위)
    # SDL 헤더라면 ("const", "DECLSPEC", "SDLCALL")
    IGNORED_TOKENS: Tuple[str, ...] = ("const",)

    # 문서 주석 태그 변환 테이블 (원본 -> 변환)
    COMMENT_FORMATTING: Dict[str, str] = field(default_factory=default_comment_formatting)

    # 첫 세그먼트 이전에 등록할 매크로 {"NAME": "value"}
    PREDEFINED_MACROS: Dict[str, str] = field(default_factory=dict)

    # 매크로 값과 구조체 본문에서 // 주석도 제거
    STRIP_LINE_COMMENTS: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExtractorConfig":
        """
        딕셔너리에서 설정 생성

        키는 대소문자를 구분하지 않습니다 (ignored_tokens == IGNORED_TOKENS).
        알 수 없는 키는 경고 후 무시합니다.

        Raises:
            ValueError: 값의 형식이 잘못된 경우
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}

        for key, value in data.items():
            name = str(key).upper()
            if name not in known:
                logger.warning(f"알 수 없는 설정 키, 무시합니다: {key}")
                continue
            kwargs[name] = value

        if "IGNORED_TOKENS" in kwargs:
            tokens = kwargs["IGNORED_TOKENS"]
            if isinstance(tokens, str) or not isinstance(tokens, (list, tuple)):
                raise ValueError("IGNORED_TOKENS 는 문자열 리스트여야 합니다")
            kwargs["IGNORED_TOKENS"] = tuple(str(t) for t in tokens)

        for name in ("COMMENT_FORMATTING", "PREDEFINED_MACROS"):
            if name in kwargs:
                table = kwargs[name]
                if not isinstance(table, Mapping):
                    raise ValueError(f"{name} 는 매핑이어야 합니다")
                kwargs[name] = {
                    str(k): "" if v is None else str(v)
                    for k, v in table.items()
                }

        if "STRIP_LINE_COMMENTS" in kwargs:
            kwargs["STRIP_LINE_COMMENTS"] = bool(kwargs["STRIP_LINE_COMMENTS"])

        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: str) -> "ExtractorConfig":
        """
        YAML 파일에서 설정 로드

        Raises:
            FileNotFoundError: 파일이 존재하지 않을 경우
            yaml.YAMLError: YAML 파싱 오류
            ValueError: 최상위가 매핑이 아닌 경우
        """
        file_path = Path(path)

        if not file_path.exists():
            logger.error(f"설정 파일을 찾을 수 없습니다: {path}")
            raise FileNotFoundError(f"설정 파일을 찾을 수 없습니다: {path}")

        logger.info(f"설정 파일 로드: {path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if data is None:
            logger.warning("빈 설정 파일입니다, 기본값을 사용합니다")
            return cls()

        if not isinstance(data, dict):
            raise ValueError("잘못된 설정 형식: 최상위는 매핑이어야 합니다")

        return cls.from_dict(data)
