"""
추출 결과 내보내기 모듈

ExtractionResult 를 JSON / YAML / 진단용 목록 텍스트로 변환하고 파일로 저장합니다.
"""
import json
from pathlib import Path

import yaml
from loguru import logger

from .types import ExtractionResult

FORMATS = ("json", "yaml", "listing")


def to_json(result: ExtractionResult, indent: int = 4) -> str:
    """선언 순서를 유지한 JSON 텍스트"""
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


def to_yaml(result: ExtractionResult) -> str:
    """선언 순서를 유지한 YAML 텍스트"""
    return yaml.safe_dump(
        result.to_dict(),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def render_listing(result: ExtractionResult) -> str:
    """
    원본 헤더와 나란히 비교하기 위한 함수 목록 텍스트

    형식:
        {
        /** 문서 주석 */
        SDL_GetNumVideoDisplays: {
            "output": "int",
            "params": {}
        },
        ...
        }
    """
    entries = []
    for func in result.functions:
        guts = {
            "output": func.output_type,
            "params": {name: p.to_dict() for name, p in func.params.items()},
        }
        body = f"{func.name}: {json.dumps(guts, indent=4, ensure_ascii=False)}"
        if func.documentation is not None:
            body = f"{func.documentation}\n{body}"
        entries.append(body)

    return "{\n" + ",\n".join(entries) + "\n}"


def render(result: ExtractionResult, fmt: str = "json") -> str:
    """
    Raises:
        ValueError: 지원하지 않는 형식
    """
    if fmt == "json":
        return to_json(result)
    if fmt == "yaml":
        return to_yaml(result)
    if fmt == "listing":
        return render_listing(result)
    raise ValueError(f"지원하지 않는 형식: {fmt} (가능: {', '.join(FORMATS)})")


def export_result(
    result: ExtractionResult,
    output_path: str,
    fmt: str = "json",
    flattened: bool = False,
) -> Path:
    """
    결과를 파일로 저장

    Args:
        result: 추출 결과
        output_path: 출력 파일 경로 (상위 디렉토리는 자동 생성)
        fmt: json | yaml | listing
        flattened: True 면 fmt 대신 매크로 해석 텍스트를 저장

    Returns:
        저장된 파일 경로
    """
    content = result.flattened_text if flattened else render(result, fmt)

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')

    logger.info(f"결과 저장: {path} ({'flattened' if flattened else fmt})")
    return path
