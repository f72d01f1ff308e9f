"""
header_extractor 모듈
C 헤더 텍스트에서 매크로를 해석하고 구조체와 extern 함수 선언을 추출합니다.
"""

from .types import (
    MacroDefinition,
    TypeName,
    Member,
    Parameter,
    Struct,
    Function,
    PreprocessResult,
    ExtractionResult,
)
from .config import ExtractorConfig
from .tokenizer import split_type_name
from .macro_preprocessor import MacroPreprocessor, Segment
from .struct_extractor import StructExtractor
from .function_extractor import FunctionExtractor, FragmentResult, DeclarationError
from .comment_formatter import CommentFormatter
from .pipeline import HeaderExtractor, extract_header
from .exporter import to_json, to_yaml, render_listing, export_result

__version__ = "0.1.0"

__all__ = [
    # 데이터 모델
    "MacroDefinition",
    "TypeName",
    "Member",
    "Parameter",
    "Struct",
    "Function",
    "PreprocessResult",
    "ExtractionResult",
    # 설정
    "ExtractorConfig",
    # 단계별 처리기
    "split_type_name",
    "MacroPreprocessor",
    "Segment",
    "StructExtractor",
    "FunctionExtractor",
    "FragmentResult",
    "DeclarationError",
    "CommentFormatter",
    # 파이프라인
    "HeaderExtractor",
    "extract_header",
    # 내보내기
    "to_json",
    "to_yaml",
    "render_listing",
    "export_result",
]
