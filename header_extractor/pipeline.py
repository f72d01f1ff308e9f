"""
헤더 추출 파이프라인
매크로 전처리 -> 구조체 추출 -> 함수 추출(문서 주석 포맷 포함) 순서로 실행합니다.
"""
from typing import Optional

from shared_config.logger import get_logger, LogStage

from .config import ExtractorConfig
from .types import ExtractionResult, PreprocessResult
from .macro_preprocessor import MacroPreprocessor
from .struct_extractor import StructExtractor
from .function_extractor import FunctionExtractor
from .comment_formatter import CommentFormatter

log = get_logger(__name__)


class HeaderExtractor:
    """
    헤더 텍스트 하나를 구조화된 선언 정보로 변환하는 메인 클래스

    I/O 는 하지 않습니다. 텍스트를 받아 ExtractionResult 를 반환하며,
    호출 사이에 상태(매크로 테이블 등)를 공유하지 않습니다.

    사용 예:
        extractor = HeaderExtractor()
        result = extractor.extract(header_text)

        for func in result.functions:
            print(func.name, func.output_type, list(func.params))
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.config = config or ExtractorConfig()

        self.formatter = CommentFormatter(self.config.COMMENT_FORMATTING)
        self.struct_extractor = StructExtractor(
            strip_line_comments=self.config.STRIP_LINE_COMMENTS
        )
        self.function_extractor = FunctionExtractor(
            ignored_tokens=self.config.IGNORED_TOKENS,
            formatter=self.formatter,
            strip_line_comments=self.config.STRIP_LINE_COMMENTS,
        )
        log.debug(
            f"HeaderExtractor 초기화 (무시 토큰: {len(self.config.IGNORED_TOKENS)}개, "
            f"사전 매크로: {len(self.config.PREDEFINED_MACROS)}개)"
        )

    def preprocess(self, text: str) -> PreprocessResult:
        """매크로 전처리만 실행 (호출마다 새 매크로 테이블)"""
        preprocessor = MacroPreprocessor(
            predefined_macros=self.config.PREDEFINED_MACROS,
            strip_line_comments=self.config.STRIP_LINE_COMMENTS,
        )
        return preprocessor.process(text)

    def extract(self, text: str) -> ExtractionResult:
        """
        헤더 텍스트에서 구조체와 함수 추출

        Args:
            text: C 헤더 원본 텍스트

        Returns:
            ExtractionResult (structs, functions, flattened_text)
        """
        with LogStage("매크로 전처리", chars=len(text)):
            preprocessed = self.preprocess(text)

        flattened = preprocessed.flattened_text

        with LogStage("구조체 추출"):
            structs = self.struct_extractor.extract(flattened)

        with LogStage("함수 추출"):
            functions = self.function_extractor.extract(flattened)

        log.info(f"헤더 추출 완료: 구조체 {len(structs)}개, 함수 {len(functions)}개")
        return ExtractionResult(
            structs=structs,
            functions=functions,
            flattened_text=flattened,
        )


def extract_header(text: str, config: Optional[ExtractorConfig] = None) -> ExtractionResult:
    """HeaderExtractor(config).extract(text) 단축 함수"""
    return HeaderExtractor(config).extract(text)
