"""
extern 함수 추출기
평탄화된 헤더 텍스트에서 extern 선언을 찾아 반환 타입, 함수명, 파라미터로 분리하고
바로 앞의 블록 주석을 문서로 연결합니다.
"""
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from shared_config.logger import get_logger

from .types import Function, Parameter
from .tokenizer import first_type_name
from .comment_formatter import CommentFormatter
from .patterns import (
    PATTERN_EXTERN,
    PATTERN_PARAM_LIST,
    PATTERN_COMMENT_MULTI,
    PATTERN_COMMENT_SINGLE,
    PATTERN_NEWLINES,
    PATTERN_WHITESPACE,
    PATTERN_LINKAGE,
)

log = get_logger(__name__)


class DeclarationError(ValueError):
    """extern 구문을 함수 선언으로 해석할 수 없음"""


@dataclass(frozen=True)
class FragmentResult:
    """extern 조각 하나의 처리 결과 (value 또는 누락 사유)"""
    value: Optional[Function] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.value is not None


class FunctionExtractor:
    """
    extern 함수 선언 추출기

    선언 하나가 잘못되어도 나머지 추출은 계속됩니다.
    해석할 수 없는 조각은 결과에서 빠지고 로그만 남깁니다.

    사용 예:
        extractor = FunctionExtractor()
        functions = extractor.extract("/** \\\\sa other */ extern int count(void);")
        # [Function(name="count", output_type="int", params={}, documentation="/** @see other */")]
    """

    def __init__(
        self,
        ignored_tokens: Sequence[str] = ("const",),
        formatter: Optional[CommentFormatter] = None,
        strip_line_comments: bool = True
    ):
        """
        Args:
            ignored_tokens: 구문에서 제거할 단어 (예: const, DECLSPEC, SDLCALL)
            formatter: 문서 주석 포맷터 (None 이면 기본 테이블)
            strip_line_comments: 구문 안의 // 주석도 제거할지 여부
        """
        self.ignored_tokens = tuple(ignored_tokens)
        self.formatter = formatter or CommentFormatter()
        self.strip_line_comments = strip_line_comments

        self._ignored_pattern = None
        if self.ignored_tokens:
            alternatives = '|'.join(re.escape(t) for t in self.ignored_tokens)
            self._ignored_pattern = re.compile(r'(?<!\w)(?:' + alternatives + r')(?!\w)')

    def extract(self, text: str) -> List[Function]:
        """
        Args:
            text: 평탄화된 헤더 텍스트

        Returns:
            선언 순서의 Function 리스트
        """
        fragments = PATTERN_EXTERN.split(text)
        result = []

        # fragments[0] 은 첫 extern 이전 텍스트 (첫 함수의 주석 탐색에만 사용)
        for i in range(1, len(fragments)):
            outcome = self.process_fragment(fragments[i], fragments[i - 1])
            if outcome.ok:
                result.append(outcome.value)

        log.debug(f"함수 추출: extern {len(fragments) - 1}개 중 {len(result)}개")
        return result

    def process_fragment(self, fragment: str, previous: str = "") -> FragmentResult:
        """조각 하나를 처리, 예외는 FragmentResult 로 변환"""
        try:
            return FragmentResult(value=self.parse_declaration(fragment, previous))
        except DeclarationError as e:
            log.debug(f"extern 조각 제외: {e}")
            return FragmentResult(reason=str(e))
        except Exception as e:
            log.warning(f"extern 조각 처리 실패: {e!r} ({fragment[:60]!r})")
            return FragmentResult(reason=repr(e))

    def parse_declaration(self, fragment: str, previous: str = "") -> Function:
        """
        extern 다음 조각을 Function 으로 변환

        Raises:
            DeclarationError: 파라미터 목록이나 함수명을 찾을 수 없는 경우
        """
        statement = self.clean_statement(fragment)

        if PATTERN_LINKAGE.match(statement):
            raise DeclarationError(f"링크 지정자: {statement[:30]!r}")

        match = PATTERN_PARAM_LIST.match(statement)
        if not match:
            raise DeclarationError(f"파라미터 목록 없음 또는 해석 불가: {statement!r}")

        outer, inner = match.group(1), match.group(2)

        head = first_type_name(outer)
        if head is None:
            raise DeclarationError(f"함수명 없음: {outer.strip()!r}")

        params: Dict[str, Parameter] = {}
        index = 0
        for piece in inner.split(','):
            pair = first_type_name(piece)
            if pair is None:
                continue
            params[pair.name] = Parameter(type=pair.type, index=index)
            index += 1

        return Function(
            name=head.name,
            output_type=head.type,
            params=params,
            documentation=self.find_documentation(previous),
        )

    def clean_statement(self, fragment: str) -> str:
        """첫 ';' 이전 구문에서 주석/무시 토큰을 제거하고 한 줄로 합침"""
        statement = fragment.split(';')[0]
        statement = PATTERN_COMMENT_MULTI.sub(' ', statement)
        if self.strip_line_comments:
            statement = PATTERN_COMMENT_SINGLE.sub('', statement)
        if self._ignored_pattern is not None:
            statement = self._ignored_pattern.sub(' ', statement)
        statement = PATTERN_NEWLINES.sub(' ', statement)
        return PATTERN_WHITESPACE.sub(' ', statement).strip()

    def find_documentation(self, previous: str) -> Optional[str]:
        """앞 조각의 마지막 블록 주석을 포맷해 반환 (없으면 None)"""
        comments = PATTERN_COMMENT_MULTI.findall(previous or "")
        if not comments:
            return None
        return self.formatter.format(comments[-1])
