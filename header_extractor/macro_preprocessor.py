"""
매크로 전처리기
#ifdef / #ifndef / #else / #endif / #define 지시문을 기준으로 텍스트를 세그먼트로 나누고,
조건부로 제외된 영역을 제거하고 단순 매크로 참조를 치환한 하나의 텍스트를 만듭니다.
"""
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from shared_config.logger import get_logger

from .types import MacroDefinition, PreprocessResult
from .patterns import (
    PATTERN_DIRECTIVE,
    PATTERN_DEFINE_HEAD,
    PATTERN_CONDITION_NAME,
    PATTERN_COMMENT_MULTI,
    PATTERN_COMMENT_SINGLE,
)

log = get_logger(__name__)


@dataclass(frozen=True)
class Segment:
    """지시문 하나와 그 뒤에 이어지는 텍스트"""
    directive: Optional[str]   # None 이면 첫 지시문 이전의 일반 텍스트
    body: str                  # 지시문 키워드 다음부터 다음 지시문 전까지


class MacroPreprocessor:
    """
    평면(flat) 조건부 매크로 전처리기

    - 중첩 깊이를 추적하지 않습니다. 건너뛰기는 처음 만나는 #endif/#else 에서 멈춥니다.
    - #else 본문은 항상 버려집니다.
    - 치환은 #define 나머지와 통과한 #ifdef/#ifndef 나머지에만 적용됩니다. #endif 뒤 텍스트는 그대로 붙습니다.
    - 함수형 매크로의 인자는 기록만 하고, 치환은 이름 -> 값의 단순 치환입니다.
    - 매크로 테이블은 process() 호출마다 새로 만들어집니다.

    사용 예:
        preprocessor = MacroPreprocessor()
        result = preprocessor.process("#define FOO 42\\nint x = FOO;")
        # result.flattened_text == "\\nint x = 42;"
    """

    def __init__(
        self,
        predefined_macros: Optional[Mapping[str, str]] = None,
        strip_line_comments: bool = True
    ):
        """
        Args:
            predefined_macros: 첫 세그먼트 전에 등록할 매크로 {"NAME": "value"}
            strip_line_comments: 매크로 값에서 // 주석도 제거할지 여부
        """
        self.predefined_macros = dict(predefined_macros or {})
        self.strip_line_comments = strip_line_comments
        self._pattern_cache: Dict[str, "re.Pattern"] = {}

    def split_segments(self, text: str) -> List[Segment]:
        """
        지시문 위치마다 세그먼트를 나눔

        첫 지시문 이전의 텍스트는 directive=None 세그먼트가 됩니다.
        """
        segments = []
        matches = list(PATTERN_DIRECTIVE.finditer(text))

        head_end = matches[0].start() if matches else len(text)
        segments.append(Segment(None, text[:head_end]))

        for i, match in enumerate(matches):
            body_end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
            segments.append(Segment(match.group(1), text[match.end():body_end]))

        return segments

    def process(self, text: str) -> PreprocessResult:
        """
        텍스트를 평탄화

        Args:
            text: 원본 헤더 텍스트

        Returns:
            PreprocessResult (flattened_text, macros)
        """
        macros: Dict[str, MacroDefinition] = {
            name: MacroDefinition((), value)
            for name, value in self.predefined_macros.items()
        }
        segments = self.split_segments(text)
        output: List[str] = []
        skipped = 0

        i = 0
        while i < len(segments):
            segment = segments[i]
            directive = segment.directive

            if directive is None:
                # 첫 지시문 이전 텍스트: 사전 정의 매크로만 치환 대상
                output.append(self._substitute(segment.body, macros))

            elif directive == "endif":
                output.append(segment.body)

            elif directive == "define":
                remainder = self._register_define(segment.body, macros)
                output.append(self._substitute(remainder, macros))

            elif directive in ("ifdef", "ifndef"):
                name, remainder = self._condition_name(segment.body)
                defined = name in macros
                taken = defined if directive == "ifdef" else not defined

                if not taken:
                    next_i = self._skip_until(segments, i, ("endif", "else"))
                    skipped += next_i - i
                    i = next_i
                    continue

                output.append(self._substitute(remainder, macros))

            elif directive == "else":
                next_i = self._skip_until(segments, i, ("endif",))
                skipped += next_i - i
                i = next_i
                continue

            i += 1

        log.debug(
            f"전처리 완료: 세그먼트 {len(segments)}개, "
            f"제외 {skipped}개, 매크로 {len(macros)}개"
        )
        return PreprocessResult(flattened_text=''.join(output), macros=macros)

    def _skip_until(self, segments: List[Segment], index: int, stops: Tuple[str, ...]) -> int:
        """index 다음부터 stops 지시문 직전까지 건너뛴 뒤 멈춘 위치 반환"""
        j = index + 1
        while j < len(segments) and segments[j].directive not in stops:
            j += 1
        return j

    def _condition_name(self, body: str) -> Tuple[str, str]:
        """#ifdef / #ifndef 본문에서 (매크로 이름, 나머지 텍스트) 분리"""
        match = PATTERN_CONDITION_NAME.match(body)
        if not match:
            log.debug("조건 지시문에 매크로 이름이 없습니다")
            return "", body
        return match.group(1), body[match.end():]

    def _register_define(self, body: str, macros: Dict[str, MacroDefinition]) -> str:
        """
        #define 본문을 해석해 macros 에 등록하고, 값 이후의 나머지 텍스트를 반환

        값은 줄 끝의 '\\' 로 여러 줄에 걸칠 수 있고, 주석은 제거되어 저장됩니다.
        """
        match = PATTERN_DEFINE_HEAD.match(body)
        if not match:
            log.debug("이름 없는 #define, 일반 텍스트로 처리합니다")
            return body

        name = match.group(1)
        params: Tuple[str, ...] = ()
        if match.group(2) is not None:
            params = tuple(p.strip() for p in match.group(2).split(',') if p.strip())

        rest = body[match.end():]
        value_parts: List[str] = []
        pos = 0

        while True:
            newline = rest.find('\n', pos)
            line = rest[pos:] if newline == -1 else rest[pos:newline]
            stripped = line.rstrip()

            if stripped.endswith('\\'):
                value_parts.append(stripped[:-1])
                if newline == -1:
                    pos = len(rest)
                    break
                pos = newline + 1
                continue

            value_parts.append(line)
            pos = len(rest) if newline == -1 else newline
            break

        value = ' '.join(part.strip() for part in value_parts)
        value = PATTERN_COMMENT_MULTI.sub('', value)

        remainder = rest[pos:]
        if '/*' in value:
            # 값 줄에서 시작해 다음 줄로 이어지는 블록 주석
            value = value.split('/*')[0]
            close = remainder.find('*/')
            remainder = '' if close == -1 else remainder[close + 2:]

        if self.strip_line_comments:
            value = PATTERN_COMMENT_SINGLE.sub('', value)

        value = value.strip()
        macros[name] = MacroDefinition(params, value)
        log.debug(f"매크로 등록: {name} = {value!r}")

        return remainder

    def _substitute(self, text: str, macros: Dict[str, MacroDefinition]) -> str:
        """알려진 모든 매크로 이름을 값으로 치환 (테이블 순서, 재귀 확장 없음)"""
        for name, macro in macros.items():
            if name not in text:
                continue
            pattern = self._pattern_cache.get(name)
            if pattern is None:
                pattern = re.compile(r'\b' + re.escape(name) + r'\b')
                self._pattern_cache[name] = pattern
            body = macro.body
            text = pattern.sub(lambda _: body, text)
        return text
