"""
typedef 구조체 추출기
평탄화된 헤더 텍스트에서 typedef struct { ... } Name; 구문을 추출합니다.
"""
from typing import Dict, List, Optional

from shared_config.logger import get_logger

from .types import Member, Struct
from .tokenizer import split_type_name
from .patterns import (
    PATTERN_TYPEDEF,
    PATTERN_STRUCT_BODY,
    PATTERN_COMMENT_MULTI,
    PATTERN_COMMENT_SINGLE,
    PATTERN_WHITESPACE,
)

log = get_logger(__name__)


class StructExtractor:
    """
    typedef struct 구문을 추출하는 클래스

    익명 union, 전방 선언, struct 가 아닌 typedef 는 건너뜁니다.
    같은 이름의 멤버가 다시 나오면 나중 것이 앞의 것을 덮어씁니다.

    사용 예:
        extractor = StructExtractor()
        structs = extractor.extract("typedef struct { int a; float b; } Point;")
        # [Struct(name="Point", members={"a": Member("int", 0), "b": Member("float", 1)})]
    """

    def __init__(self, strip_line_comments: bool = True):
        self.strip_line_comments = strip_line_comments

    def extract(self, text: str) -> List[Struct]:
        """
        Args:
            text: 평탄화된 헤더 텍스트

        Returns:
            선언 순서의 Struct 리스트
        """
        fragments = PATTERN_TYPEDEF.split(text)[1:]
        result = []

        for fragment in fragments:
            struct = self.parse_fragment(fragment)
            if struct is not None:
                result.append(struct)

        log.debug(f"구조체 추출: typedef {len(fragments)}개 중 {len(result)}개")
        return result

    def parse_fragment(self, fragment: str) -> Optional[Struct]:
        """typedef 뒤의 조각 하나를 Struct 로 변환 (패턴 불일치 시 None)"""
        if self.strip_line_comments:
            fragment = PATTERN_COMMENT_SINGLE.sub('', fragment)
        collapsed = PATTERN_WHITESPACE.sub(' ', fragment)
        cleaned = PATTERN_COMMENT_MULTI.sub('', collapsed)

        match = PATTERN_STRUCT_BODY.match(cleaned)
        if not match:
            return None

        body, name = match.group(1), match.group(2).strip()
        if not name:
            return None

        return Struct(name=name, members=self._parse_members(body))

    def _parse_members(self, body: str) -> Dict[str, Member]:
        members: Dict[str, Member] = {}
        index = 0

        for declaration in body.split(';'):
            if not declaration.strip():
                continue
            for pair in split_type_name(declaration):
                # 인덱스는 덮어쓰기 전에 부여
                members[pair.name] = Member(type=pair.type, index=index)
                index += 1

        return members
