"""
타입/이름 토크나이저
구조체 멤버와 함수 파라미터가 공유하는 "타입 + 이름" 선언 조각을 분리합니다.
"""
import re
from typing import List, Optional, Tuple

from .types import TypeName
from .patterns import PATTERN_ARRAY_SUFFIX

# 배열 괄호 앞/안의 공백: "name [8 + 1]" -> "name[8+1]"
_BRACKET_SPACING = re.compile(r'\s*\[([^\[\]]*)\]')


def _tighten_brackets(text: str) -> str:
    return _BRACKET_SPACING.sub(
        lambda m: '[' + ''.join(m.group(1).split()) + ']',
        text
    )


def _split_array_suffix(type_: str, name: str) -> Tuple[str, str]:
    """name[32] 형태이면 배열 접미사를 타입 쪽으로 옮김"""
    match = PATTERN_ARRAY_SUFFIX.match(name)
    if not match:
        return type_, name
    return type_ + match.group(2), match.group(1)


def tokenize_declarator(fragment: str) -> List[str]:
    """
    첫 번째 선언자를 토큰 리스트로 분리

    '*' 뒤에 공백을 넣어 포인터 기호가 이름이 아닌 타입에 붙도록 합니다.

    예:
        "Uint32 *x" -> ["Uint32*", "x"]
    """
    star_spaced = _tighten_brackets(fragment).replace('*', '* ')
    return [token for token in star_spaced.split() if token]


def split_type_name(fragment: str) -> List[TypeName]:
    """
    선언 조각을 하나 이상의 TypeName 으로 분리

    쉼표로 나열된 이름들은 첫 번째 선언자의 타입을 공유합니다.
    마지막 토큰이 이름이고, 앞의 토큰들은 구분자 없이 이어 붙여 타입이 됩니다.
    단어 하나뿐이라 이름을 분리할 수 없으면 빈 리스트를 반환합니다.

    Args:
        fragment: 선언 조각 (예: "const Uint32 *x, y")

    Returns:
        [TypeName, ...] (입력 순서 유지)

    사용 예:
        split_type_name("int a, b")
        # [TypeName("int", "a"), TypeName("int", "b")]
    """
    first, *rest = fragment.split(',')

    tokens = tokenize_declarator(first)
    if len(tokens) < 2:
        return []

    base_type = ''.join(tokens[:-1])
    result = [TypeName(*_split_array_suffix(base_type, tokens[-1]))]

    for piece in rest:
        name = _tighten_brackets(piece).strip()
        if not name:
            continue
        result.append(TypeName(*_split_array_suffix(base_type, name)))

    return result


def first_type_name(fragment: str) -> Optional[TypeName]:
    """첫 번째 TypeName 또는 None"""
    pairs = split_type_name(fragment)
    return pairs[0] if pairs else None
