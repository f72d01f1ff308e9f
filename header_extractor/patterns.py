"""
헤더 추출에 사용되는 정규식 패턴들을 정의한 모듈입니다.
전처리 지시문, 주석, 구조체 본문, 파라미터 목록 등을 탐지하는 패턴을 포함합니다.
"""
import re

# 전처리 지시문: #ifdef, #ifndef, #else, #endif, #define
# #if, #elif, #include 등은 지시문으로 보지 않고 일반 텍스트로 남깁니다.
# 캡처: directive
PATTERN_DIRECTIVE = re.compile(r'#[ \t]*(ifndef|ifdef|else|endif|define)\b')

# #define 머리: NAME 또는 NAME(args)
# 이름 바로 뒤에 괄호가 붙어야 함수형 매크로입니다.
# 캡처: name, params (옵션)
PATTERN_DEFINE_HEAD = re.compile(r'[ \t]*(\w+)(?:\(([^)]*)\))?')

# #ifdef / #ifndef 뒤의 매크로 이름
PATTERN_CONDITION_NAME = re.compile(r'[ \t]*(\w+)')

# 주석
PATTERN_COMMENT_MULTI = re.compile(r'/\*.*?\*/', re.DOTALL)
PATTERN_COMMENT_SINGLE = re.compile(r'//[^\r\n]*')

# 공백 / 줄바꿈
PATTERN_WHITESPACE = re.compile(r'\s+')
PATTERN_NEWLINES = re.compile(r'[ \t]*[\r\n]+[ \t]*')

# 키워드 분할 (식별자 내부는 자르지 않음: external_id, typedefs 등)
PATTERN_TYPEDEF = re.compile(r'\btypedef\b')
PATTERN_EXTERN = re.compile(r'\bextern\b')

# typedef 뒤의 struct 본문: struct <tag> { <members> } <name> ;
# 중첩 중괄호(익명 union 등)는 매칭하지 않습니다.
# 캡처: members, name
PATTERN_STRUCT_BODY = re.compile(
    r'^\s*struct\b[^{};]*'        # struct 와 무시되는 태그
    r'\{([^{}]*)\}'               # 멤버 선언부
    r'\s*([^;{}]*?)\s*;'          # } name;
)

# 첫 번째 괄호 쌍: outer ( inner ), inner 안에 괄호가 있으면(함수 포인터 인자) 불일치
# 캡처: outer, inner
PATTERN_PARAM_LIST = re.compile(r'^([^(]*)\(([^()]*)\)')

# 단순 배열 접미사: name[32], name[A][B]
# 캡처: name, suffix
PATTERN_ARRAY_SUFFIX = re.compile(r'^([^\[\]]+?)\s*((?:\[[^\[\]]*\])+)$')

# 링크 지정자: extern "C" {
PATTERN_LINKAGE = re.compile(r'^\s*"[^"]*"')
