"""
헤더 추출에 사용되는 타입 정의 모듈

MacroDefinition, TypeName, Struct, Function, ExtractionResult 등의
데이터 클래스를 정의합니다. 모든 결과 객체는 생성 후 변경되지 않습니다.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class MacroDefinition:
    """#define 으로 등록된 매크로"""
    parameters: Tuple[str, ...] = ()     # 함수형 매크로 인자 (치환에는 사용하지 않음)
    body: str = ""                       # 주석이 제거된 값

    def to_dict(self) -> dict:
        return {
            "parameters": list(self.parameters),
            "body": self.body,
        }


@dataclass(frozen=True)
class TypeName:
    """선언 조각에서 분리한 타입/이름 쌍"""
    type: str
    name: str


@dataclass(frozen=True)
class Member:
    """구조체 멤버 (이름은 Struct.members 의 키)"""
    type: str
    index: int

    def to_dict(self) -> dict:
        return {"type": self.type, "index": self.index}


@dataclass(frozen=True)
class Parameter:
    """함수 파라미터 (이름은 Function.params 의 키)"""
    type: str
    index: int

    def to_dict(self) -> dict:
        return {"type": self.type, "index": self.index}


@dataclass(frozen=True)
class Struct:
    """typedef struct 로 선언된 구조체"""
    name: str
    members: Dict[str, Member] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "members": {name: m.to_dict() for name, m in self.members.items()},
        }


@dataclass(frozen=True)
class Function:
    """extern 으로 선언된 함수"""
    name: str
    output_type: str
    params: Dict[str, Parameter] = field(default_factory=dict)
    documentation: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "documentation": self.documentation,
            "output_type": self.output_type,
            "params": {name: p.to_dict() for name, p in self.params.items()},
        }


@dataclass(frozen=True)
class PreprocessResult:
    """매크로 전처리 결과"""
    flattened_text: str
    macros: Dict[str, MacroDefinition] = field(default_factory=dict)


@dataclass(frozen=True)
class ExtractionResult:
    """헤더 하나에 대한 최종 추출 결과"""
    structs: List[Struct] = field(default_factory=list)
    functions: List[Function] = field(default_factory=list)
    flattened_text: str = ""             # 진단/비교용 매크로 해석 텍스트

    def get_struct(self, name: str) -> Optional[Struct]:
        """이름으로 구조체 조회 (같은 이름이 여럿이면 마지막 것)"""
        found = None
        for struct in self.structs:
            if struct.name == name:
                found = struct
        return found

    def get_function(self, name: str) -> Optional[Function]:
        """이름으로 함수 조회 (같은 이름이 여럿이면 마지막 것)"""
        found = None
        for func in self.functions:
            if func.name == name:
                found = func
        return found

    def to_dict(self) -> dict:
        return {
            "structs": [s.to_dict() for s in self.structs],
            "functions": [f.to_dict() for f in self.functions],
        }
