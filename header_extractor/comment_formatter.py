"""
문서 주석 포맷터
Doxygen 스타일 태그(\\sa, \\param ...)를 JSDoc 스타일(@see, @param ...)로 바꿉니다.
"""
from typing import Mapping, Optional

from .config import default_comment_formatting


class CommentFormatter:
    """
    문서 주석 태그 변환기

    테이블 선언 순서대로 각 태그를 문자열 전체에서 단순 치환합니다.
    테이블에 없는 태그는 그대로 남습니다.

    사용 예:
        formatter = CommentFormatter()
        formatter.format("/** \\\\sa SDL_Foo */")
        # "/** @see SDL_Foo */"
    """

    def __init__(self, table: Optional[Mapping[str, str]] = None):
        self.table = dict(default_comment_formatting() if table is None else table)

    def format(self, comment: Optional[str]) -> Optional[str]:
        if comment is None:
            return None
        for tag, replacement in self.table.items():
            comment = comment.replace(tag, replacement)
        return comment
