"""
문서 주석 포맷터 테스트
"""
import pytest
import os
import sys

# 상위 디렉토리를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from header_extractor import CommentFormatter


class TestCommentFormatter:
    """CommentFormatter 테스트"""

    @pytest.fixture
    def formatter(self):
        return CommentFormatter()

    def test_see_also(self, formatter):
        assert formatter.format("\\sa SDL_Foo") == "@see SDL_Foo"

    def test_brief_removed(self, formatter):
        assert formatter.format("\\brief Get the thing") == "Get the thing"

    def test_all_tags(self, formatter):
        comment = (
            "/**\n"
            " *  \\brief Summary\n"
            " *  \\param index which one\n"
            " *  \\return the value\n"
            " *  \\note be careful\n"
            " *  \\li first\n"
            " *  \\sa other\n"
            " */"
        )
        expected = (
            "/**\n"
            " *  Summary\n"
            " *  @param index which one\n"
            " *  @returns the value\n"
            " *  @remarks be careful\n"
            " *  * first\n"
            " *  @see other\n"
            " */"
        )
        assert formatter.format(comment) == expected

    def test_replaced_globally(self, formatter):
        assert formatter.format("\\sa a \\sa b") == "@see a @see b"

    def test_unknown_tags_unchanged(self, formatter):
        assert formatter.format("\\code x \\endcode") == "\\code x \\endcode"

    def test_literal_substring_replacement(self, formatter):
        # 단순 치환이므로 \returns 는 @returnss 가 됨
        assert formatter.format("\\returns 0") == "@returnss 0"

    def test_none_passthrough(self, formatter):
        assert formatter.format(None) is None

    def test_table_order(self):
        formatter = CommentFormatter({"ab": "b", "bb": "c"})
        assert formatter.format("abb") == "c"

    def test_custom_table_replaces_default(self):
        formatter = CommentFormatter({"\\param": ":param"})
        assert formatter.format("\\param x \\sa y") == ":param x \\sa y"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
