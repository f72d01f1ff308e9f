"""
헤더 추출기 설정 테스트
"""
import pytest
import os
import sys

import yaml

# 상위 디렉토리를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from header_extractor import ExtractorConfig


class TestExtractorConfig:
    """ExtractorConfig 테스트"""

    def test_defaults(self):
        config = ExtractorConfig()

        assert config.IGNORED_TOKENS == ("const",)
        assert list(config.COMMENT_FORMATTING) == [
            "\\sa", "\\brief ", "\\note", "\\return", "\\li", "\\param",
        ]
        assert config.COMMENT_FORMATTING["\\brief "] == ""
        assert config.PREDEFINED_MACROS == {}
        assert config.STRIP_LINE_COMMENTS is True

    def test_defaults_not_shared(self):
        first = ExtractorConfig()
        first.COMMENT_FORMATTING["\\x"] = "y"
        assert "\\x" not in ExtractorConfig().COMMENT_FORMATTING

    def test_from_dict_case_insensitive(self):
        config = ExtractorConfig.from_dict({
            "ignored_tokens": ["const", "DECLSPEC", "SDLCALL"],
            "PREDEFINED_MACROS": {"FEATURE": 1, "EMPTY": None},
        })

        assert config.IGNORED_TOKENS == ("const", "DECLSPEC", "SDLCALL")
        assert config.PREDEFINED_MACROS == {"FEATURE": "1", "EMPTY": ""}

    def test_from_dict_unknown_key_ignored(self):
        config = ExtractorConfig.from_dict({"no_such_option": True})
        assert config == ExtractorConfig()

    def test_from_dict_invalid_tokens(self):
        with pytest.raises(ValueError):
            ExtractorConfig.from_dict({"ignored_tokens": "const"})

    def test_from_dict_invalid_table(self):
        with pytest.raises(ValueError):
            ExtractorConfig.from_dict({"comment_formatting": ["\\sa"]})

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "extractor.yaml"
        path.write_text(
            "ignored_tokens:\n"
            "  - const\n"
            "  - SDLCALL\n"
            "comment_formatting:\n"
            "  '\\sa': 'See:'\n"
            "strip_line_comments: false\n",
            encoding="utf-8",
        )
        config = ExtractorConfig.from_yaml(str(path))

        assert config.IGNORED_TOKENS == ("const", "SDLCALL")
        assert config.COMMENT_FORMATTING == {"\\sa": "See:"}
        assert config.STRIP_LINE_COMMENTS is False

    def test_from_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert ExtractorConfig.from_yaml(str(path)) == ExtractorConfig()

    def test_from_yaml_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ExtractorConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_from_yaml_not_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            ExtractorConfig.from_yaml(str(path))

    def test_from_yaml_invalid(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("key: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            ExtractorConfig.from_yaml(str(path))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
