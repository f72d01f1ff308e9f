"""
추출 결과 내보내기 테스트
"""
import json
import pytest
import os
import sys

import yaml

# 상위 디렉토리를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from header_extractor import extract_header, to_json, to_yaml, render_listing, export_result
from header_extractor.exporter import render


@pytest.fixture
def result():
    return extract_header(
        "typedef struct { int a; float b; } Point;\n"
        "/** \\brief Move it \\sa stop */\n"
        "extern void move(Point *p, int dx);\n"
        "extern int stop(void);\n"
    )


class TestSerialization:
    """JSON / YAML 직렬화 테스트"""

    def test_to_dict_order(self, result):
        data = result.to_dict()

        assert list(data) == ["structs", "functions"]
        assert list(data["structs"][0]["members"]) == ["a", "b"]
        assert list(data["functions"][0]["params"]) == ["p", "dx"]

    def test_to_json(self, result):
        data = json.loads(to_json(result))

        assert data["structs"][0] == {
            "name": "Point",
            "members": {
                "a": {"type": "int", "index": 0},
                "b": {"type": "float", "index": 1},
            },
        }
        move = data["functions"][0]
        assert move["name"] == "move"
        assert move["output_type"] == "void"
        assert move["documentation"] == "/** Move it @see stop */"
        assert move["params"]["p"] == {"type": "Point*", "index": 0}
        assert data["functions"][1]["documentation"] is None

    def test_to_yaml_keeps_order(self, result):
        text = to_yaml(result)
        data = yaml.safe_load(text)

        assert data == result.to_dict()
        assert text.index("structs:") < text.index("functions:")
        assert text.index("name: move") < text.index("name: stop")


class TestListing:
    """진단용 목록 출력 테스트"""

    def test_render_listing(self, result):
        listing = render_listing(result)

        assert listing.startswith("{\n")
        assert listing.endswith("\n}")
        assert "/** Move it @see stop */\nmove: {" in listing
        assert '"output": "void"' in listing
        assert "},\nstop: {" in listing

    def test_empty_listing(self):
        assert render_listing(extract_header("")) == "{\n\n}"


class TestExport:
    """파일 저장 테스트"""

    @pytest.mark.parametrize("fmt", ["json", "yaml", "listing"])
    def test_export_result(self, result, tmp_path, fmt):
        output = tmp_path / "out" / f"result.{fmt}"
        path = export_result(result, str(output), fmt)

        assert path == output
        assert output.read_text(encoding="utf-8") == render(result, fmt)

    def test_export_flattened(self, result, tmp_path):
        output = tmp_path / "flat.h"
        export_result(result, str(output), "json", flattened=True)
        assert output.read_text(encoding="utf-8") == result.flattened_text

    def test_unknown_format(self, result, tmp_path):
        with pytest.raises(ValueError):
            export_result(result, str(tmp_path / "x.txt"), "xml")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
