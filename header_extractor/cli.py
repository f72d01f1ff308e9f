"""
헤더 추출기의 커맨드 라인 진입점입니다.
헤더 파일을 읽어 파이프라인을 실행하고 결과를 출력하거나 파일로 저장합니다.
"""
import argparse
import sys
from typing import List, Optional

import yaml

from shared_config.logger import configure_console, setup_file_logging

from .config import ExtractorConfig
from .pipeline import HeaderExtractor
from .exporter import FORMATS, render, export_result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='header_extractor',
        description='C 헤더에서 매크로/구조체/extern 함수 선언을 추출합니다'
    )
    parser.add_argument('header', nargs='+', help='입력 헤더 파일 (여러 개면 파일마다 따로 처리)')
    parser.add_argument('--format', choices=FORMATS, default='json', help='출력 형식')
    parser.add_argument('--config', help='YAML 설정 파일')
    parser.add_argument('--output', help='출력 파일 (헤더가 하나일 때만)')
    parser.add_argument('--flattened', action='store_true', help='매크로 해석 텍스트를 출력 (--output 이 있으면 파일로 저장)')
    parser.add_argument('--verbose', action='store_true', help='DEBUG 로그 출력')
    parser.add_argument('--log-dir', help='로그 파일 디렉토리')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_console('DEBUG' if args.verbose else 'WARNING')
    if args.log_dir:
        setup_file_logging(args.log_dir)

    if args.output and len(args.header) > 1:
        print("Error: --output 은 헤더가 하나일 때만 사용할 수 있습니다", file=sys.stderr)
        return 1

    try:
        config = ExtractorConfig.from_yaml(args.config) if args.config else ExtractorConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: 설정 로드 실패: {e}", file=sys.stderr)
        return 1

    extractor = HeaderExtractor(config)

    for header in args.header:
        try:
            with open(header, 'r', encoding='utf-8', errors='ignore') as f:
                text = f.read()
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        # 파일마다 독립 실행 (매크로 테이블 공유 없음)
        result = extractor.extract(text)

        if args.output:
            export_result(result, args.output, args.format, flattened=args.flattened)
        elif args.flattened:
            print(result.flattened_text)
        else:
            print(render(result, args.format))

    return 0


if __name__ == "__main__":
    sys.exit(main())
