#!/usr/bin/env python3
"""
헤딩 트리 → TOC 변환 실행 스크립트
"""

import sys
import json
import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from tocmap import (
    Config,
    validate_config,
    TOCRemapper,
    TOCError,
    split_heading,
    toc_to_dicts,
    format_toc_markdown,
    format_toc_tree,
    count_items,
    max_depth,
)
from tocmap.core.config import OUTPUT_FORMATS

logger = logging.getLogger(__name__)

COMPILED_SOURCE_SUFFIX = ".mdx.js"


def setup_logging(level: str):
    """로깅 설정"""
    logging.basicConfig(
        level=level.upper(), format="%(asctime)s - %(levelname)s - %(message)s"
    )


def load_heading_tree(path: Path):
    """헤딩 트리 JSON 파일을 읽습니다."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise TOCError(f"헤딩 트리는 JSON 배열이어야 합니다: {path}")
    return data


def read_compiled_source(path) -> str:
    """컴파일된 소스 파일을 읽습니다. 경로가 없으면 빈 문자열을 반환합니다."""
    if not path:
        return ""
    return Path(path).read_text(encoding="utf-8")


def render_toc(items, output_format: str, json_indent: int) -> str:
    """TOC를 지정된 형식의 문자열로 변환합니다."""
    if output_format == "markdown":
        return format_toc_markdown(items)
    if output_format == "tree":
        return format_toc_tree(items)
    return json.dumps(toc_to_dicts(items), indent=json_indent, ensure_ascii=False)


def remap_command(args):
    """헤딩 트리 파일 하나를 TOC로 변환하는 명령"""
    try:
        config = Config()
        validate_config(config)

        remapper = TOCRemapper(h1_pattern=config.h1_pattern)
        nodes = load_heading_tree(Path(args.nodes_file))
        compiled_source = read_compiled_source(args.source)

        items = remapper.remap(nodes, compiled_source, h1_count=args.h1_count)
        output = render_toc(
            items, args.format or config.output_format, config.json_indent
        )

        if args.output:
            Path(args.output).write_text(output + "\n", encoding="utf-8")
            print(
                f"✅ TOC 저장 완료: {args.output} "
                f"({count_items(items)}개 항목, 깊이 {max_depth(items)})"
            )
        else:
            print(output)

    except (TOCError, ValueError, OSError) as e:
        logger.error(f"TOC 변환 중 오류 발생: {e}")
        return 1
    return 0


def batch_command(args):
    """디렉토리의 헤딩 트리 파일들을 일괄 변환하는 명령"""
    try:
        config = Config()
        validate_config(config)

        input_dir = Path(args.directory)
        if not input_dir.is_dir():
            print(f"❌ 디렉토리를 찾을 수 없습니다: {input_dir}")
            return 1

        output_dir = Path(args.output_dir) if args.output_dir else input_dir
        output_dir.mkdir(parents=True, exist_ok=True)

        files = sorted(input_dir.glob(args.pattern))
        if not files:
            print("🔍 변환할 파일이 없습니다.")
            return 0

        remapper = TOCRemapper(h1_pattern=config.h1_pattern)
        failed = 0

        for nodes_file in tqdm(files, desc="TOC 변환"):
            stem = nodes_file.name.split(".", 1)[0]
            source_file = nodes_file.with_name(stem + COMPILED_SOURCE_SUFFIX)
            try:
                nodes = load_heading_tree(nodes_file)
                compiled_source = read_compiled_source(
                    source_file if source_file.exists() else None
                )
                items = remapper.remap(nodes, compiled_source)
                output_file = output_dir / f"{stem}.toc.out.json"
                output_file.write_text(
                    render_toc(items, "json", config.json_indent) + "\n",
                    encoding="utf-8",
                )
                logger.debug(f"{nodes_file.name} -> {output_file.name}")
            except (TOCError, ValueError, OSError) as e:
                logger.error(f"{nodes_file} 변환 실패: {e}")
                failed += 1

        print(f"✅ {len(files) - failed}/{len(files)}개 파일 변환 완료")
        if failed:
            return 1

    except (ValueError, OSError) as e:
        logger.error(f"일괄 변환 중 오류 발생: {e}")
        return 1
    return 0


def heading_command(args):
    """헤딩 문자열의 표시용 제목과 앵커를 출력하는 명령"""
    for text in args.headings:
        title, anchor = split_heading(text)
        print(f"{title!r} -> #{anchor}")
    return 0


def config_command(args):
    """현재 설정 출력 명령"""
    Config.print_config()
    errors = Config.validate()
    if errors:
        for error in errors:
            print(f"❌ {error}")
        return 1
    print("✅ 설정이 유효합니다.")
    return 0


def create_parser():
    """명령행 인수 파서 생성"""
    parser = argparse.ArgumentParser(
        description="헤딩 트리 → TOC 변환 도구",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예제:
  # 헤딩 트리 변환 (컴파일된 소스로 h1 개수 판단)
  tocmap remap page.toc.json --source page.mdx.js

  # 마크다운 목록으로 출력
  tocmap remap page.toc.json --h1-count 1 --format markdown

  # 디렉토리 일괄 변환
  tocmap batch content/ --output-dir build/toc

  # 헤딩 앵커 확인
  tocmap heading "A note on names {#a-note-on-names}"
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="사용 가능한 명령어")

    # remap 명령
    remap_parser = subparsers.add_parser("remap", help="헤딩 트리 파일 변환")
    remap_parser.add_argument("nodes_file", help="헤딩 트리 JSON 파일 경로")
    remap_parser.add_argument("--source", help="컴파일된 문서 소스 파일 경로")
    remap_parser.add_argument(
        "--h1-count", type=int, help="h1 개수 직접 지정 (소스 검사 생략)"
    )
    remap_parser.add_argument(
        "--format", choices=OUTPUT_FORMATS, help="출력 형식 (기본값: 설정값)"
    )
    remap_parser.add_argument("--output", help="결과를 저장할 파일 경로")

    # batch 명령
    batch_parser = subparsers.add_parser("batch", help="디렉토리 일괄 변환")
    batch_parser.add_argument("directory", help="헤딩 트리 파일이 있는 디렉토리")
    batch_parser.add_argument(
        "--pattern",
        default="*.toc.json",
        help="헤딩 트리 파일 패턴 (기본값: *.toc.json)",
    )
    batch_parser.add_argument("--output-dir", help="결과 저장 디렉토리")

    # heading 명령
    heading_parser = subparsers.add_parser("heading", help="헤딩 앵커 확인")
    heading_parser.add_argument("headings", nargs="+", help="헤딩 문자열")

    # config 명령
    subparsers.add_parser("config", help="현재 설정 출력")

    return parser


def main(argv=None):
    """메인 함수"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        setup_logging(Config.LOG_LEVEL)
    except ValueError:
        setup_logging("INFO")

    # 명령 실행
    if args.command == "remap":
        return remap_command(args)
    elif args.command == "batch":
        return batch_command(args)
    elif args.command == "heading":
        return heading_command(args)
    elif args.command == "config":
        return config_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
