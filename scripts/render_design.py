"""
단일 렌더링 CLI

디자인 또는 템플릿을 렌더링하고 결과를 파일로 저장합니다.

사용법:
    # 동기 렌더링 (바이너리 즉시 저장)
    python scripts/render_design.py --design-id abc123 --output out.png

    # 비동기 렌더링 후 완료 대기
    python scripts/render_design.py --template-id tpl_1 --data '{"title": "Hello"}' --async

    # 작업 제출만 (대기 안함)
    python scripts/render_design.py --design-id abc123 --async --no-wait
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from canvelete import CanveleteClient, CanveleteError, ClientConfig, ConfigurationError, format_error


def parse_args():
    """CLI 인자 파싱"""
    parser = argparse.ArgumentParser(
        description="Canvelete 렌더링 CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--design-id", "-d", type=str, help="렌더링할 디자인 ID")
    target.add_argument("--template-id", "-t", type=str, help="렌더링할 템플릿 ID")

    parser.add_argument(
        "--data",
        type=str,
        help="동적 데이터 (JSON 문자열)",
    )
    parser.add_argument(
        "--format",
        "-f",
        type=str,
        default="png",
        choices=["png", "jpg", "jpeg", "pdf", "svg"],
        help="출력 포맷 (기본: png)",
    )
    parser.add_argument("--width", type=int, help="출력 너비")
    parser.add_argument("--height", type=int, help="출력 높이")
    parser.add_argument("--quality", type=int, default=90, help="품질 1~100 (기본: 90)")
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="출력 파일 경로 (기본: render.<format>)",
    )

    # 실행 모드
    parser.add_argument(
        "--async",
        dest="use_async",
        action="store_true",
        help="비동기 작업으로 제출",
    )
    parser.add_argument(
        "--no-wait",
        action="store_true",
        help="비동기 작업 제출 후 대기 안함",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=300.0,
        help="완료 대기 타임아웃 (초, 기본: 300)",
    )

    return parser.parse_args()


async def render(args) -> int:
    """렌더링 실행"""
    config = ClientConfig.from_env_validated()
    client = CanveleteClient.from_config(config)

    dynamic_data = json.loads(args.data) if args.data else None
    output = args.output or f"render.{args.format}"

    if not args.use_async:
        image = await client.render.create(
            design_id=args.design_id,
            template_id=args.template_id,
            dynamic_data=dynamic_data,
            format=args.format,
            width=args.width,
            height=args.height,
            quality=args.quality,
            output_file=output,
        )
        print(f"[Render] 완료: {output} ({len(image)} bytes)")
        return 0

    job = await client.render.create_async(
        design_id=args.design_id,
        template_id=args.template_id,
        dynamic_data=dynamic_data,
        format=args.format,
        width=args.width,
        height=args.height,
        quality=args.quality,
    )
    print(f"[Render] 작업 제출: {job.job_id} (status={job.status})")

    if args.no_wait:
        return 0

    record = await client.render.wait_for_completion(
        job.job_id,
        timeout=args.timeout,
        on_status=lambda r: print(f"[Render] 상태: {r.status}"),
    )
    print(f"[Render] 완료: {record.output_url}")
    return 0


def main() -> None:
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    args = parse_args()
    try:
        exit_code = asyncio.run(render(args))
    except ConfigurationError as e:
        print(f"[Error] 설정 오류: {e}")
        exit_code = 2
    except CanveleteError as e:
        print(f"[Error] {format_error(e)}")
        exit_code = 1
    except KeyboardInterrupt:
        print("\n[Render] 중단됨")
        exit_code = 130

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
