"""Category Catalog: 엔트리포인트.

1. 설정 로드 (.env + config/settings.yaml)
2. 의존성 컨테이너 조립 (저장소 / Blob Store 백엔드 선택)
3. 웹 서버 시작 또는 에셋 정합성 점검
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import uvicorn

# 프로젝트 루트를 sys.path에 추가
sys.path.insert(0, str(Path(__file__).parent))

from src.infrastructure.config.container import Container
from src.infrastructure.config.settings import AppConfig, Settings, load_app_config
from src.presentation.web.app import create_app

Path("logs").mkdir(exist_ok=True)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler("logs/app.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)


async def run_server(settings: Settings, config: AppConfig) -> None:
    """웹 서버 실행."""
    container = Container(settings=settings, app_config=config)

    app = create_app(container)
    server_config = uvicorn.Config(
        app,
        host=config.web.host,
        port=config.web.port,
        log_level="info",
    )
    server = uvicorn.Server(server_config)

    logger.info(
        f"서버 시작: http://{config.web.host}:{config.web.port} "
        f"(database: {config.database.backend}, storage: {config.storage.backend})"
    )
    await server.serve()


async def run_check_assets(settings: Settings, config: AppConfig) -> int:
    """에셋이 사라진 카테고리를 출력. 발견 건수를 반환."""
    container = Container(settings=settings, app_config=config)
    dangling = await container.category_service().find_dangling()

    if not dangling:
        print("모든 카테고리의 에셋이 존재합니다.")
        return 0

    print(f"에셋이 없는 카테고리 {len(dangling)}건:")
    for category in dangling:
        print(f"  id={category.id}  title='{category.title}'  image_id={category.image_id}")
    return len(dangling)


def main() -> None:
    parser = argparse.ArgumentParser(description="Category Catalog")
    subparsers = parser.add_subparsers(dest="command", help="실행 명령")

    subparsers.add_parser("serve", help="웹 서버 시작")
    subparsers.add_parser("check-assets", help="사라진 이미지 에셋을 가리키는 카테고리 점검")

    parser.add_argument(
        "--config", default="config/settings.yaml", help="YAML 설정 파일 경로",
    )

    args = parser.parse_args()

    settings = Settings()
    config = load_app_config(args.config)

    if args.command == "serve":
        asyncio.run(run_server(settings, config))
    elif args.command == "check-assets":
        found = asyncio.run(run_check_assets(settings, config))
        sys.exit(1 if found else 0)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
