"""스케줄러 엔트리포인트 (GitHub Actions용)."""

import asyncio
import logging
import sys

from pinned_showcase.config import Settings
from pinned_showcase.pipeline import generate

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def run(settings: Settings) -> None:
    """스케줄러 메인 로직."""
    logger.info(f"Generating showcase for {settings.gh_user}")
    result = await generate(settings)
    logger.info(f"{result.output_path} generated with {len(result.cards)} cards")


def main() -> None:
    """CLI 엔트리포인트."""
    settings = Settings()
    if not settings.github_token:
        logger.error("GITHUB_TOKEN missing")
        sys.exit(1)

    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
