"""쇼케이스 페이지 생성 파이프라인."""

import asyncio
import logging
import os
from pathlib import Path
from typing import NamedTuple

import httpx

from pinned_showcase.config import Settings
from pinned_showcase.enrichers import ReadmeImageResolver
from pinned_showcase.models import Card, Repository
from pinned_showcase.renderers import CardRenderer
from pinned_showcase.sources import PinnedRepositorySource
from pinned_showcase.storage import AssetFetcher

logger = logging.getLogger(__name__)


class GenerationResult(NamedTuple):
    """생성 결과."""

    output_path: Path
    cards: list[Card]


async def build_card(
    repo: Repository,
    login: str,
    resolver: ReadmeImageResolver,
    fetcher: AssetFetcher,
    assets_dir: Path,
    output_dir: Path,
) -> Card:
    """저장소 하나의 이미지를 찾아 내려받고 카드를 만든다."""
    repo_full = f"{login}/{repo.name}"
    image = await resolver.resolve(repo_full, repo.name, repo.default_branch)
    if image is None:
        return Card.from_repository(repo)

    dest = assets_dir / image.filename
    if not await fetcher.download(image.url, dest):
        return Card.from_repository(repo)

    relative = Path(os.path.relpath(dest, output_dir)).as_posix()
    return Card.from_repository(repo, image=relative)


async def build_cards(
    repositories: list[Repository],
    login: str,
    resolver: ReadmeImageResolver,
    fetcher: AssetFetcher,
    assets_dir: Path,
    output_dir: Path,
    concurrency: int = 1,
) -> list[Card]:
    """저장소 목록을 입력 순서 그대로 카드 목록으로 변환한다.

    concurrency가 1이면 저장소를 하나씩 순서대로 처리한다. 더 크면 동시에
    처리하는 저장소 수를 제한하되 결과는 입력 순서를 유지한다.
    """
    if concurrency <= 1:
        cards = []
        for repo in repositories:
            cards.append(
                await build_card(repo, login, resolver, fetcher, assets_dir, output_dir)
            )
        return cards

    semaphore = asyncio.Semaphore(concurrency)

    async def _bounded(repo: Repository) -> Card:
        async with semaphore:
            return await build_card(
                repo, login, resolver, fetcher, assets_dir, output_dir
            )

    # gather는 완료 순서와 관계없이 입력 순서로 결과를 돌려준다
    return list(await asyncio.gather(*(_bounded(repo) for repo in repositories)))


async def generate(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GenerationResult:
    """고정 저장소를 조회해 HTML 페이지를 생성한다.

    조회 단계의 오류는 그대로 전파되며 이 경우 출력 파일은 쓰지 않는다.

    Args:
        settings: 실행 설정
        transport: 모든 HTTP 요청에 쓸 httpx 전송 계층. None이면 기본값 사용.

    Raises:
        ValueError: GitHub 토큰이 설정되지 않은 경우
    """
    if not settings.github_token:
        raise ValueError("GITHUB_TOKEN missing")

    source = PinnedRepositorySource(
        token=settings.github_token,
        login=settings.gh_user,
        timeout=settings.http_timeout,
        transport=transport,
    )
    repositories = await source.fetch()
    logger.info(f"Fetched {len(repositories)} pinned repositories")

    settings.assets_dir.mkdir(parents=True, exist_ok=True)

    cards = await build_cards(
        repositories,
        login=settings.gh_user,
        resolver=ReadmeImageResolver(timeout=settings.http_timeout, transport=transport),
        fetcher=AssetFetcher(timeout=settings.http_timeout, transport=transport),
        assets_dir=settings.assets_dir,
        output_dir=settings.output_path.parent,
        concurrency=settings.concurrency,
    )
    with_images = sum(1 for card in cards if card.image)
    logger.info(f"Resolved images for {with_images}/{len(cards)} repositories")

    output_path = CardRenderer().write(
        settings.template_path, settings.output_path, cards
    )
    return GenerationResult(output_path=output_path, cards=cards)
