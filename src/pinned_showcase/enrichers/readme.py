"""README 대표 이미지 탐색 모듈."""

import logging
import posixpath
import re
from urllib.parse import urlsplit

import httpx
from selectolax.lexbor import LexborHTMLParser

from pinned_showcase.models import ResolvedImage

logger = logging.getLogger(__name__)

RAW_CONTENT_BASE = "https://raw.githubusercontent.com"

# 대소문자 구분, 순서대로 시도
README_FILES = ["README.md", "readme.md"]

DEFAULT_BRANCH = "main"
DEFAULT_EXTENSION = ".png"

MARKDOWN_IMAGE_RE = re.compile(r"!\[.*?\]\((.*?)\)", re.IGNORECASE)
ABSOLUTE_URL_RE = re.compile(r"^https?://", re.IGNORECASE)
RELATIVE_PREFIXES = ("./", "../", "images/")
UNSAFE_FILENAME_RE = re.compile(r"[^a-zA-Z0-9\-]")


def extract_image_url(text: str) -> str | None:
    """README 본문에서 첫 번째 이미지 URL을 찾는다.

    마크다운 이미지(``![alt](url)``)가 우선이고, 없으면 첫 번째 ``<img>``
    태그의 ``src``를 사용한다.
    """
    match = MARKDOWN_IMAGE_RE.search(text)
    if match:
        # ![alt](url "title") 형태의 title 제거
        url = match.group(1).split('"')[0].strip()
        if url:
            return url

    for node in LexborHTMLParser(text).css("img"):
        src = (node.attributes.get("src") or "").strip()
        if src:
            return src
    return None


def normalize_image_url(url: str, repo_full: str, branch: str) -> str:
    """상대 경로 이미지를 raw content 절대 URL로 바꾼다."""
    if url.startswith(RELATIVE_PREFIXES) or not ABSOLUTE_URL_RE.match(url):
        cleaned = re.sub(r"^\./", "", url).lstrip("/")
        return f"{RAW_CONTENT_BASE}/{repo_full}/{branch}/{cleaned}"
    return url


def image_extension(url: str) -> str:
    """URL 경로에서 확장자를 구한다 (쿼리 문자열 제외)."""
    _, ext = posixpath.splitext(urlsplit(url).path)
    return ext or DEFAULT_EXTENSION


def local_filename(name: str, url: str) -> str:
    """저장소 이름과 이미지 URL로 로컬 파일 이름을 만든다."""
    return UNSAFE_FILENAME_RE.sub("_", name) + image_extension(url)


class ReadmeImageResolver:
    """README에서 저장소 대표 이미지를 찾는다."""

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            timeout: HTTP 요청 타임아웃 (초)
            transport: httpx 전송 계층. None이면 기본값 사용.
        """
        self.timeout = timeout
        self.transport = transport

    async def fetch_readme(self, repo_full: str, branch: str) -> str | None:
        """GitHub raw content에서 README를 가져온다."""
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            for filename in README_FILES:
                url = f"{RAW_CONTENT_BASE}/{repo_full}/{branch}/{filename}"
                try:
                    response = await client.get(url)
                    if response.is_success:
                        return str(response.text)
                except httpx.HTTPError as e:
                    logger.debug(f"README candidate failed {url}: {e}")
                    continue
        return None

    async def resolve(
        self,
        repo_full: str,
        name: str,
        branch: str | None = None,
    ) -> ResolvedImage | None:
        """저장소의 대표 이미지 URL과 로컬 파일 이름을 구한다.

        Args:
            repo_full: ``owner/repo`` 형태의 저장소 식별자
            name: 저장소 이름 (로컬 파일 이름에 사용)
            branch: 기본 브랜치. None이면 ``main``.

        Returns:
            README나 이미지 참조가 없으면 None
        """
        branch = branch or DEFAULT_BRANCH

        readme = await self.fetch_readme(repo_full, branch)
        if not readme:
            logger.debug(f"No README for {repo_full}")
            return None

        url = extract_image_url(readme)
        if not url:
            logger.debug(f"No image reference in README of {repo_full}")
            return None

        try:
            url = normalize_image_url(url, repo_full, branch)
            filename = local_filename(name, url)
        except ValueError as e:
            logger.debug(f"Malformed image URL in README of {repo_full}: {e}")
            return None
        return ResolvedImage(url=url, filename=filename)
