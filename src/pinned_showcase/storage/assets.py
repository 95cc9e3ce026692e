"""이미지 에셋 다운로드 모듈."""

import logging
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)


class AssetFetcher:
    """URL의 내용을 로컬 파일로 저장한다."""

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

    async def download(self, url: str, dest: Path) -> bool:
        """URL을 내려받아 dest에 저장한다. 실패하면 False를 반환한다."""
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            try:
                response = await client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning(f"Asset request failed {url}: {e}")
                return False

        if not response.is_success:
            logger.warning(f"Asset download error {url}: {response.status_code}")
            return False

        try:
            dest.write_bytes(response.content)
        except OSError as e:
            logger.warning(f"Failed to write asset {dest}: {e}")
            return False

        logger.debug(f"Saved {url} -> {dest}")
        return True
