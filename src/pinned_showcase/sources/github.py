"""GitHub GraphQL 고정 저장소 소스."""

import logging
from typing import Any

import httpx

from pinned_showcase.models import Repository

logger = logging.getLogger(__name__)

GRAPHQL_URL = "https://api.github.com/graphql"

PINNED_REPOSITORIES_QUERY = """
query($login: String!) {
  user(login: $login) {
    pinnedItems(first: 10, types: REPOSITORY) {
      nodes {
        ... on Repository {
          name
          description
          url
          stargazerCount
          forkCount
          primaryLanguage { name }
          defaultBranchRef { name }
        }
      }
    }
  }
}
"""


class GraphQLError(RuntimeError):
    """GraphQL 응답에 오류가 포함된 경우."""


class PinnedRepositorySource:
    """GitHub 사용자의 고정 저장소를 조회한다."""

    def __init__(
        self,
        token: str,
        login: str,
        endpoint: str = GRAPHQL_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            token: GitHub API 토큰 (bearer)
            login: 조회할 사용자 로그인
            endpoint: GraphQL 엔드포인트
            timeout: HTTP 요청 타임아웃 (초)
            transport: httpx 전송 계층. None이면 기본값 사용.
        """
        self.token = token
        self.login = login
        self.endpoint = endpoint
        self.timeout = timeout
        self.transport = transport

    def _extract_nodes(self, payload: dict[str, Any]) -> list[dict[str, Any]]:
        """응답 본문에서 저장소 노드 목록을 꺼낸다."""
        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(e.get("message", e)) for e in errors)
            raise GraphQLError(f"GraphQL query failed: {messages}")

        user = (payload.get("data") or {}).get("user")
        if user is None:
            raise GraphQLError(f"GitHub user not found: {self.login}")

        pinned = user.get("pinnedItems") or {}
        nodes = pinned.get("nodes") or []
        # types: REPOSITORY 이므로 빈 노드는 접근 불가 저장소뿐이다
        kept = [node for node in nodes if node]
        if len(kept) != len(nodes):
            logger.debug(f"Dropped {len(nodes) - len(kept)} empty pinned item nodes")
        return kept

    async def fetch(self) -> list[Repository]:
        """고정 저장소 목록을 응답 순서대로 가져온다."""
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            response = await client.post(
                self.endpoint,
                json={
                    "query": PINNED_REPOSITORIES_QUERY,
                    "variables": {"login": self.login},
                },
                headers={"Authorization": f"bearer {self.token}"},
            )
            response.raise_for_status()

        nodes = self._extract_nodes(response.json())
        logger.debug(f"Fetched {len(nodes)} pinned repositories for {self.login}")
        return [Repository.from_node(node) for node in nodes]
