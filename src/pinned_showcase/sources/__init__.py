"""데이터 소스 모듈."""

from pinned_showcase.sources.github import GraphQLError, PinnedRepositorySource

__all__ = ["GraphQLError", "PinnedRepositorySource"]
