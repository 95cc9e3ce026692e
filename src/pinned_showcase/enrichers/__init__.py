"""저장소 정보 enrichment 모듈."""

from pinned_showcase.enrichers.readme import ReadmeImageResolver

__all__ = ["ReadmeImageResolver"]
