"""출력 렌더링 모듈."""

from pinned_showcase.renderers.html import CardRenderer

__all__ = ["CardRenderer"]
