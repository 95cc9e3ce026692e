"""GitHub 고정 저장소 쇼케이스 페이지 생성기."""

__version__ = "0.1.0"
