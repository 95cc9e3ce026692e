"""데이터 모델 정의."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Repository(BaseModel):
    """GitHub 고정 저장소 정보."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="저장소 이름")
    url: str = Field(description="저장소 URL")
    description: str | None = Field(default=None, description="저장소 설명")
    language: str | None = Field(default=None, description="주 프로그래밍 언어")
    stars: int = Field(default=0, description="총 스타 수")
    forks: int = Field(default=0, description="포크 수")
    default_branch: str | None = Field(default=None, description="기본 브랜치 이름")

    @classmethod
    def from_node(cls, node: dict[str, Any]) -> "Repository":
        """GraphQL 응답 노드에서 저장소를 생성한다."""
        language = node.get("primaryLanguage") or {}
        branch = node.get("defaultBranchRef") or {}
        return cls(
            name=node["name"],
            url=node["url"],
            description=node.get("description"),
            language=language.get("name"),
            stars=node.get("stargazerCount") or 0,
            forks=node.get("forkCount") or 0,
            default_branch=branch.get("name"),
        )


class ResolvedImage(BaseModel):
    """README에서 찾은 대표 이미지."""

    url: str = Field(description="다운로드할 절대 URL")
    filename: str = Field(description="로컬 파일 이름")


class Card(BaseModel):
    """페이지에 렌더링할 저장소 카드."""

    name: str
    url: str
    description: str = ""
    language: str = ""
    stars: int = 0
    forks: int = 0
    image: str | None = Field(default=None, description="출력 파일 기준 이미지 경로")

    @classmethod
    def from_repository(cls, repo: Repository, image: str | None = None) -> "Card":
        """저장소 정보와 이미지 경로로 카드를 만든다."""
        return cls(
            name=repo.name,
            url=repo.url,
            description=repo.description or "",
            language=repo.language or "",
            stars=repo.stars,
            forks=repo.forks,
            image=image,
        )
