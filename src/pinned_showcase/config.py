"""설정 관리 모듈."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = Field(default=None, description="GitHub API 토큰")
    gh_user: str = Field(
        default="stevan-milovanovic",
        description="고정 저장소를 조회할 GitHub 로그인",
    )

    template_path: Path = Field(
        default=Path("template.html"),
        description="HTML 템플릿 경로",
    )
    output_path: Path = Field(
        default=Path("index.html"),
        description="생성할 HTML 파일 경로",
    )
    assets_dir: Path = Field(
        default=Path("assets"),
        description="다운로드한 이미지를 저장할 디렉터리",
    )

    http_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP 요청 타임아웃 (초)",
    )
    concurrency: int = Field(
        default=1,
        ge=1,
        description="동시에 처리할 저장소 수",
    )
