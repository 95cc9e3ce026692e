"""CLI 엔트리포인트."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from pinned_showcase.config import Settings
from pinned_showcase.models import Card
from pinned_showcase.pipeline import GenerationResult, generate

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="pinned-showcase",
    help="GitHub 고정 저장소로 정적 쇼케이스 페이지를 생성합니다.",
    no_args_is_help=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(name)s - %(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _render_summary(cards: list[Card]) -> None:
    """생성된 카드 목록을 Rich 테이블로 출력한다."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("저장소", style="bold")
    table.add_column("언어", width=12)
    table.add_column("⭐ Stars", justify="right")
    table.add_column("🍴 Forks", justify="right")
    table.add_column("이미지")

    for i, card in enumerate(cards, 1):
        table.add_row(
            str(i),
            f"[link={card.url}]{card.name}[/link]",
            card.language or "-",
            f"{card.stars:,}",
            f"{card.forks:,}",
            f"[green]{card.image}[/green]" if card.image else "[dim]-[/dim]",
        )

    console.print(table)


async def _run(settings: Settings) -> GenerationResult:
    """메인 파이프라인을 실행한다."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(
            f"{settings.gh_user}의 고정 저장소로 페이지 생성 중...", total=None
        )
        return await generate(settings)


@app.command()
def main(
    user: Annotated[
        str | None,
        typer.Option("--user", "-u", help="GitHub 로그인 (기본값: GH_USER)"),
    ] = None,
    template: Annotated[
        Path | None,
        typer.Option("--template", "-t", help="HTML 템플릿 경로"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="생성할 HTML 파일 경로"),
    ] = None,
    assets_dir: Annotated[
        Path | None,
        typer.Option("--assets-dir", help="이미지 저장 디렉터리"),
    ] = None,
    concurrency: Annotated[
        int | None,
        typer.Option("--concurrency", "-c", min=1, help="동시에 처리할 저장소 수"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="상세 로그 출력"),
    ] = False,
) -> None:
    """GitHub 고정 저장소로 정적 쇼케이스 페이지를 생성합니다."""
    _configure_logging(verbose)

    overrides: dict[str, Any] = {
        "gh_user": user,
        "template_path": template,
        "output_path": output,
        "assets_dir": assets_dir,
        "concurrency": concurrency,
    }
    settings = Settings(**{k: v for k, v in overrides.items() if v is not None})

    if not settings.github_token:
        err_console.print("[red]GITHUB_TOKEN missing[/red]")
        raise typer.Exit(1)

    try:
        result = asyncio.run(_run(settings))
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None
    except Exception as e:
        err_console.print(f"[red]오류 발생: {e}[/red]")
        raise typer.Exit(1) from e

    _render_summary(result.cards)
    console.print(
        f"[green]✓[/green] {result.output_path} generated with {len(result.cards)} cards"
    )


if __name__ == "__main__":
    app()
