"""HTML 렌더링 테스트."""

from datetime import UTC, datetime, timedelta, timezone
from pathlib import Path

import pytest

from pinned_showcase.models import Card
from pinned_showcase.renderers.html import CardRenderer, format_timestamp

TEMPLATE = "<main><!-- REPO_CARDS --></main><footer><!-- UPDATED_AT --></footer>"


@pytest.fixture
def renderer() -> CardRenderer:
    return CardRenderer()


@pytest.fixture
def cards() -> list[Card]:
    """테스트용 카드 목록을 반환한다."""
    return [
        Card(
            name="with-image",
            url="https://github.com/octocat/with-image",
            description="line one\nline two",
            language="Rust",
            stars=42,
            forks=7,
            image="assets/with-image.png",
        ),
        Card(
            name="plain",
            url="https://github.com/octocat/plain",
        ),
    ]


class TestCardRenderer:
    """CardRenderer 테스트."""

    def test_card_with_image(self, renderer: CardRenderer, cards: list[Card]) -> None:
        html = renderer.render_card(cards[0])
        assert (
            '<div class="thumb"><img src="assets/with-image.png" '
            'alt="with-image screenshot"></div>'
        ) in html
        assert (
            '<a href="https://github.com/octocat/with-image" target="_blank" '
            'rel="noopener">with-image</a>'
        ) in html
        assert '<p class="desc">line one line two</p>' in html
        assert '<p class="stats">⭐ 42 • 🍴 7 • Rust</p>' in html

    def test_card_without_image(self, renderer: CardRenderer, cards: list[Card]) -> None:
        html = renderer.render_card(cards[1])
        assert "thumb" not in html
        assert '<p class="desc"></p>' in html
        assert '<p class="stats">⭐ 0 • 🍴 0 </p>' in html

    def test_description_is_not_escaped(self, renderer: CardRenderer) -> None:
        card = Card(name="x", url="u", description="<b>bold</b>")
        assert "<b>bold</b>" in renderer.render_card(card)

    def test_render_cards_keeps_order(
        self, renderer: CardRenderer, cards: list[Card]
    ) -> None:
        html = renderer.render_cards(cards)
        assert html.count('<article class="card">') == 2
        assert html.index("with-image") < html.index(">plain<")

    def test_render_page_replaces_markers(
        self, renderer: CardRenderer, cards: list[Card]
    ) -> None:
        moment = datetime(2024, 5, 1, 12, 30, 0, 123456, tzinfo=UTC)
        page = renderer.render_page(TEMPLATE, cards, moment)

        assert "<!-- REPO_CARDS -->" not in page
        assert "<footer>2024-05-01T12:30:00.123Z</footer>" in page
        assert page.startswith('<main><article class="card">')

    def test_render_page_replaces_first_occurrence_only(
        self, renderer: CardRenderer
    ) -> None:
        template = "<!-- REPO_CARDS --> <!-- REPO_CARDS --> <!-- UPDATED_AT -->"
        page = renderer.render_page(template, [], datetime.now(UTC))
        assert page.count("<!-- REPO_CARDS -->") == 1

    def test_render_page_is_stable_except_timestamp(
        self, renderer: CardRenderer, cards: list[Card]
    ) -> None:
        """같은 입력이면 생성 시각만 달라진다."""
        first_time = datetime(2024, 1, 1, tzinfo=UTC)
        second_time = first_time + timedelta(minutes=5)

        first = renderer.render_page(TEMPLATE, cards, first_time)
        second = renderer.render_page(TEMPLATE, cards, second_time)

        assert first != second
        assert first.replace(format_timestamp(first_time), "") == second.replace(
            format_timestamp(second_time), ""
        )

    def test_write(
        self, renderer: CardRenderer, cards: list[Card], tmp_path: Path
    ) -> None:
        template_path = tmp_path / "template.html"
        template_path.write_text(TEMPLATE, encoding="utf-8")
        output_path = tmp_path / "index.html"
        output_path.write_text("stale", encoding="utf-8")

        renderer.write(template_path, output_path, cards)

        content = output_path.read_text(encoding="utf-8")
        assert "stale" not in content
        assert content.count('<article class="card">') == 2


def test_format_timestamp_converts_to_utc() -> None:
    moment = datetime(2024, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=9)))
    assert format_timestamp(moment) == "2024-01-01T00:00:00.000Z"
