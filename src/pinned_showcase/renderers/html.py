"""HTML 카드 렌더링 모듈."""

import logging
from datetime import UTC, datetime
from pathlib import Path

from pinned_showcase.models import Card

logger = logging.getLogger(__name__)

CARDS_MARKER = "<!-- REPO_CARDS -->"
UPDATED_AT_MARKER = "<!-- UPDATED_AT -->"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC 문자열로 변환한다 (예: 2024-01-01T00:00:00.000Z)."""
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CardRenderer:
    """카드 목록을 HTML 템플릿에 삽입한다."""

    def render_card(self, card: Card) -> str:
        """카드 하나를 HTML 조각으로 만든다."""
        img_tag = (
            f'<div class="thumb"><img src="{card.image}" alt="{card.name} screenshot"></div>'
            if card.image
            else ""
        )
        desc = card.description.replace("\n", " ")
        lang = f"• {card.language}" if card.language else ""
        return f"""<article class="card">
      {img_tag}
      <div class="meta">
        <h3><a href="{card.url}" target="_blank" rel="noopener">{card.name}</a></h3>
        <p class="desc">{desc}</p>
        <p class="stats">⭐ {card.stars} • 🍴 {card.forks} {lang}</p>
      </div>
    </article>"""

    def render_cards(self, cards: list[Card]) -> str:
        """카드 HTML 조각들을 입력 순서대로 이어 붙인다."""
        return "\n".join(self.render_card(card) for card in cards)

    def render_page(
        self,
        template: str,
        cards: list[Card],
        generated_at: datetime,
    ) -> str:
        """템플릿의 마커를 카드 HTML과 생성 시각으로 치환한다."""
        for marker in (CARDS_MARKER, UPDATED_AT_MARKER):
            if marker not in template:
                logger.warning(f"Template has no {marker} marker")

        # 카드 본문에 마커 문자열이 있어도 건드리지 않도록 시각을 먼저 치환
        page = template.replace(UPDATED_AT_MARKER, format_timestamp(generated_at), 1)
        return page.replace(CARDS_MARKER, self.render_cards(cards), 1)

    def write(
        self,
        template_path: Path,
        output_path: Path,
        cards: list[Card],
        generated_at: datetime | None = None,
    ) -> Path:
        """템플릿을 읽어 렌더링한 결과를 output_path에 쓴다."""
        template = template_path.read_text(encoding="utf-8")
        page = self.render_page(template, cards, generated_at or datetime.now(UTC))
        output_path.write_text(page, encoding="utf-8")
        logger.info(f"Wrote {output_path} with {len(cards)} cards")
        return output_path
