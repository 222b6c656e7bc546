"""
Extract a GameInfo record from an SCE inventory page.

Selectors are compiled once at import; a malformed literal fails the import
instead of an individual extraction.

Field defaults:
- title, total_credits: None when no element matches
- card name, card image: "" when the element (or its src) is missing
- card credits: None when the card has no credit value element

The credit value selector is shared by the page total and the cards, so
total_credits is simply the first `.credit_value` node in the document.
"""
import logging

from src.sce.document import Document, Element, compile_selector
from src.sce.models import CardInfo, GameInfo

TITLE_SELECTOR = compile_selector("div.inventory_gameinfo h2, h1")
CARD_SELECTOR = compile_selector("div.inventory_gamecards div.inventory_gamecard")
CARD_IMAGE_SELECTOR = compile_selector("img")
CARD_NAME_SELECTOR = compile_selector(".inventory_gamecard_name")
CREDIT_VALUE_SELECTOR = compile_selector(".credit_value")


def _first(scope: Document | Element, selector) -> Element | None:
    matches = scope.select(selector)
    return matches[0] if matches else None


def _first_text(scope: Document | Element, selector) -> str | None:
    element = _first(scope, selector)
    if element is None:
        return None
    return element.text().strip()


def extract_card(card: Element) -> CardInfo:
    """Build a CardInfo from a single card container."""
    image = _first(card, CARD_IMAGE_SELECTOR)
    return CardInfo(
        name=_first_text(card, CARD_NAME_SELECTOR) or "",
        image=(image.attribute("src") if image is not None else None) or "",
        credits=_first_text(card, CREDIT_VALUE_SELECTOR),
    )


def extract(document: Document) -> GameInfo:
    """Extract title, total credits and cards (in document order)."""
    cards = tuple(extract_card(card) for card in document.select(CARD_SELECTOR))
    logging.debug("Extracted %d cards", len(cards))
    return GameInfo(
        title=_first_text(document, TITLE_SELECTOR),
        total_credits=_first_text(document, CREDIT_VALUE_SELECTOR),
        cards=cards,
    )
