"""Synchronous entry point: markup in, GameInfo JSON out."""
import logging

from src.sce.document import parse_document
from src.sce.extract import extract
from src.sce.serialize import SerializationError, serialize

EMPTY_OBJECT = "{}"


def parse_sce_html(html: str) -> str:
    """
    Extract an SCE inventory page into JSON.

    Returns the literal `{}` if the extracted record cannot be serialized.
    """
    info = extract(parse_document(html))
    try:
        return serialize(info)
    except SerializationError as exc:
        logging.warning("Failed to serialize extracted page: %s", exc)
        return EMPTY_OBJECT
