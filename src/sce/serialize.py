"""
Canonical JSON for GameInfo records.

Output is compact, keys keep declaration order (title, total_credits, cards;
each card name, image, credits) and None becomes null.
"""
import json

from pydantic_core import PydanticSerializationError

from src.sce.models import GameInfo


class SerializationError(RuntimeError):
    pass


def serialize(info: GameInfo) -> str:
    """Render a GameInfo as canonical JSON text."""
    try:
        return info.model_dump_json()
    except (PydanticSerializationError, ValueError, TypeError) as exc:
        raise SerializationError(str(exc)) from exc


def deserialize(text: str) -> GameInfo:
    """Read JSON produced by `serialize` back into a GameInfo."""
    return GameInfo.model_validate_json(text)


def error_payload(message: str) -> str:
    """JSON object carrying only an `error` key."""
    return json.dumps({"error": message}, separators=(",", ":"))
