import json
import logging

from models import Candidate

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = "No response from Gemini."
ERROR_PREFIX = "Error Processing message : "


def _first_text(candidate: Candidate) -> str:
    if candidate.content is None:
        raise ValueError("first candidate has no content")
    if not candidate.content.parts:
        raise ValueError("first candidate has no parts")
    text = candidate.content.parts[0].text
    if text is None:
        raise ValueError("first part has no text")
    return text


def extract_reply(raw) -> str:
    """
    Turn a raw generateContent body into the reply text.

    Never raises: an empty answer becomes NO_RESPONSE_MESSAGE and any
    other anomaly becomes an "Error Processing message" string.
    """
    try:
        data = json.loads(raw)
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not isinstance(candidates, list) or not candidates:
            logger.warning("Gemini returned no candidates.")
            return NO_RESPONSE_MESSAGE
        # only the first candidate is read; later ones may be anything
        return _first_text(Candidate.model_validate(candidates[0]))
    except Exception as e:
        logger.warning("Could not extract Gemini reply: %s", e)
        return f"{ERROR_PREFIX}{e}"
