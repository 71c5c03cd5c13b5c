"""Stored user preference gateway."""
import logging
from quart import request, jsonify
from lixtools.commons.preferences import get_preference_store
from lixtools.pipeline.config import LANGUAGE_PREFERENCE_KEY

logger = logging.getLogger("lixtools-api")


async def get_language():
    language = get_preference_store().get_item(LANGUAGE_PREFERENCE_KEY)
    return jsonify({"language": language})


async def set_language():
    data = await request.get_json(silent=True)
    language = data.get("language") if isinstance(data, dict) else None
    store = get_preference_store()

    if language is None:
        store.remove_item(LANGUAGE_PREFERENCE_KEY)
        logger.info("Cleared language preference")
        return jsonify({"language": None})

    if not isinstance(language, str) or not language.strip():
        return jsonify({"error": "language must be a non-empty string"}), 400

    store.set_item(LANGUAGE_PREFERENCE_KEY, language.strip())
    logger.info(f"Stored language preference {language.strip()}")
    return jsonify({"language": language.strip()})
