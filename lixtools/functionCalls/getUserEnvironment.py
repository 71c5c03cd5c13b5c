from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import pytz
from babel import Locale, UnknownLocaleError, default_locale
from babel.dates import format_date, format_time
from loguru import logger

from lixtools.commons.preferences import PreferenceStore, get_preference_store
from lixtools.pipeline.config import DEFAULT_LOCALE, TIME_ZONE, LANGUAGE_PREFERENCE_KEY


@dataclass(frozen=True)
class EnvironmentContext:
    locale: str
    time_zone: str
    now: datetime


def _parse_locale(tag) -> Optional[Locale]:
    if not tag or not isinstance(tag, str):
        return None
    try:
        return Locale.parse(tag.replace("_", "-"), sep="-")
    except (UnknownLocaleError, ValueError, TypeError):
        return None


def _locale_tag(locale: Locale) -> str:
    return "-".join(part for part in (locale.language, locale.script, locale.territory) if part)


def resolve_default_locale() -> str:
    for candidate in (default_locale(), DEFAULT_LOCALE, "en-US"):
        parsed = _parse_locale(candidate)
        if parsed is not None:
            return _locale_tag(parsed)
    return "en-US"


def resolve_time_zone(name: Optional[str] = None) -> str:
    name = name or TIME_ZONE
    if name in pytz.all_timezones:
        return name
    logger.warning(f"[Environment] Unknown timezone '{name}', using UTC")
    return "UTC"


def resolve_environment_context(
    preferences: Optional[PreferenceStore] = None,
    clock: Callable[[pytz.BaseTzInfo], datetime] = datetime.now,
    time_zone: Optional[str] = None,
) -> EnvironmentContext:
    """Read ambient locale, timezone and clock state once, at the tool boundary."""
    preferences = preferences or get_preference_store()
    tz_name = resolve_time_zone(time_zone)

    locale = resolve_default_locale()
    stored = preferences.get_item(LANGUAGE_PREFERENCE_KEY)
    if stored:
        if _parse_locale(stored) is not None:
            locale = stored
        else:
            logger.warning(f"[Environment] Ignoring unknown language preference '{stored}'")

    return EnvironmentContext(locale=locale, time_zone=tz_name, now=clock(pytz.timezone(tz_name)))


def snapshot(context: EnvironmentContext) -> dict:
    locale = _parse_locale(context.locale) or _parse_locale(DEFAULT_LOCALE) or Locale("en", "US")
    tz = pytz.timezone(context.time_zone)
    now = context.now if context.now.tzinfo is not None else tz.localize(context.now)

    return {
        "locale": context.locale,
        "localDate": format_date(now, format="full", locale=locale),
        "localTime": format_time(now, format="HH:mm:ss", tzinfo=tz, locale=locale),
        "timeZone": context.time_zone,
    }


def get_user_environment() -> dict:
    return snapshot(resolve_environment_context())
