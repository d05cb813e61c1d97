import json
import logging
from typing import Any

from desiredcaps.core.config import ParserSettings
from desiredcaps.core.types_ import CapabilityValue

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_SIGNS = ("+", "-")

_logger = logging.getLogger("desiredcaps.core.coercion")


def parse_integer(text: str) -> int | None:
    # any Unicode decimal digit counts, not only ASCII
    digits = text[1:] if text[:1] in _SIGNS else text
    if not digits.isdecimal():
        return None

    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        _logger.debug(f"Integer {text} is out of 64-bit range, keeping text")
        return None

    return value


def parse_boolean(text: str) -> bool | None:
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_options(text: str) -> dict[str, Any] | None:
    if not text:
        return None

    try:
        decoded = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        _logger.debug(f"Value is not a JSON object, keeping text: {exc}")
        return None

    if not isinstance(decoded, dict):
        _logger.debug(f"Value decodes to {type(decoded).__name__}, not an object, keeping text")
        return None

    return decoded


def is_options_name(name: str, settings: ParserSettings) -> bool:
    return settings.promote_options and name.lower().endswith(settings.options_suffix)


def coerce(name: str, value: str, settings: ParserSettings) -> CapabilityValue:
    """
    Convert a trimmed, unquoted value into its typed form.

    Attempts run in priority order and the first one that succeeds wins:

      1. the version capability stays text;
      2. a signed 64-bit integer;
      3. ``true`` / ``false``;
      4. a JSON object, for names ending with the options suffix;
      5. text.
    """
    if name == settings.version_key:
        return value

    integer = parse_integer(value)
    if integer is not None:
        return integer

    boolean = parse_boolean(value)
    if boolean is not None:
        return boolean

    if is_options_name(name, settings):
        options = parse_options(value)
        if options is not None:
            return options

    return value
