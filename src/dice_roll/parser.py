from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .errors import DiceSyntaxError, TrailingContentError, ZeroSidesError
from .models import DiceRequest, RollMode

logger = logging.getLogger(__name__)

# Counts and sides are unsigned 32-bit values.
MAX_DICE_VALUE = 2**32 - 1

# Prefix match only: whatever follows the mode letter is the caller's problem.
_DICE_RE = re.compile(r"(?P<count>[0-9]*)d(?P<sides>[0-9]+)(?P<mode>[ad])?")


def _to_dice_value(digits: str, token: str) -> int:
    value = int(digits)
    if value > MAX_DICE_VALUE:
        raise DiceSyntaxError(token)
    return value


def parse_expression(text: str) -> tuple[DiceRequest, str]:
    """Parse the longest ``[N]dS[a|d]`` prefix of ``text``.

    Returns the request together with the unparsed remainder. Raises
    DiceSyntaxError when not even a prefix matches.
    """

    m = _DICE_RE.match(text)
    if m is None:
        raise DiceSyntaxError(text)

    count_str = m.group("count")
    count = _to_dice_value(count_str, text) if count_str else 1
    if count == 0:
        raise DiceSyntaxError(text)

    sides = _to_dice_value(m.group("sides"), text)
    mode = RollMode.from_suffix(m.group("mode"))

    return DiceRequest(count=count, sides=sides, mode=mode), text[m.end():]


def parse_request(text: str) -> DiceRequest:
    request, remainder = parse_expression(text)

    if remainder:
        raise TrailingContentError(text, remainder)
    if request.sides == 0:
        raise ZeroSidesError(text)

    logger.debug("parsed %r as %s", text, request)
    return request


def parse_requests(texts: Iterable[str]) -> list[DiceRequest]:
    # Stops at the first invalid token, in argument order.
    return [parse_request(text) for text in texts]
