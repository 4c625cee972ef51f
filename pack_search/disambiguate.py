from __future__ import annotations

import re
from typing import Callable

# A hook gets (base_phrase, original_phrase) and returns a rewritten base
# phrase, or None to leave it to the next hook.
DisambiguationHook = Callable[[str, str], str | None]

_AAA_RE = re.compile(r"\baaa\b", re.IGNORECASE)
_AA_RE = re.compile(r"\baa\b", re.IGNORECASE)


def battery_size_hint(base_phrase: str, original_phrase: str) -> str | None:
    """Qualify a bare "batteries" query with the cell size the user mentioned.

    AAA wins over AA when the phrase mentions both.
    """
    if base_phrase.strip().lower() != "batteries":
        return None
    if _AAA_RE.search(original_phrase):
        return "AAA batteries"
    if _AA_RE.search(original_phrase):
        return "AA batteries"
    return None


DEFAULT_HOOKS: tuple[DisambiguationHook, ...] = (battery_size_hint,)


def apply_hooks(
    base_phrase: str,
    original_phrase: str,
    hooks: tuple[DisambiguationHook, ...] | list[DisambiguationHook] = DEFAULT_HOOKS,
) -> str:
    for hook in hooks:
        rewritten = hook(base_phrase, original_phrase)
        if rewritten:
            return rewritten
    return base_phrase
