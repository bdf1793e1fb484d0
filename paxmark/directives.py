from __future__ import annotations

import argparse
from typing import Dict, Mapping, Tuple

from .constants import MARKS, DIRECTIVE_KEEP, DIRECTIVE_ENABLE, DIRECTIVE_DISABLE


def build_directives(requests: Mapping[str, Tuple[bool, bool]]) -> Dict[str, int]:
    """Resolve (enable_requested, disable_requested) pairs into one directive per mark.

    Enable wins over disable; a mark with neither request (or no entry at all) is kept.

    Args:
        requests: Mapping of mark identifier (either case) to the two request flags.

    Returns:
        A dict with an entry for every known mark, keyed by uppercase identifier.
    """
    folded = {k.upper(): v for k, v in requests.items()}
    out: Dict[str, int] = {}
    for mark in MARKS:
        enable, disable = folded.get(mark.ident, (False, False))
        if enable:
            out[mark.ident] = DIRECTIVE_ENABLE
        elif disable:
            out[mark.ident] = DIRECTIVE_DISABLE
        else:
            out[mark.ident] = DIRECTIVE_KEEP
    return out


def directives_from_args(args: argparse.Namespace) -> Dict[str, int]:
    """Build directives from a namespace with one boolean per option letter (p/P, e/E, ...)."""
    requests = {}
    for mark in MARKS:
        requests[mark.ident] = (
            bool(getattr(args, mark.enable, False)),
            bool(getattr(args, mark.disable, False)),
        )
    return build_directives(requests)


def apply_directive(ch: str, directive: int) -> str:
    if directive == DIRECTIVE_ENABLE:
        return ch.upper()
    if directive == DIRECTIVE_DISABLE:
        return ch.lower()
    return ch
