from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from .constants import MARKS, DIRECTIVE_KEEP
from .directives import apply_directive


# Only the ASCII mark letters count ("ſ".upper() == "S")
_IDENT_BY_CHAR = {ch: m.ident for m in MARKS for ch in (m.enable, m.disable)}


@dataclass(frozen=True)
class Reconciliation:
    flags: str
    valid: bool

    def changed_from(self, previous: Optional[str]) -> bool:
        return previous is None or previous != self.flags


def reconcile(current: str, directives: Mapping[str, int]) -> Reconciliation:
    """Compute the canonical mark string from a stored value and per-mark directives.

    Each mark is consumed from a working copy of the directives the first time it is
    seen in ``current``; later occurrences and unknown characters are dropped and make
    the result invalid. Marks never seen are appended in table order, uppercase unless
    their directive is disable.

    Args:
        current: Stored value, possibly empty or corrupted.
        directives: Mark identifier (either case) -> directive. Marks without an entry are kept.

    Returns:
        Reconciliation with the five-character value and whether ``current`` was well-formed.
    """
    folded = {k.upper(): v for k, v in directives.items()}
    pending: Dict[str, int] = {m.ident: folded.get(m.ident, DIRECTIVE_KEEP) for m in MARKS}
    out: List[str] = []
    valid = True
    for ch in current:
        directive = pending.pop(_IDENT_BY_CHAR.get(ch, ""), None)
        if directive is None:
            valid = False
            continue
        out.append(apply_directive(ch, directive))
    for mark in MARKS:
        if mark.ident in pending:
            out.append(apply_directive(mark.enable, pending.pop(mark.ident)))
    return Reconciliation(flags="".join(out), valid=valid)


def describe(flags: str) -> List[Tuple[str, str, bool]]:
    """Expand a canonical value into (identifier, description, enabled) rows in table order."""
    state = {ch.upper(): ch.isupper() for ch in flags}
    return [(m.ident, m.help, state.get(m.ident, True)) for m in MARKS]
