from __future__ import annotations

from dataclasses import dataclass


# Extended attribute holding the marks
USER_PAX_FLAGS = "user.pax.flags"


@dataclass(frozen=True)
class Mark:
    ident: str  # uppercase letter; lowercase form means disabled
    help: str

    @property
    def enable(self) -> str:
        return self.ident.upper()

    @property
    def disable(self) -> str:
        return self.ident.lower()


# Fixed mark table; order is the emission order for marks absent from a stored value
MARKS = (
    Mark("P", "PAGEEXEC"),
    Mark("E", "EMUTRAMP"),
    Mark("M", "MPROTECT"),
    Mark("R", "RANDMMAP"),
    Mark("S", "SEGMEXEC"),
)

MARK_IDS = tuple(m.ident for m in MARKS)

# Directives
DIRECTIVE_KEEP = 0
DIRECTIVE_ENABLE = 1
DIRECTIVE_DISABLE = 2

# All marks enabled; assumed when the attribute is missing or unreadable
DEFAULT_FLAGS = "".join(m.enable for m in MARKS)
