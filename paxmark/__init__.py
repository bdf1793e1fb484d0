"""
paxmark — toggle PaX security-feature marks stored in a file's extended attributes.

Features:

- Five fixed marks (PAGEEXEC, EMUTRAMP, MPROTECT, RANDMMAP, SEGMEXEC) encoded as a
  case-sensitive string in ``user.pax.flags``: uppercase = enabled, lowercase = disabled.
- Reconciliation of the stored value against per-mark enable/disable requests, keeping
  the first valid occurrence of each mark and flagging corrupted values.
- CLI with dry-run, JSON reporting, and per-target error reporting.

The core (``paxmark.directives`` and ``paxmark.reconcile``) is pure and performs no I/O;
``paxmark.xattrs`` reads and writes the attribute.
"""

__version__ = "0.1"

__all__ = [
    "constants",
    "directives",
    "reconcile",
    "xattrs",
    "cli",
]
