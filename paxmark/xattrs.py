from __future__ import annotations

import errno
import os
import sys
from typing import Optional

from .constants import USER_PAX_FLAGS
from .errors import AttributeWriteError, AttributeUnsupportedError


# ENODATA on Linux, ENOATTR on BSD/macOS
_NO_ATTR_ERRNOS = {e for e in (getattr(errno, "ENODATA", None), getattr(errno, "ENOATTR", None)) if e is not None}


def _require_xattr_support() -> None:
    if not (hasattr(os, "getxattr") and hasattr(os, "setxattr")):
        raise AttributeUnsupportedError("extended attributes are not supported on this platform")


def read_flags(path: str, attr: str = USER_PAX_FLAGS) -> Optional[str]:
    """Read the stored flags value.

    Args:
        path: Target file.
        attr: Attribute name.

    Returns:
        The decoded value, or None if the attribute is absent or cannot be read.
        Undecodable bytes come back as U+FFFD so they show up as unknown marks.

    Raises:
        FileNotFoundError: If the target does not exist.
    """
    _require_xattr_support()
    try:
        raw = os.getxattr(path, attr)
    except FileNotFoundError:
        raise
    except OSError as exc:
        if exc.errno not in _NO_ATTR_ERRNOS:
            print(f"Warning: failed to read {attr} on {path}: {exc.strerror or exc}", file=sys.stderr)
        return None
    return raw.decode("utf-8", errors="replace")


def write_flags(path: str, flags: str, attr: str = USER_PAX_FLAGS) -> None:
    """Persist ``flags`` on ``path``; any OSError is raised as AttributeWriteError."""
    _require_xattr_support()
    try:
        os.setxattr(path, attr, flags.encode("utf-8"))
    except OSError as exc:
        raise AttributeWriteError(path, attr, exc.strerror or str(exc)) from exc
