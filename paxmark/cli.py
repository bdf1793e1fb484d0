from __future__ import annotations

import sys
import argparse
import json as _json

from typing import List, Dict, Any, Mapping, Optional

from paxmark.constants import MARKS, USER_PAX_FLAGS, DEFAULT_FLAGS
from paxmark.directives import directives_from_args
from paxmark.reconcile import reconcile, describe
from paxmark.xattrs import read_flags, write_flags
from paxmark.errors import PaxmarkError


def _mark_one(path: str, directives: Mapping[str, int], dry_run: bool) -> Dict[str, Any]:
    """Reconcile and (unless dry_run) persist the flags of a single target."""

    res: Dict[str, Any] = {
        "path": path,
        "previous": None,
        "flags": None,
        "valid": True,
        "written": False,
        "status": "unknown",
    }
    read_error: Optional[Exception] = None
    try:
        previous = read_flags(path)
    except (PaxmarkError, OSError) as exc:
        # reconcile against the default so the value is still reported
        previous = None
        read_error = exc
    res["previous"] = previous

    result = reconcile(DEFAULT_FLAGS if previous is None else previous, directives)
    res["flags"] = result.flags
    res["valid"] = result.valid

    if read_error is not None and dry_run:
        res["status"] = "fail"
        res["message"] = str(read_error)
        return res
    if dry_run:
        res["status"] = "dry-run"
        return res
    if read_error is None and result.valid and not result.changed_from(previous):
        res["status"] = "unchanged"
        return res
    try:
        write_flags(path, result.flags)
    except PaxmarkError as exc:
        res["status"] = "fail"
        res["message"] = str(exc)
        return res
    res["written"] = True
    res["status"] = "ok"
    return res


def cmd_mark(
    targets: List[str],
    directives: Mapping[str, int],
    *,
    dry_run: bool = False,
    quiet: bool = False,
    verbose: bool = False,
    as_json: bool = False,
) -> bool:
    """Apply mark directives to each target's user.pax.flags attribute.

    Args:
        targets: Files to update.
        directives: Mark identifier -> directive, as built by build_directives.
        dry_run: Compute and report the new value without writing it.
        quiet: Suppress per-target output on stdout (warnings and errors still print).
        verbose: Also print one line per mark with its resulting state.
        as_json: Print a JSON list of per-target results instead of text.

    Returns:
        True when no target failed, False otherwise.
    """
    results: List[Dict[str, Any]] = []
    for path in targets:
        res = _mark_one(path, directives, dry_run)
        results.append(res)
        if not res["valid"]:
            print(
                f"Warning: {path}: malformed {USER_PAX_FLAGS} value {res['previous']!r}; "
                "kept first valid occurrence of each mark",
                file=sys.stderr,
            )
        if res["status"] == "fail":
            print(f"Error: {path}: {res.get('message', 'failed')} (computed {res['flags']})", file=sys.stderr)
        if as_json or quiet:
            continue
        note = " (not written)" if res["status"] in ("fail", "dry-run") else ""
        print(f"{path}: {res['flags']}{note}")
        if verbose:
            for ident, name, enabled in describe(res["flags"]):
                print(f"  {ident} {name:<9} {'enabled' if enabled else 'disabled'}")
    if as_json:
        print(_json.dumps(results, indent=2))
    return all(r["status"] != "fail" for r in results)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="paxmark",
        usage="%(prog)s BINARY... [options]",
        description="Toggle PaX marks stored in the user.pax.flags extended attribute",
        epilog=(
            "Marks not mentioned keep their stored state; marks missing from the stored "
            "value default to enabled. Enabling wins when both forms of a mark are given."
        ),
    )
    for mark in MARKS:
        ap.add_argument(f"-{mark.disable}", dest=mark.disable, action="store_true", help=f"disable {mark.help}")
        ap.add_argument(f"-{mark.enable}", dest=mark.enable, action="store_true", help=f"enable {mark.help}")
    ap.add_argument("--dry-run", "-n", action="store_true", help="Show the resulting flags without writing them")
    ap.add_argument("--quiet", help="limit outputs to warnings and errors", action="store_true")
    ap.add_argument("--verbose", "-v", action="store_true", help="Print the state of every mark")
    ap.add_argument("--json", action="store_true", help="Emit JSON result summary")
    ap.add_argument("targets", nargs="*", metavar="BINARY", help="Files to mark")
    return ap


def main(argv: Optional[List[str]] = None):
    ap = build_parser()
    args = ap.parse_args(argv)
    if not args.targets:
        ap.print_help()
        return
    try:
        success = cmd_mark(
            args.targets,
            directives_from_args(args),
            dry_run=args.dry_run,
            quiet=args.quiet,
            verbose=args.verbose,
            as_json=args.json,
        )
    except (PaxmarkError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    sys.exit(0 if success else 2)


if __name__ == "__main__":
    main()
