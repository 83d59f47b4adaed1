from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# ---- sys.path bootstrap (Windows-friendly) ----
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
# ---------------------------------------------

from posttypes.core.definitions import build_entities, load_definitions  # noqa: E402
from posttypes.core.errors import DefinitionsError  # noqa: E402
from posttypes.core.host import POST_TYPE, TAXONOMY, HookRegistry, InMemoryHost  # noqa: E402


def render(definitions_path: Optional[Path], *, existing: List[str], roles: List[str]) -> Dict[str, Any]:
    """Run one registration cycle against an in-memory host and return its state."""
    seeded = {}
    for key in existing:
        kind, _, name = key.partition(":")
        if not name:
            kind, name = POST_TYPE, kind
        seeded[(kind, name)] = {}

    host = InMemoryHost(roles=roles or ("administrator",), existing=seeded)
    hooks = HookRegistry()

    for entity in build_entities(load_definitions(definitions_path)):
        entity.register(hooks, host)

    hooks.do_action("init")

    # already-present entities receive our config through the args filters
    for kind, name in list(host.entities):
        args = hooks.apply_filters(f"register_{kind}_args", host.entities[(kind, name)], name)
        host.entities[(kind, name)] = args

    out: Dict[str, Any] = {POST_TYPE: {}, TAXONOMY: {}}
    for (kind, name), args in sorted(host.entities.items()):
        out.setdefault(kind, {})[name] = args
    out["attachments"] = host.attachments
    out["roles"] = {role: sorted(caps) for role, caps in sorted(host.roles.items())}
    return out


def main() -> int:
    ap = argparse.ArgumentParser(description="Render host registration arguments for declared entities")
    ap.add_argument("--definitions", default=None, help="Definitions file (default $POSTTYPES_DEFINITIONS_FILE or ./posttypes.yaml)")
    ap.add_argument("--existing", action="append", default=[], help="Pre-existing entity, 'post_type:key' or 'taxonomy:key' (repeatable)")
    ap.add_argument("--role", action="append", default=[], help="Role known to the host (repeatable)")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.definitions) if args.definitions else None
    try:
        out = render(path, existing=args.existing, roles=args.role)
    except DefinitionsError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(out, indent=2, sort_keys=True, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
