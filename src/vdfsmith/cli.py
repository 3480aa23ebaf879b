"""CLI entry point: ``vdfsmith dump`` / ``shortcuts`` / ``appid`` / ``add``."""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from ._errors import DecodeError
from .decoder import decode, format_vdf
from .encoder import write_vdf
from .extractor import extract_shortcuts
from .model import VdfMap
from .shortcut import Shortcut, rungameid_url, steam_long_id, upsert_shortcut

logger = logging.getLogger(__name__)


def _shortcut_dict(shortcut: Shortcut) -> dict:
    d = dataclasses.asdict(shortcut)
    d["long_id"] = shortcut.long_id
    return d


def _cmd_dump(args: argparse.Namespace) -> int:
    failed = 0
    for path in args.files:
        try:
            doc = decode(Path(path))
        except (DecodeError, OSError) as exc:
            # One bad file must not stop the rest of the batch.
            logger.error("%s: %s", path, exc)
            failed += 1
            continue
        logger.debug("%s: decoded %d top-level entries", path, len(doc))
        if args.json:
            print(json.dumps(doc.to_python(), indent=2))
        else:
            print(f"\n{'=' * 70}")
            print(f"FILE: {path}")
            print(f"{'=' * 70}")
            print(format_vdf(doc))
            print()
    return 1 if failed else 0


def _cmd_shortcuts(args: argparse.Namespace) -> int:
    failed = 0
    records = []
    for path in args.files:
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            logger.error("%s: %s", path, exc)
            failed += 1
            continue
        found = extract_shortcuts(data)
        logger.debug("%s: %d shortcut(s)", path, len(found))
        records.extend((path, s) for s in found)

    if args.json:
        out = [{"file": str(path), **_shortcut_dict(s)} for path, s in records]
        print(json.dumps(out, indent=2))
    elif not records:
        print("[-] No shortcuts found")
    else:
        for _, s in records:
            print(
                f"{s.app_id:>10}  {s.long_id:>20}  {s.app_name}  "
                f"exe={s.executable}  start={s.start_dir}"
            )
    return 1 if failed else 0


def _cmd_appid(args: argparse.Namespace) -> int:
    shortcut = Shortcut.new(args.name, args.exe)
    if args.json:
        d = _shortcut_dict(shortcut)
        d["url"] = shortcut.url
        print(json.dumps(d, indent=2))
    else:
        print(f"AppID:     {shortcut.app_id}")
        print(f"LongID:    {steam_long_id(shortcut.app_id)}")
        print(f"URL:       {rungameid_url(shortcut.app_id)}")
        print(f"StartDir:  {shortcut.start_dir}")
    return 0


def _cmd_add(args: argparse.Namespace) -> int:
    # Load JSON config as base (keys are extra shortcut entry fields)
    cfg: dict = {}
    if args.from_json:
        try:
            cfg = json.loads(Path(args.from_json).read_text())
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("%s: %s", args.from_json, exc)
            return 1
        if not isinstance(cfg, dict):
            logger.error("%s: expected a JSON object of entry fields", args.from_json)
            return 1
    if args.launch_options is not None:
        cfg["LaunchOptions"] = args.launch_options

    path = Path(args.file)
    if path.exists():
        try:
            doc = decode(path)
        except DecodeError as exc:
            logger.error("%s: %s", path, exc)
            return 1
    else:
        logger.info("%s does not exist, starting an empty document", path)
        doc = VdfMap()

    shortcut = Shortcut.new(args.name, args.exe)
    if args.start_dir is not None:
        shortcut = dataclasses.replace(shortcut, start_dir=args.start_dir)

    try:
        index = upsert_shortcut(doc, shortcut, **cfg)
    except (TypeError, ValueError) as exc:
        # Unstorable field values, e.g. a JSON list for tags
        logger.error("Cannot add shortcut: %s", exc)
        return 1
    out = Path(args.output) if args.output else path
    size = write_vdf(out, doc)
    print(f"[+] Written {size} bytes -> {out}")
    print(f"[+] shortcuts/{index}: appid={shortcut.app_id} url={shortcut.url}")
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="vdfsmith",
        description="Read and write binary VDF (shortcuts.vdf) files",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command")

    # -- dump --
    dp = sub.add_parser("dump", help="Decode and display binary VDF file(s)")
    dp.add_argument("files", nargs="+", help="VDF file(s) to decode")
    dp.add_argument("--json", action="store_true", help="Output as JSON")

    # -- shortcuts --
    sp = sub.add_parser(
        "shortcuts",
        help="List shortcuts, tolerating damaged or non-canonical files",
    )
    sp.add_argument("files", nargs="+", help="shortcuts.vdf file(s) to scan")
    sp.add_argument("--json", action="store_true", help="Output as JSON")

    # -- appid --
    ap = sub.add_parser("appid", help="Compute the app id for a new shortcut")
    ap.add_argument("exe", help="Executable path, exactly as stored in Exe")
    ap.add_argument("name", help="Display name (AppName)")
    ap.add_argument("--json", action="store_true", help="Output as JSON")

    # -- add --
    addp = sub.add_parser(
        "add",
        help="Add or update a shortcut in a shortcuts.vdf file",
        epilog=(
            "Other entry fields (icon, tags, IsHidden, ...) can be set via "
            "--from-json. JSON keys are shortcuts.vdf field names."
        ),
    )
    addp.add_argument("file", help="shortcuts.vdf to edit (created if missing)")
    addp.add_argument("--name", required=True, help="Display name (AppName)")
    addp.add_argument("--exe", required=True, help="Executable path (Exe)")
    addp.add_argument(
        "--start-dir",
        default=None,
        help="Start-in directory (derived from --exe if omitted)",
    )
    addp.add_argument("--launch-options", default=None, help="Launch options")
    addp.add_argument(
        "-j",
        "--from-json",
        default="",
        metavar="FILE",
        help="JSON file of extra entry fields",
    )
    addp.add_argument(
        "-o", "--output", default="", help="Output path (default: edit in place)"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(1)

    commands = {
        "dump": _cmd_dump,
        "shortcuts": _cmd_shortcuts,
        "appid": _cmd_appid,
        "add": _cmd_add,
    }
    status = commands[args.command](args)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
