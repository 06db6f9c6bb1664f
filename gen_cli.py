"""Command-line client for a running Tabletop Generators server.

Usage:
    python gen_cli.py npc --race Elf --class Wizard --level 5
    python gen_cli.py npc --format basic --seed 42
    python gen_cli.py dungeon --type crypt --size Small --svg map.svg --guide guide.md
    python gen_cli.py random tavernName --count 5
    python gen_cli.py export dungeon --output dungeon.json
    python gen_cli.py import dungeon dungeon.json

Environment variables:
    TABLETOP_URL     Server URL (default: http://127.0.0.1:8000)
    ADMIN_SECRET     Admin secret, needed for import (default: change-me-in-production)
"""

import argparse
import json
import os
import sys

import httpx

DEFAULT_URL = os.environ.get("TABLETOP_URL", "http://127.0.0.1:8000")
ADMIN_SECRET = os.environ.get("ADMIN_SECRET", "change-me-in-production")


def _request(method: str, url: str, **kwargs) -> httpx.Response:
    """Make an HTTP request, handling connection errors."""
    kwargs.setdefault("timeout", 30.0)
    try:
        return httpx.request(method, url, **kwargs)
    except httpx.ConnectError:
        print(f"Error: Could not connect to server at {url}", file=sys.stderr)
        print("Is the server running?", file=sys.stderr)
        sys.exit(1)


def _handle_error(resp: httpx.Response) -> None:
    """Print the server's error detail and exit on any non-200 response."""
    if resp.status_code == 200:
        return
    if resp.status_code == 403:
        print("Error: Invalid admin secret", file=sys.stderr)
        print("Set ADMIN_SECRET env var to match the server's config", file=sys.stderr)
    else:
        try:
            detail = resp.json().get("detail", resp.text)
        except ValueError:
            detail = resp.text
        print(f"Error ({resp.status_code}): {detail}", file=sys.stderr)
    sys.exit(1)


def _write_or_print(text: str, path: str | None) -> None:
    if path:
        with open(path, "w") as f:
            f.write(text)
        print(f"Wrote {path}")
    else:
        print(text)


def generate_npc(url: str, options: dict, fmt: str | None, output: str | None) -> None:
    """Generate an NPC and print its statblock."""
    body = {k: v for k, v in options.items() if v is not None}
    if fmt:
        body["format"] = fmt
    resp = _request("POST", f"{url}/npc/generate", json=body)
    _handle_error(resp)
    _write_or_print(resp.json()["statblock"], output)


def generate_dungeon(
    url: str,
    options: dict,
    svg_path: str | None,
    guide_path: str | None,
) -> None:
    """Generate a dungeon; save the map and print or save the guide."""
    body = {k: v for k, v in options.items() if v is not None}
    resp = _request("POST", f"{url}/dungeon/generate", json=body)
    _handle_error(resp)
    data = resp.json()
    if svg_path:
        _write_or_print(data["svg"], svg_path)
    _write_or_print(data["guide"], guide_path)


def run_generator(url: str, name: str, count: int, max_depth: int | None, seed: int | None) -> None:
    """Print ``count`` expansions of a random text template."""
    for i in range(count):
        body = {}
        if max_depth is not None:
            body["max_depth"] = max_depth
        if seed is not None:
            body["seed"] = seed + i
        resp = _request("POST", f"{url}/random/{name}", json=body)
        _handle_error(resp)
        data = resp.json()
        print(data["text"])
        if data["missing_tokens"]:
            print(f"  (no table for {', '.join(data['missing_tokens'])})", file=sys.stderr)
        if data["depth_exceeded"]:
            print("  (stopped at depth limit)", file=sys.stderr)


def export_section(url: str, section: str, output: str | None) -> None:
    """Fetch one settings section as JSON."""
    resp = _request("GET", f"{url}/settings/{section}")
    _handle_error(resp)
    _write_or_print(json.dumps(resp.json(), indent=2), output)


def import_section(url: str, section: str, path: str) -> None:
    """Replace one settings section on the server from a JSON file."""
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            print(f"Error: {path} is not valid JSON: {e}", file=sys.stderr)
            sys.exit(1)
    resp = _request(
        "PUT",
        f"{url}/settings/{section}",
        json=data,
        headers={"X-Admin-Secret": ADMIN_SECRET},
    )
    _handle_error(resp)
    print(f"Imported '{section}' settings from {path}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Generate NPCs, dungeons and random text with Tabletop Generators",
    )

    url_kwargs = dict(
        default=DEFAULT_URL,
        help=f"Server URL (default: {DEFAULT_URL}, or set TABLETOP_URL env var)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    npc_parser = subparsers.add_parser("npc", help="Generate an NPC statblock")
    npc_parser.add_argument("--race", help="Race name (random if omitted)")
    npc_parser.add_argument("--class", dest="character_class", help="Class name (random if omitted)")
    npc_parser.add_argument("--subclass", help="Subclass name, or None for no subclass")
    npc_parser.add_argument("--level", type=int, help="Level 1-20 (random if omitted)")
    npc_parser.add_argument("--alignment", help="Alignment (random if omitted)")
    npc_parser.add_argument("--format", help="Statblock format: fantasy_statblock or basic")
    npc_parser.add_argument("--seed", type=int, help="Seed for a reproducible NPC")
    npc_parser.add_argument("--output", help="Write the statblock to this file")
    npc_parser.add_argument("--url", **url_kwargs)

    dungeon_parser = subparsers.add_parser("dungeon", help="Generate a dungeon map and guide")
    dungeon_parser.add_argument("--type", dest="dungeon_type", help="Dungeon type (server default if omitted)")
    dungeon_parser.add_argument("--size", default="Medium", help="Small, Medium or Large")
    loops = dungeon_parser.add_mutually_exclusive_group()
    loops.add_argument("--loops", dest="allow_loops", action="store_true", default=None,
                       help="Always add loop corridors")
    loops.add_argument("--no-loops", dest="allow_loops", action="store_false",
                       help="Never add loop corridors")
    dungeon_parser.set_defaults(allow_loops=None)
    dungeon_parser.add_argument("--seed", type=int, help="Seed for a reproducible dungeon")
    dungeon_parser.add_argument("--svg", help="Write the SVG map to this file")
    dungeon_parser.add_argument("--guide", help="Write the Markdown guide to this file")
    dungeon_parser.add_argument("--url", **url_kwargs)

    random_parser = subparsers.add_parser("random", help="Expand a random text template")
    random_parser.add_argument("name", help="Template name, e.g. tavernName")
    random_parser.add_argument("--count", type=int, default=1, help="Number of results")
    random_parser.add_argument("--max-depth", type=int, help="Nesting limit for tokens")
    random_parser.add_argument("--seed", type=int, help="Seed for the first result")
    random_parser.add_argument("--url", **url_kwargs)

    export_parser = subparsers.add_parser("export", help="Export a settings section as JSON")
    export_parser.add_argument("section", choices=["npc", "dungeon", "random"])
    export_parser.add_argument("--output", help="Write to this file instead of stdout")
    export_parser.add_argument("--url", **url_kwargs)

    import_parser = subparsers.add_parser("import", help="Replace a settings section from JSON")
    import_parser.add_argument("section", choices=["npc", "dungeon", "random"])
    import_parser.add_argument("path", help="JSON file to import")
    import_parser.add_argument("--url", **url_kwargs)

    args = parser.parse_args(argv)

    if args.command == "npc":
        options = {
            "race": args.race,
            "class": args.character_class,
            "subclass": args.subclass,
            "level": args.level,
            "alignment": args.alignment,
            "seed": args.seed,
        }
        generate_npc(args.url, options, args.format, args.output)
    elif args.command == "dungeon":
        options = {
            "dungeon_type": args.dungeon_type,
            "size": args.size,
            "allow_loops": args.allow_loops,
            "seed": args.seed,
        }
        generate_dungeon(args.url, options, args.svg, args.guide)
    elif args.command == "random":
        run_generator(args.url, args.name, args.count, args.max_depth, args.seed)
    elif args.command == "export":
        export_section(args.url, args.section, args.output)
    elif args.command == "import":
        import_section(args.url, args.section, args.path)


if __name__ == "__main__":
    main()
