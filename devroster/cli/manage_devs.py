#!/usr/bin/env python3
"""
CLI tool to manage the developer roster through the REST API.

Usage:
    python -m devroster.cli.manage_devs list
    python -m devroster.cli.manage_devs show --id dev_1a2b3c4d5e6f
    python -m devroster.cli.manage_devs add --name Ada --position "Backend Engineer" --location London --experience-years 7
    python -m devroster.cli.manage_devs edit --id dev_1a2b3c4d5e6f --position "Staff Engineer"

Examples:
    # Point at another server
    python -m devroster.cli.manage_devs --base-url http://roster.internal:8000 list

    # Add a developer with explicit skill ratings (unset ratings default to 55)
    python -m devroster.cli.manage_devs add --name Ada --position CTO --location London \\
        --experience-years 12 --timely 90 --tinker 80
"""
import asyncio
import argparse
import sys
from typing import Any, Dict, List, Optional

import httpx

from devroster.clients.developers_client import DevelopersClient
from devroster.config import settings
from devroster.domain.entities import SKILL_NAMES


def _print_developer(developer: Dict[str, Any]) -> None:
    print(f"  ID: {developer.get('id', '-')}")
    print(f"  Name: {developer.get('name')}")
    print(f"  Position: {developer.get('position')}")
    print(f"  Location: {developer.get('location')}")
    print(f"  Experience: {developer.get('experienceYears')} years")
    print(f"  Image: {developer.get('imageUrl')}")
    skills = developer.get("skills") or {}
    print("  Skills: " + ", ".join(f"{name}={skills.get(name)}" for name in SKILL_NAMES))


async def list_developers(client: DevelopersClient) -> bool:
    """List all developers"""
    developers = await client.get_developers()
    if developers is None:
        print("[ERROR] Could not fetch developers")
        return False

    if not developers:
        print("No developers found")
        return True

    print(f"\n{'ID':<18} {'Name':<24} {'Position':<24} {'Location':<16} {'XP':>3}")
    print("=" * 89)
    for dev in developers:
        print(
            f"{dev['id']:<18} {dev['name'][:24]:<24} {dev['position'][:24]:<24} "
            f"{dev['location'][:16]:<16} {dev['experienceYears']:>3}"
        )
    print(f"\nTotal: {len(developers)} developer(s)")
    return True


async def show_developer(client: DevelopersClient, developer_id: str) -> bool:
    """Show one developer"""
    developer = await client.get_developer(developer_id)
    if developer is None:
        print(f"[ERROR] Developer '{developer_id}' not found")
        return False

    print("\nDeveloper Details:")
    _print_developer(developer)
    return True


def _skills_from_args(args: argparse.Namespace, defaults: Dict[str, int]) -> Dict[str, int]:
    return {
        name: getattr(args, name) if getattr(args, name) is not None else defaults[name]
        for name in SKILL_NAMES
    }


async def add_developer(client: DevelopersClient, args: argparse.Namespace) -> bool:
    """Add a developer"""
    body = {
        "name": args.name,
        "position": args.position,
        "location": args.location,
        "experienceYears": args.experience_years,
        "imageUrl": args.image_url or settings.default_image_url,
        "skills": _skills_from_args(args, {name: settings.default_skill_rating for name in SKILL_NAMES}),
    }

    created = await client.add_developer(body)
    if created is None:
        print("[ERROR] Developer could not be added")
        return False

    print("[SUCCESS] Developer added")
    _print_developer(created)
    return True


async def edit_developer(client: DevelopersClient, args: argparse.Namespace) -> bool:
    """Edit the given fields of a developer"""
    current = await client.get_developer(args.id)
    if current is None:
        print(f"[ERROR] Developer '{args.id}' not found")
        return False

    body: Dict[str, Any] = {"id": args.id}
    for option, field in (
        ("name", "name"),
        ("position", "position"),
        ("location", "location"),
        ("experience_years", "experienceYears"),
        ("image_url", "imageUrl"),
    ):
        value = getattr(args, option)
        if value is not None:
            body[field] = value

    if any(getattr(args, name) is not None for name in SKILL_NAMES):
        body["skills"] = _skills_from_args(args, current["skills"])

    if len(body) == 1:
        print("[ERROR] Nothing to change - pass at least one field option")
        return False

    updated = await client.edit_developer(body)
    if updated is None:
        print(f"[ERROR] Developer '{args.id}' could not be updated")
        return False

    print("[SUCCESS] Developer updated")
    _print_developer({"id": args.id, **updated})
    return True


def _add_skill_options(parser: argparse.ArgumentParser) -> None:
    for name in SKILL_NAMES:
        parser.add_argument(f"--{name}", type=int, help=f"{name} rating")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Manage the developer roster",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--base-url", default=settings.api_base_url, help="Roster server URL")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("list", help="List all developers")

    show_parser = subparsers.add_parser("show", help="Show one developer")
    show_parser.add_argument("--id", required=True, help="Developer ID")

    add_parser = subparsers.add_parser("add", help="Add a developer")
    add_parser.add_argument("--name", required=True)
    add_parser.add_argument("--position", required=True)
    add_parser.add_argument("--location", required=True)
    add_parser.add_argument("--experience-years", type=int, required=True)
    add_parser.add_argument("--image-url", default=None)
    _add_skill_options(add_parser)

    edit_parser = subparsers.add_parser("edit", help="Edit a developer")
    edit_parser.add_argument("--id", required=True, help="Developer ID")
    edit_parser.add_argument("--name")
    edit_parser.add_argument("--position")
    edit_parser.add_argument("--location")
    edit_parser.add_argument("--experience-years", type=int)
    edit_parser.add_argument("--image-url")
    _add_skill_options(edit_parser)

    return parser


async def run(args: argparse.Namespace, http_client: Optional[httpx.AsyncClient] = None) -> bool:
    """Execute the parsed command. Returns True on success."""
    owns_client = http_client is None
    if owns_client:
        http_client = httpx.AsyncClient(timeout=settings.client_timeout)

    client = DevelopersClient(http_client, base_url=args.base_url)
    try:
        if args.command == "list":
            return await list_developers(client)
        elif args.command == "show":
            return await show_developer(client, args.id)
        elif args.command == "add":
            return await add_developer(client, args)
        elif args.command == "edit":
            return await edit_developer(client, args)
        return False
    finally:
        if owns_client:
            await http_client.aclose()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return 0 if asyncio.run(run(args)) else 1


if __name__ == "__main__":
    sys.exit(main())
