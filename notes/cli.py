#!/usr/bin/env python3
"""Command-line interface for managing notes.

Commands:
  new <note> [-t a,b]   Create a note with optional comma-separated tags
  all                   List every note
  find <filter>         List notes whose content contains the filter
  remove <id>           Remove a note by id
  web [port]            Serve the notes as an HTML page (default port 5000)
  clean                 Remove all notes
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from notes import web
from notes.config import settings
from notes.models import Note
from notes.repository import NoteRepository
from notes.storage import DatabaseError, JsonStorage

logger = logging.getLogger("notes.cli")


def print_notes(notes: list[Note]) -> None:
    """Print one id/tags/content block per note."""
    for note in notes:
        print("id: ", note.id)
        print("tags: ", ", ".join(note.tags))
        print("note: ", note.content)
        print()


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def cmd_new(repo: NoteRepository, args: argparse.Namespace) -> None:
    tags = args.tags.split(",") if args.tags else []
    note = repo.create(args.note, tags)
    print("Note added!")
    print_notes([note])


def cmd_all(repo: NoteRepository, args: argparse.Namespace) -> None:
    print_notes(repo.list_all())


def cmd_find(repo: NoteRepository, args: argparse.Namespace) -> None:
    print_notes(repo.find_by_content(args.filter))


def cmd_remove(repo: NoteRepository, args: argparse.Namespace) -> None:
    removed = repo.remove_by_id(args.id)
    if removed is not None:
        print("Note removed: ", removed)
    else:
        print("Note not found")


def cmd_web(repo: NoteRepository, args: argparse.Namespace) -> None:
    print(f"Server is listening on http://localhost:{args.port}")
    web.start(repo.list_all(), args.port)


def cmd_clean(repo: NoteRepository, args: argparse.Namespace) -> None:
    repo.remove_all()
    print("All notes removed")


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notes",
        description="Manage notes from the command line",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help=f"Path to the notes database (default: {settings.db_path})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(
        dest="command", metavar="<command>", required=True
    )

    new = subparsers.add_parser("new", help="create a new note")
    new.add_argument("note", help="The content of the note you want to create")
    new.add_argument("-t", "--tags", help="tags to add to the note, comma-separated")
    new.set_defaults(handler=cmd_new)

    subparsers.add_parser("all", help="get all notes").set_defaults(handler=cmd_all)

    find = subparsers.add_parser("find", help="get matching notes")
    find.add_argument(
        "filter",
        help="The search term to filter notes by, applied to the note content",
    )
    find.set_defaults(handler=cmd_find)

    remove = subparsers.add_parser("remove", help="remove a note by id")
    remove.add_argument("id", type=int, help="The id of the note you want to remove")
    remove.set_defaults(handler=cmd_remove)

    web_cmd = subparsers.add_parser("web", help="launch website to see notes")
    web_cmd.add_argument(
        "port",
        nargs="?",
        type=int,
        default=settings.web_port,
        help=f"port to bind on (default: {settings.web_port})",
    )
    web_cmd.set_defaults(handler=cmd_web)

    clean = subparsers.add_parser("clean", help="remove all notes")
    clean.set_defaults(handler=cmd_clean)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )

    repo = NoteRepository(JsonStorage(args.db or settings.db_path))
    try:
        args.handler(repo, args)
    except DatabaseError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
