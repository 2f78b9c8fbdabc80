"""Command line entry point.

Usage:
  kanbanify serve [--host HOST] [--port PORT] [--reload]
  kanbanify init-db
  kanbanify seed
  kanbanify populate-access-codes
  kanbanify db-status
"""

import argparse
import logging
import sys
from typing import List, Optional

from sqlalchemy.exc import OperationalError, ProgrammingError

from kanbanify.config import settings
from kanbanify.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kanbanify", description="Kanbanify server and maintenance commands")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default=settings.HOST, help="Interface to bind")
    serve_parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    subparsers.add_parser("init-db", help="Create database tables")
    subparsers.add_parser("seed", help="Replace all data with the demo board")
    subparsers.add_parser("populate-access-codes", help="Generate access codes for boards without one")
    subparsers.add_parser("db-status", help="Show whether the schema exists and row counts")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging(args.log_level)

    if args.command == "serve":
        return _serve_command(args)
    if args.command == "init-db":
        return _init_db_command()
    if args.command == "seed":
        return _seed_command()
    if args.command == "populate-access-codes":
        return _populate_access_codes_command()
    if args.command == "db-status":
        return _db_status_command()
    return 1


def _serve_command(args) -> int:
    import uvicorn

    uvicorn.run("kanbanify.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def _init_db_command() -> int:
    from kanbanify.database import init_db

    init_db()
    print("Database tables created")
    return 0


def _seed_command() -> int:
    from kanbanify.database import SessionLocal, init_db
    from kanbanify.seed import seed_database

    init_db()
    db = SessionLocal()
    try:
        result = seed_database(db)
        print("Database seeded successfully!")
        print("Created:")
        print("- 1 board")
        print(f"- {len(result.team_members)} team members")
        print(f"- {len(result.lists)} lists")
        print(f"- {len(result.cards)} cards")
    except Exception:
        db.rollback()
        logger.exception("Error seeding database")
        return 1
    finally:
        db.close()
    return 0


def _populate_access_codes_command() -> int:
    from kanbanify.database import SessionLocal
    from kanbanify.seed import populate_access_codes

    db = SessionLocal()
    try:
        updated = populate_access_codes(db)
    except (OperationalError, ProgrammingError) as exc:
        db.rollback()
        print(f"Error populating access codes: {exc}", file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"Populated access codes for {updated} boards")
    return 0


def _db_status_command() -> int:
    from kanbanify.database import SessionLocal
    from kanbanify.models import Board, BoardList, Card

    db = SessionLocal()
    try:
        counts = {
            "boards": db.query(Board).count(),
            "lists": db.query(BoardList).count(),
            "cards": db.query(Card).count(),
        }
    except (OperationalError, ProgrammingError):
        print("Database tables not found. Run `kanbanify init-db`.", file=sys.stderr)
        return 1
    finally:
        db.close()

    print("Database is properly configured and accessible")
    for name, count in counts.items():
        print(f"  {name}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
