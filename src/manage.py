"""Groove database management CLI.

Creates and drops the relational schema for the groove domain, reusing
the setup_db/drop_db utilities in ``groove.utils.db``.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the groove domain."""
    from groove.domain import groove
    from groove.utils.db import setup_db

    print("Initializing groove domain...")
    groove.init()
    print("Creating groove database schema...")
    setup_db(groove)
    print("Done.")


def drop_database():
    """Drop the database schema for the groove domain."""
    from groove.domain import groove
    from groove.utils.db import drop_db

    print("Initializing groove domain...")
    groove.init()
    print("Dropping groove database schema...")
    drop_db(groove)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Groove database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
