"""ShopWise database management CLI.

Creates and drops database schemas for all domains, and loads the starter
catalogue.

Usage:
    python src/manage.py setup-db          # Create all tables
    python src/manage.py drop-db           # Drop all tables
    python src/manage.py seed-catalogue    # Add the starter products
"""

import argparse
import sys


DOMAIN_NAMES = ["identity", "catalogue", "ordering"]


def _domains(names=None):
    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.domain import ordering

    all_domains = {"identity": identity, "catalogue": catalogue, "ordering": ordering}
    return {name: all_domains[name] for name in (names or DOMAIN_NAMES)}


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    for name, domain in _domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    for name, domain in _domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def seed_catalogue():
    """Add the starter products to the catalogue."""
    from catalogue.domain import catalogue
    from catalogue.product.seed import seed_catalogue as seed

    catalogue.init()
    with catalogue.domain_context():
        product_ids = seed()
    print(f"Added {len(product_ids)} products.")


def main():
    parser = argparse.ArgumentParser(description="ShopWise database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    subparsers.add_parser("seed-catalogue", help="Add the starter products")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "seed-catalogue":
        seed_catalogue()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
