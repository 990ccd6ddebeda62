# scripts/init_db.py
"""
Recreate the dashboard schema, optionally seeding a login user.

    python -m scripts.init_db --user admin@example.com --password secret123
"""

import argparse
import logging

from dashboard.auth import hash_password
from dashboard.db.engine import get_engine
from dashboard.db.schema import metadata, users

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--user", help="email of a user to seed")
    parser.add_argument("--password", help="password for the seeded user")
    parser.add_argument("--name", default="User", help="display name for the seeded user")
    args = parser.parse_args()

    if bool(args.user) != bool(args.password):
        parser.error("--user and --password go together")

    engine = get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created.")

    if args.user:
        with engine.begin() as conn:
            conn.execute(
                users.insert().values(
                    name=args.name,
                    email=args.user,
                    password=hash_password(args.password),
                )
            )
        logger.info("Seeded user %s", args.user)


if __name__ == "__main__":
    main()
