"""Command line entry point: create tables, seed users, run the server.

Usage:
    liftcare init-db
    liftcare create-user --email admin@example.com --name Admin --role admin
    liftcare serve --port 4000
"""

from __future__ import annotations

import argparse
import asyncio
import getpass
import sys

from liftcare.access.roles import ALL_ROLES, ADMIN
from liftcare.config import get_settings
from liftcare.db.engine import Database
from liftcare.errors import AppError
from liftcare.logging_config import setup_logging
from liftcare.services.auth import MIN_PASSWORD_LENGTH, create_user


async def init_db(database: Database) -> None:
    await database.create_all()
    await database.dispose()
    print("Tables created.")


async def seed_user(database: Database, email: str, password: str, name: str, role: str,
                    customer_id: str | None) -> int:
    await database.create_all()
    try:
        async with database.session_factory() as db:
            user = await create_user(db, email, password, name, role, customer_id)
    except AppError as e:
        print(f"Could not create user: {e.message}")
        return 1
    finally:
        await database.dispose()
    print(f"User '{user.email}' created with role {user.role} (id={user.id}).")
    return 0


def _prompt_password() -> str | None:
    password = getpass.getpass("Password: ")
    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        return None
    if password != getpass.getpass("Confirm password: "):
        print("Passwords do not match.")
        return None
    return password


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="liftcare", description="LiftCare API administration")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create all tables")

    user = sub.add_parser("create-user", help="Create an identity with any role")
    user.add_argument("--email", required=True)
    user.add_argument("--name", required=True)
    user.add_argument("--role", choices=sorted(ALL_ROLES), default=ADMIN)
    user.add_argument("--customer-id", default=None)
    user.add_argument("--password", default=None, help="Prompted for when omitted")

    serve = sub.add_parser("serve", help="Run the API with uvicorn")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--reload", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    if args.command == "serve":
        import uvicorn

        uvicorn.run(
            "liftcare.main:create_app",
            factory=True,
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=args.reload,
        )
        return 0

    database = Database(settings.database_url, echo=settings.db_echo)

    if args.command == "init-db":
        asyncio.run(init_db(database))
        return 0

    password = args.password or _prompt_password()
    if not password:
        return 1
    return asyncio.run(
        seed_user(database, args.email, password, args.name, args.role, args.customer_id)
    )


if __name__ == "__main__":
    sys.exit(main())
