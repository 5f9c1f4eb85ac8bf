"""
Create the first admin account.

Usage:
    python create_admin.py admin@example.com "Site Owner"
    python create_admin.py admin@example.com "Site Owner" --print-sql

With --print-sql nothing is written; the bcrypt hash and a matching INSERT
statement are printed instead, for databases the app cannot reach directly.
"""
import argparse
import asyncio
import getpass
import logging
import sys

from portfolio.core.config import settings
from portfolio.core.exceptions import PortfolioError
from portfolio.core.logging import setup_logging
from portfolio.core.security import hash_password
from portfolio.db.database import close_database_connection, connect_to_database
from portfolio.db.schema import create_schema
from portfolio.models import RegisterRequest
from portfolio.services.auth import AuthService
from portfolio.services.validation import validate_register

logger = logging.getLogger("create_admin")


def _sql_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def insert_statement(email: str, password_hash: str, name: str) -> str:
    return (
        "INSERT INTO users (email, password, name, role) VALUES ("
        f"{_sql_literal(email)}, {_sql_literal(password_hash)}, {_sql_literal(name)}, 'admin');"
    )


async def create_admin(req: RegisterRequest) -> int:
    db = await connect_to_database()
    try:
        if settings.AUTO_CREATE_SCHEMA:
            await create_schema(db)
        user = await AuthService(db).register(req)
        return user.id
    finally:
        await close_database_connection()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a portfolio admin user")
    parser.add_argument("email")
    parser.add_argument("name")
    parser.add_argument("--password", help="Password (prompted for when omitted)")
    parser.add_argument("--print-sql", action="store_true", help="Print hash and INSERT instead of writing")
    args = parser.parse_args(argv)

    setup_logging(log_level=settings.LOG_LEVEL)

    password = args.password or getpass.getpass("Password: ")
    req = RegisterRequest(email=args.email, password=password, name=args.name)

    try:
        validate_register(req)
        if args.print_sql:
            password_hash = hash_password(password)
            print(f"Hash: {password_hash}")
            print(insert_statement(args.email.strip(), password_hash, args.name.strip()))
            return 0

        user_id = asyncio.run(create_admin(req))
    except PortfolioError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(f"Admin user {user_id} created for {args.email}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
