#!/usr/bin/env python3
"""
Issue a bearer token for an existing account, for manual API testing.

Usage:
    ENV=staging python scripts/generate_test_token.py --email admin@example.com
"""

import argparse
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

# Load environment-specific .env file
env = os.getenv("ENV", "local")
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
    print(f"Loaded environment from: {env_file}")

from app.db import get_db_session
from app.services.account_service import account_service
from app.services.auth import TokenClaims, credential_service


async def issue_token(email: str) -> str | None:
    async with get_db_session() as db:
        user = await account_service.get_by_email(db, email)
        if user is None:
            return None
        return credential_service.issue_token(
            TokenClaims(id=str(user.id), email=user.email, role=user.role)
        )


def main():
    parser = argparse.ArgumentParser(description="Issue a bearer token for testing")
    parser.add_argument("--email", required=True, help="Email of an existing account")
    args = parser.parse_args()

    token = asyncio.run(issue_token(args.email))
    if token is None:
        print(f"No account with email {args.email}")
        sys.exit(1)

    print(f"Authorization: Bearer {token}")


if __name__ == "__main__":
    main()
