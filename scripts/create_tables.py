#!/usr/bin/env python3
"""
Create all tables from the ORM metadata and optionally seed starter templates.

Usage:
    ENV=local python scripts/create_tables.py
    ENV=local python scripts/create_tables.py --seed-templates
"""

import argparse
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

env = os.getenv("ENV", "local")
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)

from sqlalchemy import func, select

import app.models  # noqa: F401  registers every table on Base.metadata
from app.db import Base, async_engine, get_db_session
from app.models import Template
from app.utils import logger

STARTER_TEMPLATES = [
    {
        "name": "Modern Business",
        "description": "Clean corporate layout with hero, services and contact sections",
        "category": "business",
    },
    {
        "name": "Creative Portfolio",
        "description": "Image-led gallery layout for designers and photographers",
        "category": "portfolio",
    },
    {
        "name": "Restaurant",
        "description": "Menu, opening hours and reservations",
        "category": "restaurant",
    },
    {
        "name": "SaaS Landing",
        "description": "Product landing page with pricing tiers",
        "category": "technology",
        "is_premium": True,
    },
]


async def create_tables():
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Created tables: {', '.join(sorted(Base.metadata.tables))}")


async def seed_templates():
    async with get_db_session() as db:
        existing = await db.scalar(select(func.count(Template.id)))
        if existing:
            logger.info(f"{existing} templates already present, skipping seed")
            return
        for fields in STARTER_TEMPLATES:
            db.add(Template(**fields))
    logger.info(f"Seeded {len(STARTER_TEMPLATES)} templates")


async def main(seed: bool):
    await create_tables()
    if seed:
        await seed_templates()
    await async_engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create database tables")
    parser.add_argument("--seed-templates", action="store_true", help="Insert starter templates")
    args = parser.parse_args()
    asyncio.run(main(args.seed_templates))
