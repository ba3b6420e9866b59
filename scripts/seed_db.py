import asyncio
import json
import sys
import os
from pathlib import Path

from sqlalchemy import select

sys.path.append(os.getcwd())

from app.db.session import AsyncSessionLocal
from app.db.seed import seed_sample_recipes, seed_taxonomies
from app.models import User

BASE_DIR = Path(__file__).parents[1]
RECIPES_PATH = BASE_DIR / "datasets" / "recipe_samples.json"

ADMIN_USERNAME = os.getenv("SEED_ADMIN_USERNAME", "admin")


async def seed():
    print("Seeding database...")

    async with AsyncSessionLocal() as db:
        print(" - Loading taxonomies...")
        inserted = await seed_taxonomies(db)
        print(f"   {inserted} new taxonomy entries.")

        if not RECIPES_PATH.exists():
            print(f" - No sample recipes at {RECIPES_PATH}, skipping.")
            return

        admin = (await db.execute(select(User).where(User.username == ADMIN_USERNAME))).scalar_one_or_none()
        if admin is None:
            print(f" - Admin user '{ADMIN_USERNAME}' not found, skipping sample recipes.")
            return

        print(" - Loading recipes...")
        with open(RECIPES_PATH) as f:
            recipes_data = json.load(f)

        created = await seed_sample_recipes(db, owner_id=admin.id, recipes=recipes_data)
        print(f"Successfully inserted {created} of {len(recipes_data)} recipes.")

if __name__ == "__main__":
    asyncio.run(seed())
