#!/usr/bin/env python3

from stayhub.config import settings
from stayhub.dependencies import build_store
from stayhub.logging_config import configure_logging
from stayhub.seed import create_seed_data

def main():
    configure_logging(settings.LOG_LEVEL)

    if not settings.uses_sql_store:
        print("STORE_BACKEND is 'memory'; seeding only lives as long as this process.")

    store = build_store(settings)

    print("🚀 Creating seed data for StayHub...")
    properties = create_seed_data(store)
    for prop in properties:
        print(f"  #{prop.id} {prop.title} ({prop.status.value})")

    print(f"✅ Created {len(properties)} properties")

if __name__ == "__main__":
    main()
