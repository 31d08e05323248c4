# scripts/setup/init_db.py
"""
Initialize database — creates all tables and optionally seeds demo data.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py [--seed]
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import argparse
from datetime import datetime, timedelta
from sqlalchemy import inspect, text
from app.database import SessionLocal, create_tables, engine
from app.config import settings
from app.services import cab_service, user_service
from app.services.errors import DuplicateEmail, DuplicateLicensePlate

DEMO_CABS = [
    ("Sedan 1", "CAB-0001", 4),
    ("Sedan 2", "CAB-0002", 4),
    ("Van 1", "CAB-0101", 7),
]


def seed():
    db = SessionLocal()
    try:
        for name, plate, capacity in DEMO_CABS:
            try:
                cab = cab_service.create_cab(db, name, plate, capacity)
                print(f"   + cab {cab.id} {plate}")
            except DuplicateLicensePlate:
                print(f"   = cab {plate} already present")
        try:
            user = user_service.register_user(
                db, name="Demo User", email="demo@example.com", password="demo",
                subscription_end_date=datetime.utcnow() + timedelta(days=30),
            )
            print(f"   + user {user.id} demo@example.com ({user.bookings_remaining} bookings)")
        except DuplicateEmail:
            print("   = user demo@example.com already present")
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Create booking tables")
    parser.add_argument("--seed", action="store_true", help="Insert demo cabs and a demo user")
    args = parser.parse_args()

    print("Fleet Booking DB Initialization")
    print("=" * 40)
    print(f"Database: {settings.DATABASE_URL}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except Exception as e:
        print(f"Cannot connect to database: {e}")
        sys.exit(1)

    print("\nCreating tables...")
    create_tables()
    tables = sorted(inspect(engine).get_table_names())
    print(f"Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   - {t}")

    if args.seed:
        print("\nSeeding demo data...")
        seed()

    print("\nDatabase ready! Start the backend with:")
    print(f"   uvicorn app.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
