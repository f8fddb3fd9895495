"""Create tables and seed the demo marketplace."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.db.session import SessionLocal, init_db
from app.db.seed import SAMPLE_PASSWORD, seed_sample_data

init_db()
db = SessionLocal()

try:
    if seed_sample_data(db):
        print(f"Seeded demo data. Login: shakii / lebleba / sarahk, password {SAMPLE_PASSWORD}")
    else:
        print("Users already present, skipping seed")
finally:
    db.close()

print("Init complete.")
