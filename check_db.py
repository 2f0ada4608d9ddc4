import os
import psycopg
from dotenv import load_dotenv

load_dotenv()

TABLES = ('products', 'feature_images', 'reviews', 'cart_items')

try:
    with psycopg.connect(os.environ['DATABASE_URL'], connect_timeout=10) as conn:
        with conn.cursor() as cur:
            for table in TABLES:
                cur.execute(f"SELECT COUNT(*) FROM {table}")
                print(f"{table}: {cur.fetchone()[0]} rows")
    print("Connection successful!")
except (KeyError, psycopg.Error) as e:
    print(f"Error: {e}")
