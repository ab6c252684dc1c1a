import os

# Load .env.test for local overrides before any settings are read
from dotenv import load_dotenv

env_test_path = os.path.join(os.path.dirname(__file__), ".env.test")
if os.path.exists(env_test_path):
    load_dotenv(env_test_path, override=True)

# Tests run against an in-memory SQLite database unless told otherwise
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "development")
