from pathlib import Path
import os

from dotenv import load_dotenv

# Load .env from the project root
PROJECT_ROOT = Path(__file__).resolve().parent
ENV_PATH = PROJECT_ROOT / ".env"
load_dotenv(dotenv_path=ENV_PATH)

# Directory of fleet YAML files (one <fleet_id>.yaml per vehicle)
FLEET_DIR = Path(os.getenv("FLEET_DIR") or PROJECT_ROOT / "fleet")

# When set, tasks and requests go through PocketBase instead of FLEET_DIR
POCKETBASE_URL = os.getenv("POCKETBASE_URL")
POCKETBASE_TIMEOUT = float(os.getenv("POCKETBASE_TIMEOUT") or 10)

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-prod")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
