import os
import pathlib

import pytz
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = pathlib.Path(__file__).parent.parent
# Timezone configuration
TIMEZONE = pytz.timezone(os.getenv("TIMEZONE", "UTC"))

# MySQL configuration, used only when DATABASE_URL is not given
MYSQL_HOST = os.getenv("MYSQL_HOST", "")
MYSQL_PORT = int(os.getenv("MYSQL_PORT", 3306))
MYSQL_USER = os.getenv("MYSQL_USER", "root")
MYSQL_PASSWORD = os.getenv("MYSQL_PASSWORD", "root")
MYSQL_DATABASE = os.getenv("MYSQL_DATABASE", "wiki")

# Database configuration
if os.getenv("DATABASE_URL"):
    DATABASE_URL = os.environ["DATABASE_URL"]
elif MYSQL_HOST:
    DATABASE_URL = f"mysql+aiomysql://{MYSQL_USER}:{MYSQL_PASSWORD}@{MYSQL_HOST}:{MYSQL_PORT}/{MYSQL_DATABASE}"
else:
    DATABASE_URL = f"sqlite+aiosqlite:///{BASE_DIR / 'db' / 'wiki.db'}"
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 30))
DB_ECHO = os.getenv("DB_ECHO", "").lower() in ("1", "true", "yes")

# Web service configuration
WEB_HOST = os.getenv("WEB_HOST", "0.0.0.0")
WEB_PORT = int(os.getenv("WEB_PORT", 8080))
WEB_WORKERS = int(os.getenv("WEB_WORKERS", 1))

# Templates
TEMPLATE_DIR = BASE_DIR / "wiki" / "templates"

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
