import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent

# LOAD ENV VARIABLES

load_dotenv(ROOT_DIR / ".env")
PORT = int(os.getenv("PORT", "3000"))

# PATHS

DATA_DIR = ROOT_DIR / "data"
PUBLIC_DIR = ROOT_DIR / "public"
ASSETS_DIR = PUBLIC_DIR / "assets"
TEMPLATES_DIR = ROOT_DIR / "templates"
EXPORT_HTML = ROOT_DIR / "dist" / "index.html"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
