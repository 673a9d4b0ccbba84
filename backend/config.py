"""Application configuration via environment variables."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS (drawings carry no identity, so any origin may render)
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

# Drawing
DRAWING_CONFIG = os.getenv("DRAWING_CONFIG", "")       # path to a saved DrawingConfig JSON
GENERATOR_CREDIT = os.getenv("GENERATOR_CREDIT", "AYN")

VERSION = "1.0.0"
