import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent  # project root (where wsgi.py is)
load_dotenv(BASE_DIR / ".env")

class Config:
    # Listen on all interfaces by default
    HOST = os.getenv("VOTER_API_HOST", "0.0.0.0")
    PORT = int(os.getenv("VOTER_API_PORT", "1080"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    SWAGGER_TITLE = os.getenv("SWAGGER_TITLE", "Voter API")
    SWAGGER_VERSION = os.getenv("SWAGGER_VERSION", "1.0.0")
    SWAGGER = {"title": SWAGGER_TITLE, "uiversion": 3}


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "WARNING"
