"""
Blog - Configuration
"""
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _dir(name, default):
    path = os.getenv(name, default)
    return path if os.path.isabs(path) else os.path.join(BASE_DIR, path)


# ── Flask ──
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8080"))

# ── Content ──
CONTENT_DIR = _dir("CONTENT_DIR", "blog")
TEMPLATE_DIR = _dir("TEMPLATE_DIR", "templates")
STATIC_DIR = _dir("STATIC_DIR", "static")

# Hidden articles stay reachable by direct link; this only affects the index
INCLUDE_HIDDEN = os.getenv("INCLUDE_HIDDEN", "false").lower() == "true"
