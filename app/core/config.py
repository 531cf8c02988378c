# /app/core/config.py

"""
Central runtime configuration. Values are read once from the environment
(a local `.env` file is honoured in development) into module-level constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- AI Capability ---
# Optional: without a key the app runs entirely on the deterministic fallbacks.
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
AI_TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "20"))
AI_TEMPERATURE = float(os.getenv("AI_TEMPERATURE", "0.4"))

# --- Authentication ---
# Development-only default; the app logs a warning at startup while it is in use.
DEFAULT_JWT_SECRET = "your_jwt_secret_key"
JWT_SECRET = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_DAYS = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))
PASSWORD_HASH_ROUNDS = 10

# --- Server ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
