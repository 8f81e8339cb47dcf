# blogforge/core/config.py

import os

from dotenv import load_dotenv

# ENV picks which file at the repository root is loaded; anything else means ".env"
ENV_FILES = {
    "staging": ".env.staging",
    "prod": ".env.production",
    "production": ".env.production",
}
ENV = os.getenv("ENV", "local").lower()

_repo_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
load_dotenv(os.path.join(_repo_root, ENV_FILES.get(ENV, ".env")))

# OpenAI settings
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.7"))
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "60"))

# How much of a generated body is quoted back in the keyword prompt
KEYWORD_PROMPT_CONTENT_CHARS = int(os.getenv("KEYWORD_PROMPT_CONTENT_CHARS", "4000"))

# "firestore" or "memory"
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "firestore").lower()

FRONTEND_URL = os.getenv("FRONTEND_URL")
FRONTEND_URL_PROD = os.getenv("FRONTEND_URL_PROD")

GENERATION_RATE_LIMIT = os.getenv("GENERATION_RATE_LIMIT", "20/hour")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
