"""
Environment configuration for payments_client.

Environment:
  PAYMENTS_API_KEY          secret key sent as a Bearer token (no default)
  PAYMENTS_API_BASE_URL     (default: https://api.stripe.com/v1)
  PAYMENTS_REQUEST_TIMEOUT  seconds (default: 30)
  PAYMENTS_API_VERSION      optional pinned API version header
  LOG_LEVEL                 (default: INFO)
  PAYMENTS_LOG_DIR          (default: ./logs)
"""

import os

from dotenv import load_dotenv, find_dotenv

# real environment variables win over .env entries
load_dotenv(find_dotenv(usecwd=True), override=False)

DEFAULT_BASE_URL = "https://api.stripe.com/v1"

API_KEY = os.getenv("PAYMENTS_API_KEY")
API_BASE_URL = os.getenv("PAYMENTS_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("PAYMENTS_REQUEST_TIMEOUT", "30"))
API_VERSION = os.getenv("PAYMENTS_API_VERSION") or None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("PAYMENTS_LOG_DIR", "logs")
