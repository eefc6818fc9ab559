"""
Environment configuration module
Loads Process Manager connection settings from the environment.
"""

import os
from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()

# Tenant
BASE_URL = os.getenv('PROMAPP_BASE_URL', 'https://demo.promapp.com').rstrip('/')
TENANT_ID = os.getenv('PROMAPP_TENANT_ID', '')
TENANT_URL = f"{BASE_URL}/{TENANT_ID}" if TENANT_ID else BASE_URL

# Credentials (only needed by commands that talk to the API)
USERNAME = os.getenv('PROMAPP_USERNAME', '')
PASSWORD = os.getenv('PROMAPP_PASSWORD', '')
PROCESS_ID = os.getenv('PROMAPP_PROCESS_ID', '')

# Optional settings (with defaults)
TOKEN_DURATION = int(os.getenv('PROMAPP_TOKEN_DURATION', '60000'))
HTTP_TIMEOUT = int(os.getenv('PROMAPP_HTTP_TIMEOUT', '30'))
LOG_LEVEL = os.getenv('PROMAPP_LOG_LEVEL', 'INFO')

_SETTINGS = {
    'PROMAPP_TENANT_ID': lambda: TENANT_ID,
    'PROMAPP_USERNAME': lambda: USERNAME,
    'PROMAPP_PASSWORD': lambda: PASSWORD,
    'PROMAPP_PROCESS_ID': lambda: PROCESS_ID,
}


def missing_settings(*names: str) -> list:
    """Return the names among `names` that are unset or empty"""
    return [name for name in names if not _SETTINGS.get(name, lambda: os.getenv(name))()]


def require_settings(*names: str) -> None:
    """Validate required variables for commands that need them"""
    missing_vars = missing_settings(*names)
    if missing_vars:
        raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")
