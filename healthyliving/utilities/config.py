"""Configuration management for the Healthy Living recipe screen."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Image loading
IMAGE_TIMEOUT_SECONDS: Final[float] = float(os.getenv('IMAGE_TIMEOUT_SECONDS', '10'))

# Notification feed size
MAX_NOTIFICATIONS: Final[int] = int(os.getenv('MAX_NOTIFICATIONS', '100'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'
