"""
Global configuration settings for the EasyDict project.

This module contains all configuration constants and settings used throughout the application.
Anything environment specific (data directory, contact e-mail for the translation API,
debug mode) is read from environment variables, optionally seeded from a `.env` file.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

load_dotenv()

# Application Mode
DEBUG_MODE = os.getenv("EASYDICT_DEBUG", "false").lower() == "true"

# Directory Configuration
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = Path(os.getenv("EASYDICT_DATA_DIR", str(Path.home() / ".easydict")))
LOG_DIR = DATA_DIR / "logs"


# External API Configuration
class APIEndpoint:
    """
    Configuration for external API endpoints.

    Attributes:
        base_url (str): Base URL for the API
        require_key (bool): Whether this API requires authentication
        env_key_name (str): Name of environment variable containing the API key
    """
    def __init__(self, base_url: str, require_key: bool, env_key_name: Optional[str] = None):
        self.base_url = base_url
        self.require_key = require_key
        self.env_key_name = env_key_name

    @property
    def credential(self) -> Optional[str]:
        """Value of the configured environment variable, if any."""
        if not self.env_key_name:
            return None
        value = os.getenv(self.env_key_name)
        if not value or value.startswith("your_"):
            return None
        return value


API_ENDPOINTS: Dict[str, APIEndpoint] = {
    "dictionary": APIEndpoint(
        base_url="https://api.dictionaryapi.dev/api/v2/entries/en/",
        require_key=False
    ),
    "translation": APIEndpoint(
        base_url="https://api.mymemory.translated.net/get",
        require_key=False,
        env_key_name="EASYDICT_MYMEMORY_EMAIL"  # optional, raises the daily quota
    ),
    "datamuse": APIEndpoint(
        base_url="https://api.datamuse.com/words",
        require_key=False
    ),
}

# Transport settings; the analyzers never consult these
API_CONFIG = {
    "timeout": 15,  # seconds
    "user_agent": "EasyDict/1.0 (+https://github.com/easydict)"
}

# MyMemory language pairs
LANGUAGE_PAIRS = {
    "en_zh": ("en", "zh-CN"),
    "zh_en": ("zh-CN", "en"),
}

# Translation alternatives filtering
TRANSLATION_CONFIG = {
    "min_quality": 50,       # exclusive lower bound on provider quality
    "max_length": 50,        # exclusive upper bound on alternative length
    "max_alternatives": 5
}

# Chinese -> English lookups
REVERSE_LOOKUP_CONFIG = {
    "min_word_length": 3,    # translation words shorter than this are dropped
    "max_alternatives": 10,
    "min_synonym_alternatives": 5
}

# Etymology segmentation
ETYMOLOGY_CONFIG = {
    "max_prefixes": 2,
    "max_suffixes": 2,
    "min_prefix_remainder": 3,
    "min_suffix_remainder": 1
}

# Word family derivation
FAMILY_CONFIG = {
    "max_candidates": 20,
    "max_forms": 6,
    "min_candidate_length": 3,
    "max_candidate_length": 19
}

# Client-side stores
STORAGE_CONFIG = {
    "history_file": "search_history.json",
    "notebook_file": "notebook.json",
    "known_words_file": "known_words.json",
    "max_history": 20
}

# Logging Configuration
LOG_CONFIG = {
    "console_level": "DEBUG" if DEBUG_MODE else "WARNING",
    "file_level": "DEBUG",
    "log_file": str(LOG_DIR / "easydict.log"),
    "rotation": "1 day",
    "retention": "30 days"
}
