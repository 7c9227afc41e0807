import os
import json
import logging
from typing import Optional


class Config:
    """Configuration manager for the upload validator function app"""

    def __init__(self):
        self._load_local_settings()
        self.environment = os.getenv('ENVIRONMENT', 'development')

    def _load_local_settings(self):
        """Load local.settings.json for local development"""
        settings_file = 'local.settings.json'
        paths_to_try = [
            settings_file,
            os.path.join(os.path.dirname(__file__), '..', settings_file),
            os.path.join(os.getcwd(), settings_file)
        ]

        for path in paths_to_try:
            if os.path.exists(path):
                with open(path, 'r') as f:
                    settings = json.load(f)
                values = settings.get('Values', {})
                for key, value in values.items():
                    if key not in os.environ:
                        os.environ[key] = str(value)
                return

    def _get_required_config(self, key: str, default: Optional[str] = None) -> str:
        value = os.getenv(key) or default
        if value is None:
            raise ValueError(f"Required configuration '{key}' is not set")
        return str(value)

    @property
    def log_level(self) -> int:
        # Unknown level names fall back to INFO
        level = logging.getLevelName(self._get_required_config('LOG_LEVEL', 'INFO').upper())
        return level if isinstance(level, int) else logging.INFO

    @property
    def function_url(self) -> str:
        return self._get_required_config(
            'UPLOAD_FUNCTION_URL', 'http://localhost:7071/api/validate_upload'
        )


config = Config()
