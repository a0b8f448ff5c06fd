"""Configuration management for the markdown-to-pdf CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Assembly
        self.insert_file_separators = os.getenv("INSERT_FILE_SEPARATORS", "true").lower() == "true"
        self.fail_on_empty_input = os.getenv("FAIL_ON_EMPTY_INPUT", "false").lower() == "true"

        # Rendering
        self.dark_mode = os.getenv("DARK_MODE", "false").lower() == "true"
        self.chromium_executable_path = os.getenv("CHROMIUM_EXECUTABLE_PATH") or None
        self.render_timeout_ms = int(os.getenv("RENDER_TIMEOUT_MS", "30000"))
