"""
Central configuration module for the code generator.

This module manages the ambient settings:
- Logging verbosity
- Location of local model files (referenced in setup instructions)
- History file for the Rich CLI
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Central configuration for the code generator."""

    # Model settings
    MODELS_DIR: str = os.getenv("MODELS_DIR", "models")

    # Rich CLI settings
    HISTORY_FILE: str = os.getenv("HISTORY_FILE", ".ia_coding_history")

    # Logging (kept at WARNING so logs don't interleave with the prompt)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    @classmethod
    def summary(cls) -> dict:
        """
        Get a summary of current configuration.

        Returns:
            Dictionary with all config values
        """
        return {
            "models_dir": cls.MODELS_DIR,
            "history_file": cls.HISTORY_FILE,
            "log_level": cls.LOG_LEVEL,
        }


# Singleton instance
config = Config()
