"""
Code generation entry point.

This module validates natural-language descriptions and hands them to the
generation backend. No backend is configured yet, so every description that
passes validation is answered with setup instructions instead of code.
"""

import logging

from .config import config
from .prompts import create_setup_message, too_short_message

logger = logging.getLogger(__name__)

# Minimum length required for a code description
MIN_DESCRIPTION_LENGTH = 5


class CodeGenerationError(Exception):
    """Base class for errors returned in place of generated code."""

    pass


class ValidationError(CodeGenerationError):
    """Exception raised when a description fails a local input check."""

    pass


class BackendUnavailable(CodeGenerationError):
    """Exception raised when no generation backend is configured."""

    pass


def validate_description(description: str) -> None:
    """
    Check that a description is long enough to generate code from.

    Length is counted in Unicode code points of the description as given,
    so "héllo" counts as 5 and "日本語" as 3. Callers trim input first.

    Args:
        description: Natural language description of the code to generate

    Raises:
        ValidationError: If the description is empty or too short
    """
    if not description:
        raise ValidationError("Description cannot be empty")

    length = len(description)
    if length < MIN_DESCRIPTION_LENGTH:
        logger.debug(f"Rejected description of length {length}")
        raise ValidationError(too_short_message(MIN_DESCRIPTION_LENGTH))


def generate_code(description: str) -> str:
    """
    Generate code based on natural language description.

    Args:
        description: Natural language description of the code to generate

    Returns:
        Generated code

    Raises:
        ValidationError: If the description is empty or too short
        BackendUnavailable: Always, once validation passes, until a model
            backend is wired in here
    """
    validate_description(description)

    logger.debug("Description accepted, but no generation backend is configured")
    raise BackendUnavailable(create_setup_message(description, config.MODELS_DIR))
