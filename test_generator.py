#!/usr/bin/env python3
"""
Tests for description validation and the code generation entry point.

Covers the empty check, the minimum length check, the backend-unavailable
response and the absence of any success path.
"""

import itertools
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from ia_coding.config import Config, config
from ia_coding.generator import (
    MIN_DESCRIPTION_LENGTH,
    BackendUnavailable,
    CodeGenerationError,
    ValidationError,
    generate_code,
    validate_description,
)
from ia_coding.prompts import create_setup_message

# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def expect_error(description, error_type=CodeGenerationError):
    """Call generate_code and return the raised error, failing if none is raised."""
    try:
        result = generate_code(description)
    except error_type as e:
        return e
    raise AssertionError(f"Expected {error_type.__name__}, got result: {result!r}")


def test_empty_description():
    """Empty input is rejected with the exact empty-description message."""
    error = expect_error("", ValidationError)
    assert str(error) == "Description cannot be empty", f"Unexpected message: {error}"

    logger.info("✓ Empty description test passed")


def test_short_description():
    """Descriptions below the minimum length are rejected as too short."""
    error = expect_error("test", ValidationError)
    assert "too short" in str(error), f"Expected 'too short' in: {error}"
    assert str(MIN_DESCRIPTION_LENGTH) in str(
        error
    ), f"Message should state the minimum length: {error}"

    for description in ["a", "ab", "abc", "abcd", " ab ", "\t\n", "    "]:
        error = expect_error(description, ValidationError)
        assert "too short" in str(error), f"{description!r} should be too short"

    logger.info("✓ Short description test passed")


def test_backend_unavailable():
    """Valid descriptions get setup instructions echoing the request."""
    description = "Create a for loop in Rust"
    error = expect_error(description, BackendUnavailable)
    message = str(error)

    assert "Model not configured" in message, f"Unexpected message: {message}"
    assert (
        "'Create a for loop in Rust'" in message
    ), f"Request should be echoed verbatim: {message}"
    assert "GGUF" in message, "Setup steps should mention the model format"
    assert f"'{config.MODELS_DIR}'" in message, "Setup steps should name the models dir"
    assert message.endswith("Your request: 'Create a for loop in Rust'")

    # Exactly the minimum length is accepted by validation
    error = expect_error("hello", BackendUnavailable)
    assert "'hello'" in str(error)

    # Whitespace counts toward the length; the request is echoed untrimmed
    for description in ["     ", "a    ", "  ab  ", "\tabcd\n"]:
        error = expect_error(description, BackendUnavailable)
        assert "Model not configured" in str(error), f"{description!r}"
        assert str(error).endswith(
            f"Your request: '{description}'"
        ), f"{description!r} should be echoed verbatim: {error}"

    logger.info("✓ Backend unavailable test passed")


def test_description_echoed_verbatim():
    """Special characters in the request are echoed untouched."""
    description = "Write fn {name}() -> Result<(), String> with 100% coverage"
    error = expect_error(description, BackendUnavailable)
    assert f"'{description}'" in str(error), f"Request mangled in: {error}"

    message = create_setup_message("{models_dir} and {description}", "models")
    assert "Your request: '{models_dir} and {description}'" in message
    assert "Place it in a 'models' directory" in message

    # Placeholders inside the models directory are not re-expanded
    message = create_setup_message("Create a for loop", "{description}/{models_dir}")
    assert "Place it in a '{description}/{models_dir}' directory" in message
    assert message.count("Create a for loop") == 1, f"Request duplicated: {message}"
    assert message.endswith("Your request: 'Create a for loop'")

    logger.info("✓ Verbatim echo test passed")


def test_length_counts_code_points():
    """Length is measured in characters, not bytes."""
    # 5 code points, 6 bytes in UTF-8
    error = expect_error("héllo", BackendUnavailable)
    assert "'héllo'" in str(error)

    # 3 code points, 9 bytes in UTF-8
    error = expect_error("日本語", ValidationError)
    assert "too short" in str(error)

    error = expect_error("日本語の説明", BackendUnavailable)
    assert "Model not configured" in str(error)

    logger.info("✓ Code point length test passed")


def test_error_hierarchy():
    """Both failure kinds share a base class but stay distinct."""
    assert issubclass(ValidationError, CodeGenerationError)
    assert issubclass(BackendUnavailable, CodeGenerationError)
    assert not issubclass(BackendUnavailable, ValidationError)
    assert not issubclass(ValidationError, BackendUnavailable)

    logger.info("✓ Error hierarchy test passed")


def test_validate_description_accepts_valid_input():
    """Validation alone passes once the minimum length is reached."""
    assert validate_description("Create a for loop in Rust") is None
    assert validate_description("  hello  ") is None

    logger.info("✓ Validation pass-through test passed")


def test_no_input_succeeds():
    """Every generated string up to a bounded length fails to produce code."""
    alphabet = ["a", " ", "é", "\t"]
    checked = 0

    for length in range(0, 7):
        for chars in itertools.product(alphabet, repeat=length):
            description = "".join(chars)
            error = expect_error(description)

            if not description:
                assert isinstance(error, ValidationError)
                assert str(error) == "Description cannot be empty"
            elif len(description) < MIN_DESCRIPTION_LENGTH:
                assert isinstance(error, ValidationError), f"{description!r}"
                assert "too short" in str(error)
            else:
                assert isinstance(error, BackendUnavailable), f"{description!r}"
                assert "Model not configured" in str(error)
                assert f"'{description}'" in str(error)
            checked += 1

    logger.info(f"✓ No-success test passed ({checked} inputs checked)")


def test_config_summary():
    """Configuration exposes its values as a dictionary."""
    summary = Config.summary()
    assert summary["models_dir"] == config.MODELS_DIR
    assert summary["history_file"] == config.HISTORY_FILE
    assert summary["log_level"] == config.LOG_LEVEL

    logger.info("✓ Config summary test passed")


def run_all_tests():
    """Run all generator tests."""
    logger.info("=" * 60)
    logger.info("Code Generator Tests")
    logger.info("=" * 60)

    tests = [
        ("Empty Description", test_empty_description),
        ("Short Description", test_short_description),
        ("Backend Unavailable", test_backend_unavailable),
        ("Verbatim Echo", test_description_echoed_verbatim),
        ("Code Point Length", test_length_counts_code_points),
        ("Error Hierarchy", test_error_hierarchy),
        ("Validation Pass-through", test_validate_description_accepts_valid_input),
        ("No Success Path", test_no_input_succeeds),
        ("Config Summary", test_config_summary),
    ]

    passed = 0
    failed = 0

    for test_name, test_func in tests:
        try:
            logger.info(f"\n{test_name}...")
            test_func()
            passed += 1
        except Exception as e:
            logger.error(f"✗ {test_name} failed: {e}", exc_info=True)
            failed += 1

    logger.info("\n" + "=" * 60)
    logger.info(f"Test Results: {passed} passed, {failed} failed")
    logger.info("=" * 60)

    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
