"""
User-facing text for the code generator.

Contains the banner, the input prompt, the generated-code markers and the
setup instructions shown while no generation backend is configured.
"""

from typing import List


BANNER_LINES: List[str] = [
    "=== IA Coding - Code Generator ===",
    "Generate Rust code from natural language descriptions",
    "Type 'quit' or 'exit' to leave",
]

INPUT_PROMPT = (
    "Enter your description "
    "(e.g., 'Create a for loop in Rust iterating from 0 to 10'): "
)

EXIT_COMMANDS = ("quit", "exit")

GOODBYE_MESSAGE = "Goodbye!"

CODE_BLOCK_HEADER = "--- Generated Code ---"
CODE_BLOCK_FOOTER = "--- End of Generated Code ---"


# Shown in place of generated code until a local model is wired in
MODEL_SETUP_TEMPLATE = """Model not configured. To enable code generation:
1. Download a GGUF model file (e.g., from Hugging Face)
2. Place it in a '{models_dir}' directory in the project root
3. Update the generate_code() function to load and use the model
4. See README.md for detailed instructions"""

REQUEST_ECHO_PREFIX = "Your request: "


def create_setup_message(description: str, models_dir: str) -> str:
    """
    Build the "model not configured" message for a description.

    Args:
        description: The user's request, echoed verbatim
        models_dir: Directory name where model files are expected

    Returns:
        Formatted setup instructions
    """
    # Only the template is parsed for fields; neither value is re-expanded
    steps = MODEL_SETUP_TEMPLATE.format(models_dir=models_dir)
    return f"{steps}\n\n{REQUEST_ECHO_PREFIX}'{description}'"


def too_short_message(min_length: int) -> str:
    """Message for descriptions below the minimum length."""
    return (
        "Description is too short. Please provide a more detailed description "
        f"(at least {min_length} characters)."
    )
