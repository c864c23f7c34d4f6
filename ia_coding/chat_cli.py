"""
Interactive CLI for code generation.

Provides a REPL that reads one description per line, validates it and prints
either the generated code or the reason no code was produced.
Type 'quit' or 'exit' to leave.
"""

import logging
import sys
from typing import Callable, Optional

from .config import config
from .generator import CodeGenerationError, generate_code
from .prompts import (
    BANNER_LINES,
    CODE_BLOCK_FOOTER,
    CODE_BLOCK_HEADER,
    EXIT_COMMANDS,
    GOODBYE_MESSAGE,
    INPUT_PROMPT,
)

logger = logging.getLogger(__name__)


class InputStreamError(Exception):
    """Exception raised when standard input can no longer be read."""

    pass


class CodeGenCLI:
    """Interactive code generation REPL."""

    def __init__(
        self,
        generate: Callable[[str], str] = generate_code,
        input_func: Optional[Callable[[str], str]] = None,
    ):
        """
        Initialize the CLI.

        Args:
            generate: Function mapping a description to generated code
            input_func: Function that shows a prompt and returns one line
                (defaults to the builtin input)
        """
        self.generate = generate
        self.input_func = input_func

    @staticmethod
    def is_exit_command(text: str) -> bool:
        """Check whether the (trimmed) input asks to leave."""
        return text.lower() in EXIT_COMMANDS

    def print_banner(self):
        """Print the startup banner."""
        for line in BANNER_LINES:
            print(line)
        print()

    def print_generated_code(self, code: str):
        """Print a generated code block."""
        print(f"\n{CODE_BLOCK_HEADER}")
        print(code)
        print(f"{CODE_BLOCK_FOOTER}\n")

    def print_error(self, error: Exception):
        """Print a generation error to stderr."""
        print(f"Error: {error}\n", file=sys.stderr)

    def print_goodbye(self):
        print(GOODBYE_MESSAGE)

    def print_interrupted(self):
        print("\n\nInterrupted. Type 'quit' or 'exit' to leave.\n")

    def print_read_failure(self, error: Exception):
        print(f"Failed to read input: {error}", file=sys.stderr)

    def read_line(self) -> str:
        """Prompt for and read one raw line."""
        reader = self.input_func or input
        return reader(INPUT_PROMPT)

    def read_description(self) -> Optional[str]:
        """
        Read one trimmed line of input.

        Returns:
            The trimmed line, or None when the input stream is exhausted

        Raises:
            InputStreamError: If the underlying stream fails
        """
        try:
            line = self.read_line()
        except EOFError:
            return None
        except (OSError, ValueError) as e:
            # ValueError covers decode errors and reads from a closed stream
            raise InputStreamError(str(e)) from e

        return line.strip()

    def process(self, description: str):
        """Generate code for one description and print the outcome."""
        try:
            code = self.generate(description)
        except CodeGenerationError as e:
            self.print_error(e)
            return

        self.print_generated_code(code)

    def run(self) -> int:
        """
        Start the interactive loop.

        Returns:
            Process exit code: 0 on quit/exit or end of input, 1 if stdin fails
        """
        self.print_banner()

        while True:
            try:
                description = self.read_description()

                if description is None:
                    print()
                    self.print_goodbye()
                    return 0

                # Skip empty input
                if not description:
                    continue

                if self.is_exit_command(description):
                    self.print_goodbye()
                    return 0

                self.process(description)

            except KeyboardInterrupt:
                self.print_interrupted()
                continue

            except InputStreamError as e:
                logger.error(f"Input stream failure: {e}")
                self.print_read_failure(e)
                return 1


def main():
    """Main entry point for the code generation CLI."""
    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    cli = CodeGenCLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
