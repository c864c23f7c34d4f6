"""
Enhanced interactive CLI for code generation with Rich UI.

Same loop as the plain CLI, presented with:
- A welcome panel
- Syntax-highlighted generated code
- Persistent input history with search (Ctrl+R)
- Auto-suggestions from previous descriptions
"""

import logging
import sys
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.history import FileHistory
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from .chat_cli import CodeGenCLI
from .config import config
from .generator import generate_code
from .prompts import BANNER_LINES, GOODBYE_MESSAGE, INPUT_PROMPT

logger = logging.getLogger(__name__)


class RichCodeGenCLI(CodeGenCLI):
    """Enhanced code generation REPL with Rich UI."""

    def __init__(
        self,
        generate: Callable[[str], str] = generate_code,
        input_func: Optional[Callable[[str], str]] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        history_file: Optional[str] = None,
    ):
        """
        Initialize the enhanced CLI.

        Args:
            generate: Function mapping a description to generated code
            input_func: Optional line reader; a prompt_toolkit session is
                created on first read when omitted
            console: Console for regular output
            err_console: Console for errors
            history_file: Path to file for persistent input history
        """
        super().__init__(generate=generate, input_func=input_func)
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.history_file = history_file or config.HISTORY_FILE
        self.session: Optional[PromptSession] = None

    def print_banner(self):
        """Display the welcome banner in a panel."""
        welcome_panel = Panel(
            Text("\n".join(BANNER_LINES)),
            title="[bold blue]Welcome[/bold blue]",
            border_style="blue",
            padding=(1, 2),
        )
        self.console.print(welcome_panel)
        self.console.print()

    def print_generated_code(self, code: str):
        """Display generated code with syntax highlighting."""
        code_panel = Panel(
            Syntax(code, "rust", theme="monokai", line_numbers=False),
            title="[bold green]Generated Code[/bold green]",
            border_style="green",
            padding=(1, 2),
        )
        self.console.print()
        self.console.print(code_panel)
        self.console.print()

    def print_error(self, error: Exception):
        # Descriptions are echoed back, so never interpret them as markup
        self.err_console.print(
            f"Error: {error}",
            style="red",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        self.err_console.print()

    def print_goodbye(self):
        self.console.print(GOODBYE_MESSAGE, style="yellow")

    def print_interrupted(self):
        self.console.print(
            "\n[yellow]⚠ Interrupted. Type 'quit' or 'exit' to leave.[/yellow]\n"
        )

    def print_read_failure(self, error: Exception):
        self.err_console.print(
            f"Failed to read input: {error}",
            style="red",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def read_line(self) -> str:
        """Prompt for one line using the injected reader or a prompt session."""
        if self.input_func is not None:
            return self.input_func(INPUT_PROMPT)

        if self.session is None:
            self.session = PromptSession(
                history=FileHistory(self.history_file),
                auto_suggest=AutoSuggestFromHistory(),
                enable_history_search=True,
            )
        return self.session.prompt(INPUT_PROMPT)


def main():
    """Main entry point for the enhanced code generation CLI."""
    # Configure logging with Rich handler
    from rich.logging import RichHandler

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.WARNING),
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_time=False,
                show_path=False,
            )
        ],
    )

    cli = RichCodeGenCLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
