"""Rich console implementation of the pipeline user interface"""

from typing import Optional

from rich.console import Console
from rich.prompt import Confirm

from ...core.interfaces import UserInterface
from ...exceptions import ConfirmationRejectedError


class RichUI(UserInterface):
    """Print pipeline output and ask for confirmation on a rich console"""

    def __init__(self, console: Optional[Console] = None, non_interactive: bool = False):
        """
        Initialize UI

        Args:
            console: Console to print to
            non_interactive: Confirm automatically instead of prompting
        """
        self.console = console or Console()
        self.non_interactive = non_interactive

    def say(self, line: str) -> None:
        self.console.print(line, end="", markup=False, highlight=False, soft_wrap=True)

    def ask_for_confirmation(self) -> None:
        if self.non_interactive:
            return

        if not Confirm.ask("\n[cyan]Continue?[/cyan]", console=self.console, default=False):
            raise ConfirmationRejectedError("Stopped")
