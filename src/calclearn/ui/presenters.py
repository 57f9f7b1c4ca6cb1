from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..features.dialog import DialogResponse


class RichPresenter:
    def __init__(self, *, no_color: bool = False, console: Console | None = None):
        if console is not None:
            self.console = console
        elif no_color:
            self.console = Console(force_terminal=False, color_system=None)
        else:
            self.console = Console(force_terminal=True, color_system="auto")

    def start_session(self) -> None:
        guide = (
            "[bold]Willkommen![/] Jede Runde stellt eine Rechenaufgabe.\n"
            "- Tippe eine Zahl, um zu antworten.\n"
            "- [bold]name Uwe[/] verrät deinen Namen.\n"
            "- Leere Eingabe wiederholt die Aufgabe, alles andere startet eine neue.\n\n"
            "[bold]Controls[/]: q / quit = quit"
        )
        self.console.print(Panel(guide, title="Session Guide", border_style="green"))
        self.console.print()

    def show_reply(self, reply: DialogResponse) -> None:
        self.console.print(Panel(escape(reply.speech), title="Session", border_style="bold cyan", expand=False))

    def show_reprompt(self, reply: DialogResponse) -> None:
        self.console.print(f"[dim]{escape(reply.reprompt)}[/]")

    def end_session(self) -> None:
        self.console.print("[bold]Tschüss![/]")
