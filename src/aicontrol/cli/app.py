"""Main CLI application using Typer.

Programs that embed the launcher and hold the key themselves set it as a
process property before calling main():

    from aicontrol.config import API_KEY_PROPERTY, set_property
    set_property(API_KEY_PROPERTY, key)
    main()

The QWEN_API_KEY environment variable still wins when both are present.
"""
import asyncio

import typer
from rich.console import Console

from ..config import API_KEY_ENV, load_settings

# Create Typer app
app = typer.Typer(
    name="aicontrol",
    help="Control a terminal interface with natural-language instructions",
    add_completion=False,
)

# Console for rich output
console = Console()


@app.command()
def run():
    """Launch the AI control interface.

    The API key is read from the QWEN_API_KEY environment variable, then
    from the qwen.api.key process property.
    """
    from ..ui import run_textual_tui

    if not load_settings().has_credentials:
        console.print(
            f"[yellow]{API_KEY_ENV} is not set; the interface will start "
            f"without an AI connection.[/yellow]"
        )

    try:
        asyncio.run(run_textual_tui())
    except KeyboardInterrupt:
        pass
    console.print("\n[dim]Goodbye![/dim]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
