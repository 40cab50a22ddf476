from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

C_ACCENT1 = "#45d3ee"  # Cyan
C_ACCENT2 = "#9FBFC5"  # Muted Blue
C_ACCENT4 = "#fecd91"  # Orange

# Option: (Aliases, Description)
OPTIONS = {
    "help": ("-help, --help, -h", "Display this help and exit."),
    "keep": ("-keep, --keep", "Do not replace the decorated name. Insert the undecorated name after it instead."),
    "resolver": ("--resolver NAME", "Undecoration backend: auto, dbghelp or undname."),
    "undname_tool": ("--undname-tool PATH", "Executable used by the undname backend (default: llvm-undname)."),
    "log_level": ("--log-level LEVEL", "Diagnostics written to stderr: DEBUG, INFO, WARNING or ERROR."),
}

USAGE = "msvcfilt [OPTIONS] <decorated string>..."
SUMMARY = (
    "Searches the input stream for Microsoft Visual C++ decorated symbol names\n"
    "and replaces them with their undecorated equivalent.\n"
    "Reads STDIN when no <decorated string> is given."
)


def display_help(console: Console = None):
    console = console or Console()

    table = Table(box=None, header_style=f"bold {C_ACCENT1}", expand=True)
    table.add_column("Option", style=f"bold {C_ACCENT4}", no_wrap=True)
    table.add_column("Description")
    for aliases, description in OPTIONS.values():
        table.add_row(aliases, description)

    body = Table.grid(padding=(1, 0))
    body.add_row(Text(f"Usage: {USAGE}", style="bold"))
    body.add_row(Text(SUMMARY))
    body.add_row(table)

    console.print(Panel(
        body,
        title=Text(" MSVCFILT ", style=f"bold italic {C_ACCENT1}"),
        title_align="left",
        border_style=C_ACCENT2,
        padding=(1, 2),
    ))
