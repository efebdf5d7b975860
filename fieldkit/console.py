"""Shared Rich console instances for FieldKit.

All modules should import console from here instead of creating their own
Console() instances, ensuring consistent output behavior.

Reports go to `console` (stdout). Progress notes and debug logs go to
`err_console` (stderr) so JSON reports stay parseable.
"""

from rich.console import Console

console = Console()
err_console = Console(stderr=True)
