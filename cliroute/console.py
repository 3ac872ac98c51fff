# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used to report errors."""
from rich.console import Console

error_console = Console(color_system="truecolor", stderr=True)
