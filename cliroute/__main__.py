"""
Cliroute CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from pathlib import Path
from typing import Any

from rich.markup import escape

from cliroute.config import find_config, loader
from cliroute.console import error_console
from cliroute.exceptions import BuildError
from cliroute.themes import OneColors
from cliroute.utils import setup_logging


def bootstrap() -> Path | None:
    config_path = find_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main() -> Any:
    setup_logging()
    config_path = bootstrap()
    if not config_path:
        error_console.print(
            f"[{OneColors.DARK_RED}]❌ No cliroute config found.[/]\n"
            f"[{OneColors.COMMENT_GREY}]Create cliroute.yaml or cliroute.toml in the "
            "current directory, or point CLIROUTE_CONFIG at one.[/]"
        )
        sys.exit(1)
    try:
        app = loader(config_path)
        app.build()
    except (OSError, ValueError, BuildError) as error:
        error_console.print(
            f"[{OneColors.DARK_RED}]❌ Could not load {escape(str(config_path))}:[/] "
            f"{escape(str(error))}"
        )
        sys.exit(1)
    sys.exit(app.run(sys.argv[1:]))


if __name__ == "__main__":
    main()
