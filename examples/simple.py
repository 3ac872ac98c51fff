import sys

from rich.console import Console

from cliroute import CliApp, Command, FilePath, Group, Int, OptionsContainer
from cliroute.utils import setup_logging

setup_logging()
console = Console()


def create(name: str, force: bool = False, verbose: bool = False) -> None:
    console.print(f"Creating database [bold]{name}[/] (force={force}, verbose={verbose})")


def restore(backup: FilePath, tables: list[str] | None = None, **_) -> None:
    console.print(f"Restoring {backup.relative} tables={tables or 'all'}")


def status(**_) -> None:
    console.print("All databases are healthy")


global_options = OptionsContainer("global").add_option(
    "verbose", type=bool, alias="v", description="Print more output"
)
create_options = (
    OptionsContainer("create")
    .add_option("name", required=True, description="Database name")
    .add_option("force", type=bool, alias="f", description="Overwrite an existing database")
)
restore_options = OptionsContainer("restore").add_option(
    "retries", type=Int, alias="r", description="Attempts before giving up"
)

restore_command = (
    Command("restore", "Restore a database from a backup", restore, options=[restore_options])
    .add_parameter(1, "backup", type=FilePath)
    .add_parameter(2, "tables", optional=True, is_array=True)
)

db = (
    Group("db", "Database commands")
    .add_command(Command("create", "Create a database", create, options=[create_options]), alias="c")
    .add_command(restore_command)
)

root = (
    Group("dbtool", options=[global_options])
    .add_group("db", db, alias="d")
    .add_star(Command("status", "Show database status", status))
)

app = CliApp(root, name="dbtool", version="0.1.0")

# Entry point
if __name__ == "__main__":
    sys.exit(app.run())
