from rich.console import Console

console = Console()


def deploy(environment: str, services: list[str] | None = None, **options) -> None:
    console.print(f"Deploying {services or 'everything'} to [bold]{environment}[/]")
    if options.get("dry_run"):
        console.print("Dry run: nothing was changed")


def rollback(environment: str, steps: int = 1, **_) -> None:
    console.print(f"Rolling back {environment} by {steps} release(s)")


def show_help(**_) -> None:
    console.print("Usage: deploy <environment> [services...] | rollback <environment>")
