import logging
from importlib.metadata import PackageNotFoundError, version

import typer

from .session import run_session

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)

try:
    __version__ = version("random-data-file")
except PackageNotFoundError:
    # package is not installed
    pass

app = typer.Typer(add_completion=False)


@app.command()
def main():
    """
    Generate files of random integers or floats from an interactive menu.

    Values are drawn uniformly from [-1000, 1000] and written one per line
    after a "Count: <N>" header.
    """
    try:
        run_session()
    except EOFError:
        raise typer.Abort()


if __name__ == "__main__":
    app()
