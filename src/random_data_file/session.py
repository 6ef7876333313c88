"""Interactive menu for creating random data files."""

import logging
import random

from .generator import write_data_file
from .models import GenerationRequest
from .prompts import (
    InvalidInputError,
    console,
    get_choice,
    get_data_type,
    get_element_count,
    get_filename,
)

logger = logging.getLogger(__name__)

CREATE_FILE = 1
EXIT = 2


def display_menu():
    """Print the menu entries."""
    console.print()
    console.print("1. Create new data file", markup=False)
    console.print("2. Exit", markup=False)


def create_file(rng: random.Random) -> GenerationRequest:
    """Prompt for a data type, an element count and a filename, then write the file.

    The prompts run in that order and the first failure aborts the rest.

    :param rng: Random generator shared across the session

    :return: The request that was written
    """
    data_type = get_data_type()
    count = get_element_count()
    filename = get_filename()

    request = GenerationRequest(data_type=data_type, count=count, filename=filename)
    write_data_file(request, rng)
    return request


def run_session(rng: random.Random | None = None):
    """Show the menu until the user chooses to exit.

    Failures while creating a file are reported and the menu is shown again.

    :param rng: Random generator to use, a fresh OS-seeded one by default
    """
    if rng is None:
        rng = random.Random()

    while True:
        display_menu()
        choice = get_choice()
        if choice == CREATE_FILE:
            try:
                create_file(rng)
            except (InvalidInputError, OSError) as ex:
                logger.warning(f"File creation failed: {ex}")
                console.print(f"Error creating file: {ex}", markup=False)
            else:
                console.print("File created successfully!", markup=False)
        elif choice == EXIT:
            break
        else:
            console.print("Invalid choice!", markup=False)

    console.print("Program terminated.", markup=False)
