"""Random value generation and data file writing."""

import logging
import random
from typing import Iterator

from .models import (
    FLOAT_DECIMALS,
    MAX_VALUE,
    MIN_VALUE,
    DataType,
    GenerationRequest,
)

logger = logging.getLogger(__name__)


def generate_values(
    data_type: DataType, count: int, rng: random.Random
) -> Iterator[str]:
    """Yield `count` random values formatted as output lines.

    :param data_type: Whether to draw integers or floats
    :param count: Number of values to draw
    :param rng: Random generator to draw from

    :return: An iterator over the formatted values, without line endings
    """
    if data_type is DataType.INTEGER:
        for _ in range(count):
            yield str(rng.randint(MIN_VALUE, MAX_VALUE))
    else:
        for _ in range(count):
            num = round(rng.uniform(MIN_VALUE, MAX_VALUE), FLOAT_DECIMALS)
            yield f"{num:.{FLOAT_DECIMALS}f}"


def write_data_file(request: GenerationRequest, rng: random.Random) -> None:
    """Write a header and `request.count` random values to `request.filename`.

    Any existing file is truncated. I/O errors propagate to the caller and a
    partially written file is left as-is.

    :param request: The file to create and what to put in it
    :param rng: Random generator to draw from
    """
    logger.debug(
        f"Writing {request.count} {request.data_type.name.lower()} values "
        f"to {request.filename}"
    )
    try:
        file = open(request.filename, "w", encoding="utf-8", newline="\n")
    except ValueError as ex:
        # Paths with embedded NUL bytes are rejected before reaching the OS
        raise OSError(f"Invalid filename: {ex}") from ex
    with file:
        file.write(f"Count: {request.count}\n")
        for value in generate_values(request.data_type, request.count, rng):
            file.write(f"{value}\n")
        file.flush()
    logger.info(f"Data file written: {request.filename}")
