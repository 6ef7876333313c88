from enum import Enum

from pydantic import BaseModel, Field

# -----------------------------------------------------------------------------
# Generation limits
# -----------------------------------------------------------------------------

MIN_VALUE = -1000
MAX_VALUE = 1000

# Number of fractional digits written for floats
FLOAT_DECIMALS = 3

# Element counts are unsigned 32-bit values
MAX_ELEMENT_COUNT = 2**32 - 1


# -----------------------------------------------------------------------------
# Pydantic models
# -----------------------------------------------------------------------------


class DataType(str, Enum):
    """Kind of values written to a data file, keyed by its prompt letter."""

    INTEGER = "i"
    FLOAT = "f"


class GenerationRequest(BaseModel):
    """Everything needed to write one data file."""

    data_type: DataType
    count: int = Field(ge=0, le=MAX_ELEMENT_COUNT)
    filename: str
