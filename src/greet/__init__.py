"""greet - A customizable command line greeter"""

from .greeter import (
    DEFAULT_GREETING,
    DEFAULT_NAME,
    DEFAULT_POINTS,
    MAX_POINTS,
    GreetError,
    Greeter,
    NonPositivePoints,
    TooManyPoints,
)
from .models import GreetRequest, QuoteStyle

__version__ = "0.0.1"

__all__ = [
    # Core classes
    "Greeter",
    "GreetRequest",
    "QuoteStyle",
    # Errors
    "GreetError",
    "NonPositivePoints",
    "TooManyPoints",
    # Defaults
    "DEFAULT_GREETING",
    "DEFAULT_NAME",
    "DEFAULT_POINTS",
    "MAX_POINTS",
]
