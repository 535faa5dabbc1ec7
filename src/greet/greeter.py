"""Greeting validation and rendering"""

import logging
import sys
from typing import Optional, TextIO

from .models import GreetRequest

logger = logging.getLogger(__name__)

MAX_POINTS = 5
DEFAULT_POINTS = 1
DEFAULT_GREETING = "Hello"
DEFAULT_NAME = "World"


class GreetError(ValueError):
    """Base class for requests that cannot be rendered"""


class NonPositivePoints(GreetError):
    def __init__(self):
        super().__init__("Point count must be postitive.")


class TooManyPoints(GreetError):
    def __init__(self):
        super().__init__(f"Too many exclamation points. Max is {MAX_POINTS}.")


class Greeter:
    """Turns a GreetRequest into a single output line"""

    def validate(self, request: GreetRequest) -> None:
        """
        Check the request before anything is rendered.

        Raises:
            NonPositivePoints: points was given and is zero or negative
            TooManyPoints: points was given and exceeds MAX_POINTS
        """
        if request.points is None:
            return

        if request.points <= 0:
            logger.debug(f"Rejected points={request.points}: not positive")
            raise NonPositivePoints()

        if request.points > MAX_POINTS:
            logger.debug(f"Rejected points={request.points}: above {MAX_POINTS}")
            raise TooManyPoints()

    def render(self, request: GreetRequest) -> str:
        """Validate the request and build the greeting line (no newline)"""
        self.validate(request)

        quote = request.quote_style.mark
        points = request.points if request.points is not None else DEFAULT_POINTS
        exclamations = "!" * points

        name_output = " ".join(request.name) or DEFAULT_NAME
        greet_output = " ".join(request.content) or DEFAULT_GREETING

        return f"{quote}{greet_output} {name_output}{exclamations}{quote}"

    def run(self, request: GreetRequest, stream: Optional[TextIO] = None) -> str:
        """Render the request and write it to stream (stdout by default).

        Nothing is written when the request is rejected.

        Returns:
            The rendered line without its trailing newline
        """
        logger.debug(f"Greeting request: {request.model_dump()}")
        line = self.render(request)

        if stream is None:
            stream = sys.stdout
        stream.write(line + "\n")
        return line
