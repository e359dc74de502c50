"""
Exceptions for the extraction module.

This module defines custom exceptions used while extracting products.
"""


class ExtractionError(Exception):
    """Base class for extraction exceptions."""

    pass


class NoDataExtracted(ExtractionError):
    """
    Exception raised when no data could be extracted.

    This exception is raised when the LLM refuses the request or returns
    no parsed product data.
    """

    pass
