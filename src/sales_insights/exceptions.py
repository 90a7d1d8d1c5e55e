"""Domain-specific exceptions for sales_insights.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from SalesInsightsError for easy catching.
"""


class SalesInsightsError(Exception):
    """Base exception for all sales_insights errors.

    Users can catch this exception to handle any error raised by the package.
    """

    pass


class InputError(SalesInsightsError, ValueError):
    """Raised when a caller passes an invalid request.

    This exception is raised when:
    - The forecast horizon is outside 1-24
    - There is not enough history to forecast
    - A month filter falls outside 1-12
    - An unknown metric or an invalid date range is requested
    """

    pass


class ConfigError(SalesInsightsError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - Invalid configuration values are provided
    - Required directories or files are missing
    """

    pass


class DataQualityError(SalesInsightsError):
    """Raised when transaction data fails validation.

    This exception is raised when:
    - Required columns are missing from input data
    - A CSV row has a missing or malformed field
    """

    pass
