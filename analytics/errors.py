"""
Errors raised while turning uploaded CSV content into a table
"""


class AnalyticsError(Exception):
    """Base class for table ingestion failures"""


class EmptyInputError(AnalyticsError):
    def __init__(self, message: str = "The CSV file appears to be empty."):
        super().__init__(message)


class ReadFailure(AnalyticsError):
    def __init__(self, message: str = "An error occurred while reading the file."):
        super().__init__(message)
