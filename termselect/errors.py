class SelectError(Exception):
    """base class for errors raised by the select prompt"""


class ConfigurationError(SelectError, ValueError):
    """the prompt was built without anything to select from"""


class InterruptError(SelectError):
    """the user sent the interrupt signal (ctrl+c) while the prompt was active"""

    def __init__(self, message: str = "interrupt"):
        super().__init__(message)
