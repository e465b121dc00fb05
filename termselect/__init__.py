__version__ = "0.1.0"

from .errors import ConfigurationError, InterruptError, SelectError
from .options import Choice
from .select import Select, ask_one

__all__ = [
    "Choice",
    "ConfigurationError",
    "InterruptError",
    "Select",
    "SelectError",
    "ask_one",
    "__version__",
]
