"""
Swedish personnummer validation

Validates and normalizes Swedish personal identity numbers:
- Six accepted layouts (YYMMDD[-+]NNNN, YYYYMMDD[-+]NNNN, separator optional)
- Luhn checksum verification
- Century resolution from a reference date and the +/- separator convention
- Pydantic settings, structured logging with structlog and a CLI
"""

__version__ = "0.1.0"

from .errors import INVALID_MESSAGE, InvalidPersonnummerError
from .validator import is_valid, normalize, validate

__all__ = [
    "INVALID_MESSAGE",
    "InvalidPersonnummerError",
    "is_valid",
    "normalize",
    "validate",
]
