from .errors import InvalidOptionError
from .escaper import CONTROL, NON_ASCII, NONBREAKING_SPACE, Escaper, EscaperOpts

__all__ = [
    "CONTROL",
    "NONBREAKING_SPACE",
    "NON_ASCII",
    "Escaper",
    "EscaperOpts",
    "InvalidOptionError",
]
