"""stringutil - Unicode-safe string utilities."""

__version__ = "0.1.0"

from .reverse import reverse

__all__ = [
    "reverse",
]
