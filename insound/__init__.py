"""Building blocks for the Insound web service: HTTP status codes, FSB bank builder constants, MongoDB object ids and helpers."""

__version__ = "0.1.0"