"""Errors raised while decoding airport service responses."""


class ParseError(ValueError):
    """Response body is not valid JSON or does not match the expected shape."""
