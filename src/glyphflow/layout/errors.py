"""Errors raised by the layout core."""


class MalformedLayout(ValueError):
    """Layout input or intermediate state violates a layout invariant."""
