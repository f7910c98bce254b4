"""
ID generation utilities.

uses NanoID for short, URL-safe identifiers that are easy to grep in logs.
"""

from nanoid import generate


def generate_request_id() -> str:
    """
    generate a unique request ID using NanoID.

    returns:
        12-character URL-safe unique identifier

    example:
        >>> request_id = generate_request_id()
        >>> len(request_id)
        12
    """
    return generate(size=12)
