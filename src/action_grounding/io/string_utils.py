"""Define utility functions for processing whitespace-delimited token strings.

Definitions:

    token - A non-empty string containing no whitespace characters. Sequences of tokens are
        joined with single spaces and split on any run of whitespace, without escaping.
"""


def is_token(string: str) -> bool:
    """Check whether the given string can be used as a single token."""
    return bool(string) and not any(c.isspace() for c in string)


def join_tokens(tokens: list[str]) -> str:
    """Join the given tokens into a single space-separated string."""
    return " ".join(tokens)


def split_tokens(string: str) -> list[str]:
    """Split the given string into its whitespace-delimited tokens."""
    return string.split()
