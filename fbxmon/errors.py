"""Exception hierarchy for fbxmon."""

from __future__ import annotations


class FbxmonError(Exception):
    """Base class for every error fbxmon raises on purpose."""


class FetchError(FbxmonError):
    """The status page could not be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Cannot fetch {url}: {reason}")
        self.url = url


class UnrecognizedFamily(FbxmonError, ValueError):
    """The requested metric family is not one of the known families."""

    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(f"ERROR : Monitor can only be {', '.join(known)}")
        self.name = name


class ConfigError(FbxmonError, ValueError):
    """The configuration file is unreadable or invalid."""
