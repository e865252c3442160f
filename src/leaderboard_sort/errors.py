"""
Exceptions raised outside the core with user-facing messages for the CLI.
"""

from typing import Optional


class LeaderboardError(Exception):
    """Base exception for leaderboard errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class RecordParseError(LeaderboardError):
    """Raised when a record argument or table cannot be read."""
    def __init__(self, value: str, reason: str):
        super().__init__(
            f"Cannot parse record {value!r}: {reason}",
            f"Invalid record '{value}': {reason}",
        )
        self.value = value
        self.reason = reason


class RecordNotFoundError(LeaderboardError):
    """Raised when an update names a record that is not on the board."""
    def __init__(self, name: str):
        super().__init__(
            f"Record '{name}' not found",
            f"Error: '{name}' is not on the leaderboard.",
        )
        self.name = name
