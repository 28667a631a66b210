"""Retry accounting for job submissions."""

from __future__ import annotations

DEFAULT_MAX_SUBMIT_ATTEMPTS = 3


class CountingRetry:
    """Allow a fixed number of attempts, then refuse every further one."""

    def __init__(self, max_attempts: int = DEFAULT_MAX_SUBMIT_ATTEMPTS) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1.")
        self._max_attempts = max_attempts
        self._attempt_count = 0

    @property
    def attempt_count(self) -> int:
        """Return how many attempts have been granted so far."""

        return self._attempt_count

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def attempt(self) -> bool:
        """Consume one attempt, returning False once the budget is spent."""

        if self._attempt_count < self._max_attempts:
            self._attempt_count += 1
            return True
        return False


__all__ = ["CountingRetry", "DEFAULT_MAX_SUBMIT_ATTEMPTS"]
