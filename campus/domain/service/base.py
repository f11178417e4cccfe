"""Base service classes for domain services."""

from typing import Awaitable, Callable, TypeVar

import logfire

from campus.domain.error import ConcurrentUpdateError, StoreUnavailableError
from campus.domain.repository import TransactionManager

T = TypeVar("T")


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


class TransactionalService(Service):
    """Base class for services that run optimistic read-modify-write sequences.

    Each sequence re-reads the records it needs, then writes them with
    compare-and-set. A ConcurrentUpdateError rolls the atomic scope back and
    the whole sequence runs again from the read, up to ``max_attempts``
    times.
    """

    def __init__(self, transaction: TransactionManager, max_attempts: int = 3) -> None:
        """Initialize transactional service.

        Args:
            transaction: Transaction manager for atomic scopes
            max_attempts: Attempts per sequence before giving up
        """
        self.transaction = transaction
        self.max_attempts = max(1, max_attempts)

    async def run_atomic(self, name: str, operation: Callable[[], Awaitable[T]]) -> T:
        """Run ``operation`` in an atomic scope, retrying on conflicts.

        Args:
            name: Operation name for logging
            operation: Coroutine factory performing the reads and writes

        Returns:
            Whatever ``operation`` returns

        Raises:
            StoreUnavailableError: If every attempt lost to a concurrent writer
        """
        last_error: ConcurrentUpdateError | None = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                async with self.transaction.atomic():
                    return await operation()
            except ConcurrentUpdateError as e:
                last_error = e
                logfire.warn(
                    "Concurrent update, retrying",
                    operation=name,
                    attempt=attempt,
                    resource=e.resource,
                    identifier=e.identifier,
                )

        logfire.error(
            "Giving up after repeated concurrent updates",
            operation=name,
            attempts=self.max_attempts,
        )
        raise StoreUnavailableError(
            "Too many people are doing this at once. Please try again."
        ) from last_error
