"""Transaction manager interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Opens atomic scopes around read-modify-write sequences.

    Writes made inside ``atomic()`` are kept only if the block exits
    normally; any exception discards all of them. Scopes may nest.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic scope.

        Usage:
            async with transaction.atomic():
                vote = await vote_repository.find(...)
                await post_repository.update(...)
        """
        pass
