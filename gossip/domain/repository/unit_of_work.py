"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Groups repository writes into one atomic commit.

    Everything executed inside ``transaction()`` is committed together when
    the block exits normally and rolled back if it raises (including
    cancellation).
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        pass
