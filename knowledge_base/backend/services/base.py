"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories, convert driver failures into
application errors, and log operations.

Usage:
    from knowledge_base.backend.services.base import BaseService

    class TagService(BaseService):
        def __init__(self, holder: ConnectionHolder) -> None:
            super().__init__(holder)
            self.repo = TagRepository(holder, "knowledge_base")

        async def list_tags(self) -> list[Tag]:
            return await self._execute_store_operation(
                "list_tags", self.repo.list_all()
            )
"""

from typing import Any, TypeVar

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from knowledge_base.backend.core.database import ConnectionHolder
from knowledge_base.backend.core.exceptions import StoreError
from knowledge_base.backend.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Failures raised while encoding or writing a document. DocumentTooLarge is
# a BSONError, not a PyMongoError; lone surrogates fail in the encoder.
STORE_ERRORS = (PyMongoError, BSONError, UnicodeEncodeError)


class BaseService:
    """
    Base class for all services.

    Provides:
    - Access to the shared connection holder
    - Logging context
    - Error wrapping for store operations

    Subclasses should:
    - Call super().__init__(holder) in their __init__
    - Initialize repositories in __init__
    - Implement business logic methods
    """

    def __init__(self, holder: ConnectionHolder) -> None:
        """
        Initialize the service with the shared connection holder.

        Args:
            holder: Connection holder created at application startup
        """
        self._holder = holder
        self._logger = get_logger(self.__class__.__module__)

    @property
    def holder(self) -> ConnectionHolder:
        """Get the connection holder."""
        return self._holder

    async def _execute_store_operation(
        self,
        operation: str,
        coro: Any,
    ) -> T:
        """
        Execute a store operation with error handling.

        Converts driver and document encoding failures to StoreError.
        Application errors (NotConnected, InvalidId, NotFound) pass
        through unchanged.
        Nothing is retried.

        Args:
            operation: Description of the operation for logging
            coro: Coroutine to execute

        Returns:
            Result of the coroutine

        Raises:
            StoreError: For any driver or encoding failure
        """
        try:
            return await coro
        except STORE_ERRORS as e:
            self._logger.error(
                "Store error",
                extra={"operation": operation, "error": str(e)},
            )
            raise StoreError(str(e)) from e

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
