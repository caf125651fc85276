"""Translate Prisma client errors into the repository port's error contract."""

from contextlib import contextmanager
from logging import getLogger

from prisma.errors import PrismaError, UniqueViolationError

from eventdesk.domain.exceptions import ConflictError, PersistenceError

logger = getLogger(__name__)


@contextmanager
def translate_prisma_errors(operation: str):
    try:
        yield
    except UniqueViolationError as e:
        raise ConflictError(f"{operation}: duplicate record") from e
    except PrismaError as e:
        logger.error(f"{operation} failed: {e}")
        raise PersistenceError(f"{operation} failed") from e
