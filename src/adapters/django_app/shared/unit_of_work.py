"""
Unit of Work - Implementação Django.

Gerencia a transação de uma operação de serviço sobre um ou mais
repositórios, garantindo que tudo seja gravado ou nada seja.

Usa django.db.transaction.atomic: dentro de uma transação já aberta
(ATOMIC_REQUESTS, testes com banco) vira um savepoint.
"""

from typing import Optional
import logging

from django.db import transaction

from src.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Example:
        with DjangoUnitOfWork():
            pessoa_repo.save(tecnico)
            chamado_repo.save(chamado)
        # Commit automático; rollback se exceção
    """

    def __init__(self, using: Optional[str] = None):
        """
        Args:
            using: Alias do banco (None = default)
        """
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        self._committed = False
        self._rolled_back = False
        logger.debug("Transaction started")

    def commit(self) -> None:
        if self._atomic is None:
            return
        atomic, self._atomic = self._atomic, None
        atomic.__exit__(None, None, None)
        self._committed = True
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        if self._atomic is None:
            return
        atomic, self._atomic = self._atomic, None
        transaction.set_rollback(True, using=self._using)
        atomic.__exit__(None, None, None)
        self._rolled_back = True
        logger.debug("Transaction rolled back")

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back

