"""
Repositório Django para persistência de Chamados.

Implementa ChamadoRepository (src/core/chamados/ports.py). As
listagens filtradas por técnico/cliente executam o filtro no banco.
"""

from typing import List, Optional
import logging

from django.db import transaction
from django.db.models import Q

from src.core.chamados.entities import ChamadoEntity

from .mappers import ChamadoMapper
from .models import ChamadoModel

logger = logging.getLogger(__name__)


class DjangoChamadoRepository:
    """
    Implementação Django do ChamadoRepository.

    Example:
        repo = DjangoChamadoRepository()
        repo.save(chamado)
        meus = repo.list_by_cliente(principal.id)
    """

    def __init__(self):
        self._mapper = ChamadoMapper()

    def save(self, chamado: ChamadoEntity) -> ChamadoEntity:
        logger.debug(f"Saving chamado: {chamado.id}")

        with transaction.atomic():
            if chamado.id is None:
                model = self._mapper.to_model(chamado)
                model.save()
                chamado.id = model.id
            else:
                model = ChamadoModel.objects.get(id=chamado.id)
                self._mapper.update_model(model, chamado)
                model.save()

        logger.info(f"Chamado saved: {chamado.id}")
        return chamado

    def get_by_id(self, chamado_id: int) -> Optional[ChamadoEntity]:
        try:
            model = ChamadoModel.objects.get(id=chamado_id)
            return self._mapper.to_entity(model)
        except ChamadoModel.DoesNotExist:
            logger.debug(f"Chamado not found: {chamado_id}")
            return None

    def delete(self, chamado_id: int) -> None:
        deleted_count, _ = ChamadoModel.objects.filter(id=chamado_id).delete()

        if deleted_count > 0:
            logger.info(f"Chamado deleted: {chamado_id}")
        else:
            logger.debug(f"Chamado not found for deletion: {chamado_id}")

    def list_all(self) -> List[ChamadoEntity]:
        return self._mapper.to_entity_list(ChamadoModel.objects.order_by('id'))

    def list_by_cliente(self, cliente_id: int) -> List[ChamadoEntity]:
        models = ChamadoModel.objects.filter(cliente_id=cliente_id).order_by('id')
        return self._mapper.to_entity_list(models)

    def list_by_tecnico(self, tecnico_id: int) -> List[ChamadoEntity]:
        models = ChamadoModel.objects.filter(tecnico_id=tecnico_id).order_by('id')
        return self._mapper.to_entity_list(models)

    def exists_by_pessoa(self, pessoa_id: int) -> bool:
        return ChamadoModel.objects.filter(
            Q(cliente_id=pessoa_id) | Q(tecnico_id=pessoa_id)
        ).exists()
