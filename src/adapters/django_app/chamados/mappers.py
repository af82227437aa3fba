"""
Mappers para conversão entre ChamadoEntity (Core) e ChamadoModel (Django).
"""

from typing import List

from src.core.chamados.entities import (
    ChamadoEntity,
    ChamadoPrioridade,
    ChamadoStatus,
)

from .models import ChamadoModel


class ChamadoMapper:
    """
    Mapper para conversão entre ChamadoEntity e ChamadoModel.

    Enums são gravados pelo nome; técnico/cliente pelos ids das FKs.
    """

    @staticmethod
    def to_model(entity: ChamadoEntity) -> ChamadoModel:
        """Converte ChamadoEntity para ChamadoModel (não salva)."""
        return ChamadoModel(
            id=entity.id,
            data_abertura=entity.data_abertura,
            data_fechamento=entity.data_fechamento,
            prioridade=entity.prioridade.name,
            status=entity.status.name,
            titulo=entity.titulo,
            observacoes=entity.observacoes,
            tecnico_id=entity.tecnico_id,
            cliente_id=entity.cliente_id,
        )

    @staticmethod
    def to_entity(model: ChamadoModel) -> ChamadoEntity:
        """Converte ChamadoModel para ChamadoEntity (sem validações)."""
        return ChamadoEntity(
            id=model.id,
            titulo=model.titulo,
            observacoes=model.observacoes,
            prioridade=ChamadoPrioridade[model.prioridade],
            status=ChamadoStatus[model.status],
            tecnico_id=model.tecnico_id,
            cliente_id=model.cliente_id,
            data_abertura=model.data_abertura,
            data_fechamento=model.data_fechamento,
        )

    @staticmethod
    def to_entity_list(models) -> List[ChamadoEntity]:
        return [ChamadoMapper.to_entity(model) for model in models]

    @staticmethod
    def update_model(model: ChamadoModel, entity: ChamadoEntity) -> ChamadoModel:
        """Atualiza Model existente; data_abertura não é alterada."""
        model.data_fechamento = entity.data_fechamento
        model.prioridade = entity.prioridade.name
        model.status = entity.status.name
        model.titulo = entity.titulo
        model.observacoes = entity.observacoes
        model.tecnico_id = entity.tecnico_id
        model.cliente_id = entity.cliente_id
        return model
