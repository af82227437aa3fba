"""
Mappers para conversão entre PessoaEntity (Core) e PessoaModel (Django).

Mappers são stateless e não contêm lógica de negócio.
"""

from typing import List

from src.core.pessoas.entities import PessoaEntity, TipoPessoa
from src.core.shared.principal import Perfil

from .models import PessoaModel


class PessoaMapper:
    """
    Mapper para conversão entre PessoaEntity e PessoaModel.

    O tipo é gravado pelo nome do enum (CLIENTE/TECNICO) e os perfis
    como lista de nomes ordenada pelo código.
    """

    @staticmethod
    def perfis_to_model(perfis) -> List[str]:
        return [p.name for p in sorted(perfis, key=lambda p: p.value)]

    @staticmethod
    def to_model(entity: PessoaEntity) -> PessoaModel:
        """Converte PessoaEntity para PessoaModel (não salva)."""
        return PessoaModel(
            id=entity.id,
            tipo=entity.tipo.name,
            nome=entity.nome,
            cpf=entity.cpf,
            email=entity.email,
            senha=entity.senha,
            perfis=PessoaMapper.perfis_to_model(entity.perfis),
            data_criacao=entity.data_criacao,
        )

    @staticmethod
    def to_entity(model: PessoaModel) -> PessoaEntity:
        """
        Converte PessoaModel para PessoaEntity.

        Bypassa as validações de PessoaEntity.criar() pois os dados
        já foram validados na gravação.
        """
        return PessoaEntity(
            id=model.id,
            tipo=TipoPessoa[model.tipo],
            nome=model.nome,
            cpf=model.cpf,
            email=model.email,
            senha=model.senha,
            perfis={Perfil.from_value(p) for p in (model.perfis or [])},
            data_criacao=model.data_criacao,
        )

    @staticmethod
    def to_entity_list(models) -> List[PessoaEntity]:
        return [PessoaMapper.to_entity(model) for model in models]

    @staticmethod
    def update_model(model: PessoaModel, entity: PessoaEntity) -> PessoaModel:
        """Atualiza Model existente com dados da Entity (não salva)."""
        model.nome = entity.nome
        model.cpf = entity.cpf
        model.email = entity.email
        model.senha = entity.senha
        model.perfis = PessoaMapper.perfis_to_model(entity.perfis)
        return model
