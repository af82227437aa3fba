"""
Repositório Django para persistência de Pessoas.

Implementa PessoaRepository (src/core/pessoas/ports.py).

As restrições UNIQUE de cpf/email no banco cobrem a janela entre a
validação de unicidade no service e a gravação: um IntegrityError
vira ConflictError.
"""

from typing import List, Optional
import logging

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from src.core.pessoas.entities import PessoaEntity, TipoPessoa
from src.core.shared.exceptions import ConflictError

from .mappers import PessoaMapper
from .models import PessoaModel

logger = logging.getLogger(__name__)

MENSAGEM_DUPLICIDADE = "CPF ou Email já cadastrados no sistema."


class DjangoPessoaRepository:
    """
    Implementação Django do PessoaRepository.

    Example:
        repo = DjangoPessoaRepository()
        repo.save(pessoa)          # atribui pessoa.id
        repo.get_by_email("linus@mail.com")
    """

    def __init__(self):
        self._mapper = PessoaMapper()

    def save(self, pessoa: PessoaEntity) -> PessoaEntity:
        """
        Persiste pessoa (create ou update).

        Raises:
            ConflictError: Se o banco rejeitar CPF/e-mail duplicado
        """
        logger.debug(f"Saving pessoa: {pessoa.id}")

        try:
            with transaction.atomic():
                if pessoa.id is None:
                    model = self._mapper.to_model(pessoa)
                    model.save()
                    pessoa.id = model.id
                else:
                    model = PessoaModel.objects.get(id=pessoa.id)
                    self._mapper.update_model(model, pessoa)
                    model.save()
        except IntegrityError as e:
            logger.warning(f"Pessoa rejeitada pelo banco (duplicidade): {e}")
            raise ConflictError(MENSAGEM_DUPLICIDADE) from e

        logger.info(f"Pessoa saved: {pessoa.id}")
        return pessoa

    def get_by_id(self, pessoa_id: int) -> Optional[PessoaEntity]:
        try:
            model = PessoaModel.objects.get(id=pessoa_id)
            return self._mapper.to_entity(model)
        except PessoaModel.DoesNotExist:
            logger.debug(f"Pessoa not found: {pessoa_id}")
            return None

    def get_by_cpf(self, cpf: str) -> Optional[PessoaEntity]:
        model = PessoaModel.objects.filter(cpf=cpf).first()
        return self._mapper.to_entity(model) if model else None

    def get_by_email(self, email: str) -> Optional[PessoaEntity]:
        model = PessoaModel.objects.filter(email=email).first()
        return self._mapper.to_entity(model) if model else None

    def list_by_tipo(self, tipo: TipoPessoa) -> List[PessoaEntity]:
        models = PessoaModel.objects.filter(tipo=tipo.name).order_by('id')
        return self._mapper.to_entity_list(models)

    def delete(self, pessoa_id: int) -> None:
        """
        Remove pessoa.

        Raises:
            ConflictError: Se ainda referenciada por chamados (on_delete=PROTECT)
        """
        try:
            deleted_count, _ = PessoaModel.objects.filter(id=pessoa_id).delete()
        except ProtectedError as e:
            raise ConflictError(
                "Pessoa possui chamados e não pode ser excluída!",
                field="chamados",
            ) from e

        if deleted_count > 0:
            logger.info(f"Pessoa deleted: {pessoa_id}")
        else:
            logger.debug(f"Pessoa not found for deletion: {pessoa_id}")
