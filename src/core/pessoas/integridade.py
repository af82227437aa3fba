"""
Validação de integridade de Pessoas.

CPF e e-mail são únicos entre todas as pessoas (clientes e técnicos
compartilham o mesmo espaço). A checagem é feita antes de persistir;
a restrição UNIQUE do banco cobre a janela entre validar e salvar.
"""

import logging
from typing import Optional

from src.core.shared.exceptions import ConflictError

from .entities import PessoaEntity
from .ports import PessoaRepository

logger = logging.getLogger(__name__)


def validar_unicidade(
    repo: PessoaRepository,
    cpf: str,
    email: str,
    excluir_id: Optional[int] = None,
) -> None:
    """
    Garante que CPF e e-mail não pertencem a outra pessoa.

    As duas buscas são sempre feitas; o conflito de CPF é reportado
    antes do conflito de e-mail.

    Args:
        repo: Repositório de pessoas
        cpf: CPF candidato
        email: E-mail candidato
        excluir_id: Id da pessoa sendo atualizada (None na criação)

    Raises:
        ConflictError: field="cpf" ou field="email"
    """
    com_cpf = repo.get_by_cpf(cpf)
    com_email = repo.get_by_email(email)

    if com_cpf is not None and com_cpf.id != excluir_id:
        logger.debug(f"CPF {cpf} já pertence à pessoa {com_cpf.id}")
        raise ConflictError("CPF já cadastrado no sistema!", field="cpf")

    if com_email is not None and com_email.id != excluir_id:
        logger.debug(f"E-mail {email} já pertence à pessoa {com_email.id}")
        raise ConflictError("E-mail já cadastrado no sistema!", field="email")


def precisa_revalidar(existente: PessoaEntity, cpf: str, email: str) -> bool:
    """
    Indica se uma atualização altera CPF ou e-mail.

    Atualizações que mantêm os dois campos não passam pela checagem
    de unicidade.
    """
    return cpf != existente.cpf or email != existente.email
