"""
Use Cases (Application Services) do Domínio de Chamados.

ChamadoService orquestra:
- Autorização (motor de regras)
- Resolução de técnico e cliente
- Máquina de estados da data de fechamento (na entidade)
- Persistência via Unit of Work

Princípios:
- Principal recebido explicitamente em cada operação
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
"""

import logging
from typing import Dict, List, Optional

from src.core.autorizacao.regras import (
    Acao,
    Recurso,
    TipoRecurso,
    escopo_listagem,
    exigir_autenticacao,
    exigir_autorizacao,
)
from src.core.pessoas.entities import PessoaEntity, TipoPessoa
from src.core.pessoas.ports import PessoaRepository
from src.core.shared.exceptions import EntityNotFoundError, ValidationError
from src.core.shared.interfaces import UnitOfWork
from src.core.shared.principal import Principal

from .dtos import ChamadoInputDTO, ChamadoOutputDTO
from .entities import ChamadoEntity, ChamadoPrioridade, ChamadoStatus
from .ports import ChamadoRepository

logger = logging.getLogger(__name__)


class ChamadoService:
    """
    CRUD de chamados.

    - Abrir: qualquer pessoa com perfil (CLIENTE, TECNICO ou ADMIN)
    - Ler: ADMIN, TECNICO ou o cliente dono do chamado
    - Listar: ADMIN vê todos; TECNICO os atribuídos a ele; cliente os próprios
    - Atualizar: TECNICO ou ADMIN
    - Excluir: apenas ADMIN

    Example:
        service = ChamadoService(chamado_repo, pessoa_repo, uow)
        chamado = service.criar(principal, ChamadoInputDTO(
            titulo="Erro ao acessar VPN",
            prioridade="MEDIA",
            tecnico_id=2,
            cliente_id=6,
        ))
    """

    def __init__(
        self,
        chamado_repo: ChamadoRepository,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
    ):
        self.chamado_repo = chamado_repo
        self.pessoa_repo = pessoa_repo
        self.uow = uow

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _carregar(self, chamado_id: int) -> ChamadoEntity:
        chamado = self.chamado_repo.get_by_id(chamado_id)
        if chamado is None:
            raise EntityNotFoundError.para("Chamado", chamado_id)
        return chamado

    def _resolver_pessoa(self, tipo: TipoPessoa, pessoa_id: int) -> PessoaEntity:
        """
        Resolve técnico/cliente referenciado pelo chamado.

        Raises:
            EntityNotFoundError: Se não existe pessoa do tipo com esse id
        """
        pessoa = self.pessoa_repo.get_by_id(pessoa_id)
        if pessoa is None or pessoa.tipo is not tipo:
            raise EntityNotFoundError.para(tipo.value, pessoa_id)
        return pessoa

    @staticmethod
    def _id_requerido(valor, campo: str) -> int:
        if valor is None or valor == "":
            raise ValidationError(f"O campo {campo.upper()} é requerido", field=campo)
        try:
            return int(valor)
        except (TypeError, ValueError):
            raise ValidationError(f"{campo.capitalize()} inválido: {valor}", field=campo)

    @staticmethod
    def _converter_prioridade(valor) -> ChamadoPrioridade:
        if valor is None or valor == "":
            raise ValidationError("O campo PRIORIDADE é requerido", field="prioridade")
        try:
            return ChamadoPrioridade.from_value(valor)
        except ValueError as e:
            raise ValidationError(str(e), field="prioridade")

    @staticmethod
    def _converter_status(valor) -> Optional[ChamadoStatus]:
        if valor is None or valor == "":
            return None
        try:
            return ChamadoStatus.from_value(valor)
        except ValueError as e:
            raise ValidationError(str(e), field="status")

    def _validar_entrada(self, input_dto: ChamadoInputDTO) -> dict:
        """
        Converte e valida campos do DTO, resolvendo técnico e cliente.

        Returns:
            Argumentos prontos para ChamadoEntity.criar/atualizar
        """
        ChamadoEntity.validar_titulo(input_dto.titulo)

        prioridade = self._converter_prioridade(input_dto.prioridade)
        status = self._converter_status(input_dto.status)
        tecnico_id = self._id_requerido(input_dto.tecnico_id, "tecnico")
        cliente_id = self._id_requerido(input_dto.cliente_id, "cliente")

        self._resolver_pessoa(TipoPessoa.TECNICO, tecnico_id)
        self._resolver_pessoa(TipoPessoa.CLIENTE, cliente_id)

        return {
            "titulo": input_dto.titulo,
            "prioridade": prioridade,
            "tecnico_id": tecnico_id,
            "cliente_id": cliente_id,
            "status": status,
            "observacoes": input_dto.observacoes,
        }

    def _to_output(
        self,
        chamado: ChamadoEntity,
        nomes: Optional[Dict[int, Optional[str]]] = None,
    ) -> ChamadoOutputDTO:
        """Monta DTO resolvendo nomes de técnico/cliente (cache por chamada)."""
        nomes = {} if nomes is None else nomes

        def nome(pessoa_id: Optional[int]) -> Optional[str]:
            if pessoa_id is None:
                return None
            if pessoa_id not in nomes:
                pessoa = self.pessoa_repo.get_by_id(pessoa_id)
                nomes[pessoa_id] = pessoa.nome if pessoa else None
            return nomes[pessoa_id]

        return ChamadoOutputDTO.from_entity(
            chamado,
            nome_tecnico=nome(chamado.tecnico_id),
            nome_cliente=nome(chamado.cliente_id),
        )

    # -------------------------------------------------------------------------
    # Operações
    # -------------------------------------------------------------------------

    def obter(self, principal: Optional[Principal], chamado_id: int) -> ChamadoOutputDTO:
        """
        Obtém chamado por id.

        A permissão depende do dono do chamado, então o registro é
        carregado antes da checagem (autenticação vem primeiro).

        Raises:
            AuthenticationError: Sem principal
            EntityNotFoundError: Se não existe
            AuthorizationError: Cliente que não é dono do chamado
        """
        exigir_autenticacao(principal)
        chamado = self._carregar(chamado_id)

        exigir_autorizacao(
            principal,
            Acao.LER,
            Recurso.chamado(chamado.id, chamado.cliente_id, chamado.tecnico_id),
        )
        return self._to_output(chamado)

    def listar(self, principal: Optional[Principal]) -> List[ChamadoOutputDTO]:
        """Lista chamados visíveis ao principal (filtro aplicado na origem)."""
        escopo = escopo_listagem(principal, TipoRecurso.CHAMADO)

        if escopo.todos:
            chamados = self.chamado_repo.list_all()
        elif escopo.tecnico_id is not None:
            chamados = self.chamado_repo.list_by_tecnico(escopo.tecnico_id)
        else:
            chamados = self.chamado_repo.list_by_cliente(escopo.cliente_id)

        nomes: Dict[int, Optional[str]] = {}
        return [self._to_output(c, nomes) for c in chamados]

    def criar(self, principal: Optional[Principal], input_dto: ChamadoInputDTO) -> ChamadoOutputDTO:
        """
        Abre novo chamado.

        Raises:
            AuthorizationError: Principal sem perfil
            ValidationError: Campos obrigatórios ausentes/inválidos
            EntityNotFoundError: Técnico ou cliente inexistente
        """
        exigir_autorizacao(principal, Acao.CRIAR, Recurso.chamado())

        with self.uow:
            dados = self._validar_entrada(input_dto)
            chamado = ChamadoEntity.criar(**dados)
            self.chamado_repo.save(chamado)

        logger.info(
            f"Chamado {chamado.id} aberto por {principal.id} "
            f"(técnico={chamado.tecnico_id}, cliente={chamado.cliente_id})"
        )
        return self._to_output(chamado)

    def atualizar(
        self,
        principal: Optional[Principal],
        chamado_id: int,
        input_dto: ChamadoInputDTO,
    ) -> ChamadoOutputDTO:
        """
        Substitui os campos do chamado.

        Status ausente mantém o atual; a data de fechamento só muda
        quando o status muda.

        Raises:
            AuthorizationError: Principal sem perfil TECNICO/ADMIN
            EntityNotFoundError: Chamado, técnico ou cliente inexistente
            ValidationError: Campos obrigatórios ausentes/inválidos
        """
        exigir_autorizacao(principal, Acao.ATUALIZAR, Recurso.chamado(chamado_id))

        with self.uow:
            chamado = self._carregar(chamado_id)
            status_anterior = chamado.status

            dados = self._validar_entrada(input_dto)
            chamado.atualizar(**dados)
            self.chamado_repo.save(chamado)

        if chamado.status is not status_anterior:
            logger.info(
                f"Chamado {chamado.id}: {status_anterior.name} → {chamado.status.name} "
                f"por {principal.id}"
            )
        else:
            logger.info(f"Chamado {chamado.id} atualizado por {principal.id}")
        return self._to_output(chamado)

    def excluir(self, principal: Optional[Principal], chamado_id: int) -> None:
        """
        Remove chamado.

        Raises:
            AuthorizationError: Principal não é ADMIN
            EntityNotFoundError: Se não existe
        """
        exigir_autorizacao(principal, Acao.EXCLUIR, Recurso.chamado(chamado_id))

        with self.uow:
            chamado = self._carregar(chamado_id)
            self.chamado_repo.delete(chamado.id)

        logger.info(f"Chamado {chamado_id} excluído por {principal.id}")
