"""
Use Cases (Application Services) do Domínio de Pessoas.

Services implementados:
- ClienteService: CRUD de clientes
- TecnicoService: CRUD de técnicos

Fluxo comum a todas as operações:
1. Autorizar o principal (motor de regras)
2. Carregar registros
3. Validar unicidade de CPF/e-mail
4. Gerar hash da senha, se informada
5. Persistir dentro do Unit of Work
6. Retornar DTO de saída (sem hash de senha)
"""

import logging
from typing import Iterable, List, Optional, Set

from src.core.autorizacao.regras import (
    Acao,
    Recurso,
    TipoRecurso,
    escopo_listagem,
    exigir_autorizacao,
)
from src.core.shared.exceptions import (
    AuthorizationError,
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.interfaces import PasswordHasher, UnitOfWork
from src.core.shared.principal import Perfil, Principal

from .dtos import PessoaInputDTO, PessoaOutputDTO
from .entities import PessoaEntity, TipoPessoa
from .integridade import precisa_revalidar, validar_unicidade
from .ports import PessoaRepository, VinculoChamados

logger = logging.getLogger(__name__)


def converter_perfis(valores: Iterable) -> Set[Perfil]:
    """
    Converte nomes/códigos recebidos da API em Perfis.

    Raises:
        ValidationError: Se algum perfil for inválido
    """
    try:
        return {Perfil.from_value(v) for v in valores}
    except ValueError as e:
        raise ValidationError(str(e), field="perfis")


class _PessoaService:
    """
    Base dos services de cliente e técnico.

    Subclasses definem o tipo de pessoa e o tipo de recurso usado
    nas checagens de autorização.
    """

    tipo: TipoPessoa
    tipo_recurso: TipoRecurso

    def __init__(
        self,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
        hasher: PasswordHasher,
        vinculos: Optional[VinculoChamados] = None,
    ):
        """
        Args:
            pessoa_repo: Repositório de pessoas (clientes e técnicos)
            uow: Unit of Work para transação atômica
            hasher: Função de hash de senha
            vinculos: Consulta de chamados por pessoa (bloqueia exclusão)
        """
        self.pessoa_repo = pessoa_repo
        self.uow = uow
        self.hasher = hasher
        self.vinculos = vinculos

    def _recurso(self, pessoa_id: Optional[int] = None) -> Recurso:
        return Recurso(self.tipo_recurso, pessoa_id)

    def _carregar(self, pessoa_id: int) -> PessoaEntity:
        """
        Busca pessoa do tipo do service.

        Raises:
            EntityNotFoundError: Se não existe ou é de outro tipo
        """
        pessoa = self.pessoa_repo.get_by_id(pessoa_id)
        if pessoa is None or pessoa.tipo is not self.tipo:
            raise EntityNotFoundError.para(self.tipo.value, pessoa_id)
        return pessoa

    def _validar_perfis_solicitados(self, principal: Principal, perfis: Set[Perfil]) -> None:
        """Hook para restrições de perfil na criação."""

    # -------------------------------------------------------------------------
    # Operações
    # -------------------------------------------------------------------------

    def obter(self, principal: Optional[Principal], pessoa_id: int) -> PessoaOutputDTO:
        """
        Obtém uma pessoa por id.

        Raises:
            AuthenticationError: Sem principal
            AuthorizationError: Sem permissão de leitura
            EntityNotFoundError: Se não existe
        """
        exigir_autorizacao(principal, Acao.LER, self._recurso(pessoa_id))
        pessoa = self._carregar(pessoa_id)
        logger.debug(f"{self.tipo.value} {pessoa_id} consultado por {principal.id}")
        return PessoaOutputDTO.from_entity(pessoa)

    def listar(self, principal: Optional[Principal]) -> List[PessoaOutputDTO]:
        """
        Lista pessoas visíveis para o principal.

        Cliente comum recebe apenas o próprio registro.
        """
        escopo = escopo_listagem(principal, self.tipo_recurso)

        if escopo.todos:
            pessoas = self.pessoa_repo.list_by_tipo(self.tipo)
        else:
            propria = self.pessoa_repo.get_by_id(escopo.cliente_id)
            pessoas = [propria] if propria and propria.tipo is self.tipo else []

        return [PessoaOutputDTO.from_entity(p) for p in pessoas]

    def criar(self, principal: Optional[Principal], input_dto: PessoaInputDTO) -> PessoaOutputDTO:
        """
        Cadastra nova pessoa.

        Raises:
            AuthorizationError: Sem permissão de criação
            ValidationError: Campos obrigatórios ausentes
            ConflictError: CPF ou e-mail já cadastrado
        """
        exigir_autorizacao(principal, Acao.CRIAR, self._recurso())

        perfis = converter_perfis(input_dto.perfis)
        self._validar_perfis_solicitados(principal, perfis)

        PessoaEntity.validar_dados(input_dto.nome, input_dto.cpf, input_dto.email)
        if not input_dto.senha:
            raise ValidationError("O campo SENHA é requerido", field="senha")

        with self.uow:
            validar_unicidade(
                self.pessoa_repo,
                input_dto.cpf.strip(),
                input_dto.email.strip(),
            )

            pessoa = PessoaEntity.criar(
                tipo=self.tipo,
                nome=input_dto.nome,
                cpf=input_dto.cpf,
                email=input_dto.email,
                senha_hash=self.hasher.hash(input_dto.senha),
                perfis=perfis,
            )
            self.pessoa_repo.save(pessoa)

        logger.info(f"{self.tipo.value} {pessoa.id} cadastrado por {principal.id}")
        return PessoaOutputDTO.from_entity(pessoa)

    def atualizar(
        self,
        principal: Optional[Principal],
        pessoa_id: int,
        input_dto: PessoaInputDTO,
    ) -> PessoaOutputDTO:
        """
        Substitui os dados de uma pessoa.

        Unicidade só é revalidada quando CPF ou e-mail mudam. Senha
        vazia mantém o hash atual. Perfis vazios mantêm os atuais.

        Raises:
            AuthorizationError: Sem permissão de atualização
            EntityNotFoundError: Se não existe
            ValidationError: Campos obrigatórios ausentes
            ConflictError: CPF ou e-mail de outra pessoa
        """
        exigir_autorizacao(principal, Acao.ATUALIZAR, self._recurso(pessoa_id))
        perfis = converter_perfis(input_dto.perfis)

        with self.uow:
            pessoa = self._carregar(pessoa_id)

            PessoaEntity.validar_dados(input_dto.nome, input_dto.cpf, input_dto.email)
            cpf = input_dto.cpf.strip()
            email = input_dto.email.strip()

            if precisa_revalidar(pessoa, cpf, email):
                validar_unicidade(self.pessoa_repo, cpf, email, excluir_id=pessoa.id)

            pessoa.atualizar_dados(input_dto.nome, cpf, email)
            if input_dto.senha:
                pessoa.alterar_senha(self.hasher.hash(input_dto.senha))
            if perfis:
                pessoa.definir_perfis(perfis)

            self.pessoa_repo.save(pessoa)

        logger.info(f"{self.tipo.value} {pessoa.id} atualizado por {principal.id}")
        return PessoaOutputDTO.from_entity(pessoa)

    def excluir(self, principal: Optional[Principal], pessoa_id: int) -> None:
        """
        Remove uma pessoa.

        Raises:
            AuthorizationError: Sem permissão de exclusão
            EntityNotFoundError: Se não existe
            ConflictError: Se possui chamados vinculados
        """
        exigir_autorizacao(principal, Acao.EXCLUIR, self._recurso(pessoa_id))

        with self.uow:
            pessoa = self._carregar(pessoa_id)

            if self.vinculos is not None and self.vinculos.exists_by_pessoa(pessoa.id):
                raise ConflictError(
                    f"{self.tipo.value} possui chamados e não pode ser excluído!",
                    field="chamados",
                )

            self.pessoa_repo.delete(pessoa.id)

        logger.info(f"{self.tipo.value} {pessoa_id} excluído por {principal.id}")


class ClienteService(_PessoaService):
    """
    CRUD de clientes.

    - Criar/atualizar/excluir: apenas ADMIN
    - Ler: ADMIN, TECNICO ou o próprio cliente
    - Listar: cliente comum vê apenas a si mesmo

    Example:
        service = ClienteService(pessoa_repo, uow, hasher)
        cliente = service.criar(admin, PessoaInputDTO(
            nome="Linus Torvalds", cpf="70511744013",
            email="linus@mail.com", senha="123",
        ))
    """

    tipo = TipoPessoa.CLIENTE
    tipo_recurso = TipoRecurso.CLIENTE


class TecnicoService(_PessoaService):
    """
    CRUD de técnicos.

    Todo técnico recebe o perfil TECNICO. O perfil ADMIN só pode ser
    concedido por outro administrador.
    """

    tipo = TipoPessoa.TECNICO
    tipo_recurso = TipoRecurso.TECNICO

    def _validar_perfis_solicitados(self, principal: Principal, perfis: Set[Perfil]) -> None:
        if Perfil.ADMIN in perfis and not principal.is_admin:
            raise AuthorizationError(
                "Acesso negado! Apenas administradores podem conceder o perfil ADMIN."
            )
