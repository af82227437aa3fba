"""
Exceções de Domínio do Helpdesk.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (campo obrigatório ausente ou malformado)
    ├── EntityNotFoundError (entidade não existe)
    ├── ConflictError (CPF ou e-mail já cadastrado)
    ├── AuthorizationError (autenticado, mas sem permissão)
    └── AuthenticationError (nenhum usuário autenticado)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.criar(principal, dto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para processamento.

    Example:
        if not titulo:
            raise ValidationError("Título é obrigatório", field="titulo")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.

    Example:
        chamado = repo.get_by_id(chamado_id)
        if not chamado:
            raise EntityNotFoundError.para("Chamado", chamado_id)
    """

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    @classmethod
    def para(cls, entity_type: str, entity_id) -> "EntityNotFoundError":
        """Cria o erro com a mensagem padrão '<Tipo> não encontrado! ID: <id>'."""
        return cls(
            f"{entity_type} não encontrado! ID: {entity_id}",
            entity_type=entity_type,
            entity_id=entity_id,
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result


class ConflictError(DomainException):
    """
    Violação de unicidade (CPF ou e-mail já cadastrado).

    Clientes e técnicos compartilham o mesmo espaço de unicidade,
    então o conflito pode ocorrer entre pessoas de tipos diferentes.

    Example:
        raise ConflictError("CPF já cadastrado no sistema!", field="cpf")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message, "CONFLICT")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class AuthorizationError(DomainException):
    """
    Usuário autenticado, mas sem permissão para a operação.

    Example:
        raise AuthorizationError("Acesso negado! Apenas administradores podem excluir chamados.")
    """

    def __init__(self, message: str):
        super().__init__(message, "FORBIDDEN")


class AuthenticationError(DomainException):
    """Nenhum usuário autenticado (ou credenciais inválidas)."""

    def __init__(self, message: str = "Usuário não autenticado."):
        super().__init__(message, "UNAUTHENTICATED")
