"""
Endpoints de Empréstimos (Loan).

Contratos:
    - POST /loans: Empresta um livro (PENDING por padrão)
    - GET /loans: Lista empréstimos paginado ou filtra por campo
    - GET /loans/{id}: Detalhes do empréstimo
    - PUT /loans/{id}: Altera o prazo de devolução
    - DELETE /loans/{id}: Remove empréstimo
    - PATCH /loans/{id}/approve: Aprova empréstimo PENDING
    - PATCH /loans/{id}/renew: Renova o prazo
    - PATCH /loans/{id}/return: Registra a devolução

Rate Limiting aplicado:
    - POST /loans: 30 req/min por IP (rate_limit_strict)

Status codes:
    - 200: Sucesso
    - 201: Criado com sucesso
    - 400: Limites do plano, prazo inválido ou usuário sem assinatura
    - 404: Empréstimo, usuário, livro ou status não encontrado
    - 409: Livro indisponível ou transição de status inválida
    - 429: Rate limit excedido
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.api.v1.crud import list_or_filter, paginated
from app.core.deps import DbSession, Listing
from app.core.rate_limit import rate_limit_strict
from app.schemas.base import MessageResponse, PaginatedResponse
from app.schemas.loan import LoanCreate, LoanRead, LoanUpdate
from app.services.loan import LoanService

router = APIRouter(prefix="/loans", tags=["Loans"])


@router.post(
    "",
    response_model=LoanRead,
    status_code=status.HTTP_201_CREATED,
    summary="Criar empréstimo",
    description="Empresta um livro AVAILABLE respeitando os limites do plano do usuário.",
)
async def create_loan(
    data: LoanCreate,
    db: DbSession,
    _: None = Depends(rate_limit_strict),
) -> LoanRead:
    service = LoanService(db)
    loan = await service.create(data)
    return LoanRead.model_validate(loan)


@router.get(
    "",
    response_model=PaginatedResponse[LoanRead],
    summary="Listar empréstimos",
    description="Filtros aceitos: user, book, loan_status, return_date, returned_date, renewals.",
)
async def list_loans(db: DbSession, params: Listing) -> PaginatedResponse[LoanRead]:
    service = LoanService(db)
    result = await list_or_filter(service, params)
    return paginated(result, LoanRead)


@router.get("/{loan_id}", response_model=LoanRead, summary="Buscar empréstimo")
async def get_loan(loan_id: UUID, db: DbSession) -> LoanRead:
    service = LoanService(db)
    loan = await service.get_by_id(loan_id)
    return LoanRead.model_validate(loan)


@router.put("/{loan_id}", response_model=LoanRead, summary="Alterar prazo do empréstimo")
async def update_loan(loan_id: UUID, data: LoanUpdate, db: DbSession) -> LoanRead:
    service = LoanService(db)
    loan = await service.update(loan_id, data)
    return LoanRead.model_validate(loan)


@router.delete("/{loan_id}", response_model=MessageResponse, summary="Remover empréstimo")
async def delete_loan(loan_id: UUID, db: DbSession) -> MessageResponse:
    service = LoanService(db)
    await service.delete(loan_id)
    return MessageResponse(message="Empréstimo removido com sucesso")


@router.patch("/{loan_id}/approve", response_model=LoanRead, summary="Aprovar empréstimo")
async def approve_loan(loan_id: UUID, db: DbSession) -> LoanRead:
    """
    Raises:
        409: Empréstimo já aprovado, não pendente ou já devolvido
    """
    service = LoanService(db)
    loan = await service.approve(loan_id)
    return LoanRead.model_validate(loan)


@router.patch("/{loan_id}/renew", response_model=LoanRead, summary="Renovar empréstimo")
async def renew_loan(loan_id: UUID, db: DbSession) -> LoanRead:
    """
    Raises:
        400: Renovações do plano esgotadas
        409: Empréstimo já devolvido
    """
    service = LoanService(db)
    loan = await service.renew(loan_id)
    return LoanRead.model_validate(loan)


@router.patch("/{loan_id}/return", response_model=LoanRead, summary="Devolver livro")
async def return_loan(loan_id: UUID, db: DbSession) -> LoanRead:
    """
    Raises:
        409: Empréstimo já devolvido
    """
    service = LoanService(db)
    loan = await service.return_book(loan_id)
    return LoanRead.model_validate(loan)
