"""
Service para lógica de negócio de empréstimos (Loan).

Fluxo:
    create      -> PENDING, livro AVAILABLE passa a LENT
    approve     -> PENDING vira ACTIVE
    renew       -> RENEWED, return_date estendida por max_return_days
    return_book -> FINISHED, returned_date = now, livro volta a AVAILABLE

Regras de negócio (plano da assinatura ACTIVE vigente do usuário):
    - Usuário sem assinatura ACTIVE vigente não pode pegar livros
    - No máximo max_simultaneous_loans empréstimos não devolvidos
    - return_date no máximo max_return_days dias após o empréstimo
    - No máximo max_renewals_per_loan renovações por empréstimo
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import (
    DateInPast,
    LoanAlreadyApproved,
    LoanAlreadyFinished,
    LoanCannotBeApproved,
    LoanExceededMaxRenewals,
    LoanExceededMaxSimultaneous,
    LoanReturnDateExceedsMaxAllowedDays,
    ObjectMissingParameters,
    ObjectNotAvailable,
    ObjectNotFound,
    UserWithoutActivePlan,
)
from app.core.filters import FieldType
from app.core.logging import get_logger
from app.models.loan import Loan
from app.models.plan import Plan
from app.models.statuses import (
    BOOK_STATUS_AVAILABLE,
    BOOK_STATUS_LENT,
    LOAN_STATUS_ACTIVE,
    LOAN_STATUS_FINISHED,
    LOAN_STATUS_PENDING,
    LOAN_STATUS_RENEWED,
    PLAN_STATUS_ACTIVE,
    BookStatus,
    LoanStatus,
)
from app.repositories.active_plan import ActivePlanRepository
from app.repositories.book import BookRepository
from app.repositories.loan import LoanRepository
from app.repositories.lookup import (
    BookStatusRepository,
    LoanStatusRepository,
    PlanStatusRepository,
)
from app.repositories.user import UserRepository
from app.schemas.loan import LoanCreate, LoanUpdate
from app.services.base import CrudService

logger = get_logger(__name__)

APPROVED_STATUSES = (LOAN_STATUS_ACTIVE, LOAN_STATUS_RENEWED)


class LoanService(CrudService[Loan]):
    """Service para operações de Loan."""

    entity_name = "loan"
    repository_class = LoanRepository
    field_types = {
        "user": FieldType.IDENTIFIER,
        "book": FieldType.IDENTIFIER,
        "loan_status": FieldType.IDENTIFIER,
        "return_date": FieldType.DATE,
        "returned_date": FieldType.DATE,
        "renewals": FieldType.NUMBER,
    }
    references = {
        "user_id": ("user", UserRepository),
        "book_id": ("book", BookRepository),
        "loan_status_id": ("loan_status", LoanStatusRepository),
    }

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.user_repo = UserRepository(db)
        self.book_repo = BookRepository(db)
        self.active_plan_repo = ActivePlanRepository(db)
        self.plan_status_repo = PlanStatusRepository(db)
        self.loan_status_repo = LoanStatusRepository(db)
        self.book_status_repo = BookStatusRepository(db)

    # ------------------------------------------------------------------
    # Consultas auxiliares
    # ------------------------------------------------------------------

    async def _loan_status(self, label: str) -> LoanStatus:
        loan_status = await self.loan_status_repo.find_by_label(label)
        if loan_status is None:
            raise ObjectNotFound("loan_status")
        return loan_status

    async def _book_status(self, label: str) -> BookStatus:
        book_status = await self.book_status_repo.find_by_label(label)
        if book_status is None:
            raise ObjectNotFound("book_status")
        return book_status

    async def _current_plan(self, user_id: UUID) -> Plan:
        """
        Plano da assinatura ACTIVE vigente do usuário.

        Raises:
            ObjectNotFound: status ACTIVE de plano não cadastrado
            UserWithoutActivePlan: usuário sem assinatura vigente
        """
        active = await self.plan_status_repo.find_by_label(PLAN_STATUS_ACTIVE)
        if active is None:
            raise ObjectNotFound("plan_status")
        active_plan = await self.active_plan_repo.find_current(
            user_id, active.id, datetime.now(timezone.utc)
        )
        if active_plan is None:
            raise UserWithoutActivePlan()
        return active_plan.plan

    @staticmethod
    def _check_return_date(return_date: datetime, deadline: datetime, days: int) -> None:
        """
        Raises:
            DateInPast: data de devolução no passado
            LoanReturnDateExceedsMaxAllowedDays: data além do prazo do plano
        """
        if return_date < datetime.now(timezone.utc):
            raise DateInPast()
        if return_date > deadline:
            raise LoanReturnDateExceedsMaxAllowedDays(days)

    # ------------------------------------------------------------------
    # Operações
    # ------------------------------------------------------------------

    async def create(self, data: LoanCreate) -> Loan:
        """
        Empresta um livro AVAILABLE ao usuário e o marca como LENT.

        As linhas do usuário e do livro ficam bloqueadas (FOR UPDATE) até o
        commit, serializando empréstimos concorrentes do mesmo livro e a
        contagem de empréstimos do usuário.

        Raises:
            ObjectNotFound: usuário, livro ou status inexistente
            ObjectNotAvailable: livro não está AVAILABLE
            UserWithoutActivePlan: usuário sem assinatura vigente
            LoanExceededMaxSimultaneous: limite de empréstimos do plano atingido
            DateInPast: return_date no passado
            LoanReturnDateExceedsMaxAllowedDays: return_date além do prazo do plano
        """
        values = data.model_dump()
        await self._check_references(values)

        await self.user_repo.lock_by_id(values["user_id"])
        book = await self.book_repo.lock_by_id(values["book_id"])
        if book is None:
            raise ObjectNotFound("book")
        available = await self._book_status(BOOK_STATUS_AVAILABLE)
        if book.book_status_id != available.id:
            raise ObjectNotAvailable("book")

        plan = await self._current_plan(values["user_id"])
        open_loans = await self.repo.count_open_by_user(values["user_id"])
        if open_loans >= plan.max_simultaneous_loans:
            raise LoanExceededMaxSimultaneous(plan.max_simultaneous_loans)

        deadline = datetime.now(timezone.utc) + timedelta(days=plan.max_return_days)
        if values.get("return_date") is None:
            values["return_date"] = deadline
        else:
            self._check_return_date(values["return_date"], deadline, plan.max_return_days)
        if values.get("loan_status_id") is None:
            values["loan_status_id"] = (await self._loan_status(LOAN_STATUS_PENDING)).id

        # Gravado no mesmo commit do empréstimo
        book.book_status_id = (await self._book_status(BOOK_STATUS_LENT)).id
        loan = await self.repo.create(**values, renewals=0)
        logger.info(
            f"Empréstimo criado: {loan.id} livro={loan.book_id} "
            f"usuário={loan.user_id} até {loan.return_date}"
        )
        return loan

    async def update(self, id: UUID | None, data: LoanUpdate) -> Loan:
        """
        Altera o prazo de um empréstimo em aberto.

        O prazo não passa de created_at + max_return_days * (renewals + 1).

        Raises:
            ObjectMissingParameters: id ou campos não informados
            ObjectNotFound: empréstimo inexistente
            LoanAlreadyFinished: empréstimo já devolvido
            UserWithoutActivePlan: usuário sem assinatura vigente
            DateInPast: return_date no passado
            LoanReturnDateExceedsMaxAllowedDays: return_date além do prazo
        """
        if id is None:
            raise ObjectMissingParameters(self.entity_name)
        changes = self._changes(data)
        if not changes:
            raise ObjectMissingParameters(self.entity_name)
        loan = await self.get_by_id(id)
        if loan.is_finished:
            raise LoanAlreadyFinished()

        plan = await self._current_plan(loan.user_id)
        days = plan.max_return_days * (loan.renewals + 1)
        self._check_return_date(
            changes["return_date"], loan.created_at + timedelta(days=days), days
        )

        updated = await self.repo.update(loan, **changes)
        logger.info(f"Empréstimo atualizado: {id} até {updated.return_date}")
        return updated

    async def approve(self, id: UUID | None) -> Loan:
        """
        Aprova empréstimo PENDING (status ACTIVE).

        Raises:
            LoanAlreadyFinished: empréstimo já devolvido
            LoanAlreadyApproved: empréstimo ACTIVE ou RENEWED
            LoanCannotBeApproved: status diferente de PENDING
        """
        loan = await self.get_by_id(id)
        if loan.is_finished:
            raise LoanAlreadyFinished()
        if loan.status_label in APPROVED_STATUSES:
            raise LoanAlreadyApproved()
        if loan.status_label != LOAN_STATUS_PENDING:
            raise LoanCannotBeApproved()

        active = await self._loan_status(LOAN_STATUS_ACTIVE)
        approved = await self.repo.update(loan, loan_status_id=active.id)
        logger.info(f"Empréstimo aprovado: {id}")
        return approved

    async def renew(self, id: UUID | None) -> Loan:
        """
        Renova empréstimo estendendo return_date em max_return_days.

        Raises:
            LoanAlreadyFinished: empréstimo já devolvido
            UserWithoutActivePlan: usuário sem assinatura vigente
            LoanExceededMaxRenewals: renovações do plano esgotadas
        """
        loan = await self.get_by_id(id)
        if loan.is_finished:
            raise LoanAlreadyFinished()

        plan = await self._current_plan(loan.user_id)
        if loan.renewals >= plan.max_renewals_per_loan:
            raise LoanExceededMaxRenewals(plan.max_renewals_per_loan)

        renewed_status = await self._loan_status(LOAN_STATUS_RENEWED)
        renewed = await self.repo.update(
            loan,
            renewals=loan.renewals + 1,
            return_date=loan.return_date + timedelta(days=plan.max_return_days),
            loan_status_id=renewed_status.id,
        )
        logger.info(
            f"Empréstimo renovado: {id} ({renewed.renewals}/{plan.max_renewals_per_loan}) "
            f"até {renewed.return_date}"
        )
        return renewed

    async def return_book(self, id: UUID | None) -> Loan:
        """
        Registra a devolução (FINISHED) e libera o livro (AVAILABLE).

        Raises:
            LoanAlreadyFinished: empréstimo já devolvido
        """
        loan = await self.get_by_id(id)
        if loan.is_finished:
            raise LoanAlreadyFinished()

        finished = await self._loan_status(LOAN_STATUS_FINISHED)
        await self._release_book(loan.book_id)
        returned = await self.repo.update(
            loan,
            returned_date=datetime.now(timezone.utc),
            loan_status_id=finished.id,
        )
        logger.info(f"Livro devolvido: empréstimo {id} livro={loan.book_id}")
        return returned

    async def delete(self, id: UUID | None) -> None:
        """
        Remove empréstimo; se ainda aberto, o livro volta a AVAILABLE.

        Raises:
            ObjectMissingParameters: id não informado
            ObjectNotFound: empréstimo inexistente
        """
        loan = await self.get_by_id(id)
        if not loan.is_finished:
            await self._release_book(loan.book_id)
        await self.repo.delete(loan)
        logger.info(f"Empréstimo removido: {id}")

    async def _release_book(self, book_id: UUID) -> None:
        """Marca o livro como AVAILABLE; gravado no próximo commit."""
        book = await self.book_repo.lock_by_id(book_id)
        if book is not None:
            book.book_status_id = (await self._book_status(BOOK_STATUS_AVAILABLE)).id
