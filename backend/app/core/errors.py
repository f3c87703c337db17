"""
Erros de domínio e seu mapeamento para respostas HTTP.

Os services levantam estas exceções; o handler registrado em
`register_error_handlers` converte cada uma no status code correspondente:

    - 404: ObjectNotFound
    - 409: ObjectAlreadyExists, ObjectNotAvailable e transições inválidas
      de ActivePlan e Loan
    - 400: parâmetros ausentes, filtros inválidos e regras de reserva e
      de empréstimo
    - 500: qualquer exceção não tratada
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def to_camel_case(name: str) -> str:
    """Converte `room_location` em `RoomLocation`."""
    return "".join(part[:1].upper() + part[1:].lower() for part in name.split("_"))


class AppError(Exception):
    """Base de todos os erros de negócio."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def name(self) -> str:
        return type(self).__name__


class ObjectError(AppError):
    """Erro parametrizado pela entidade afetada."""

    template: str = "{entity}"

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(self.template.format(entity=to_camel_case(entity)))

    @property
    def name(self) -> str:
        return f"{to_camel_case(self.entity)}{type(self).__name__.removeprefix('Object')}"


class ObjectNotFound(ObjectError):
    status_code = status.HTTP_404_NOT_FOUND
    template = "{entity} not found"


class ObjectAlreadyExists(ObjectError):
    status_code = status.HTTP_409_CONFLICT
    template = "{entity} already exists"


class ObjectMissingParameters(ObjectError):
    status_code = status.HTTP_400_BAD_REQUEST
    template = "{entity} is missing parameters"


class ObjectInvalidQueryFilters(ObjectError):
    status_code = status.HTTP_400_BAD_REQUEST
    template = "{entity}'s query is missing or contains invalid data"


class ObjectNotAvailable(ObjectError):
    status_code = status.HTTP_409_CONFLICT
    template = "{entity} is not available"


class DateInPast(AppError):
    def __init__(self):
        super().__init__("The date cannot be in the past")


class FinishDateBeforeStartDate(AppError):
    def __init__(self):
        super().__init__("Finish date cannot be before start date")


class ReservationLongerThanAuthorized(AppError):
    def __init__(self):
        hours = get_settings().RESERVATION_MAX_TIME_HOURS
        super().__init__(f"The reservation cannot last more than {hours} hours")


class ReservationOutsideWorkingHours(AppError):
    def __init__(self):
        super().__init__("The reservation must be within working hours")


class RoomPeopleUnauthorized(AppError):
    def __init__(self):
        super().__init__("The people are less than min required or more than max allowed")


class ActivePlanAlreadyFinished(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self):
        super().__init__("This plan has already been finished")


class ActivePlanAlreadyCancelled(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self):
        super().__init__("This plan has already been cancelled")


class ActivePlanStatusChangeNotAllowed(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self):
        super().__init__("The plan can only be finished or cancelled through its own operation")


class UserWithoutActivePlan(AppError):
    def __init__(self):
        super().__init__("The user does not have an active plan")


class LoanExceededMaxSimultaneous(AppError):
    def __init__(self, limit: int):
        super().__init__(f"The user has reached the {limit} simultaneous loans of the plan")


class LoanReturnDateExceedsMaxAllowedDays(AppError):
    def __init__(self, days: int):
        super().__init__(f"The return date must be within {days} days")


class LoanExceededMaxRenewals(AppError):
    def __init__(self, renewals: int):
        super().__init__(f"The loan has exceeded the {renewals} authorized renewals")


class LoanAlreadyFinished(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self):
        super().__init__("This book has already been returned and the loan has been finished")


class LoanAlreadyApproved(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self):
        super().__init__("This book has already been approved")


class LoanCannotBeApproved(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self):
        super().__init__("Only pending loans can be approved")


def register_error_handlers(app: FastAPI) -> None:
    """Registra os handlers que traduzem erros de domínio em JSON."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        logger.warning(f"{request.method} {request.url.path} rejeitado: {exc.name}")
        return JSONResponse(
            {"message": exc.message, "error": exc.name},
            status_code=exc.status_code,
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Erro não tratado em {request.method} {request.url.path}")
        content = {"message": "Internal server error"}
        if get_settings().DEBUG:
            content["error"] = str(exc)
        return JSONResponse(content, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
