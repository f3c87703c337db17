"""
Services das entidades simples (sem referências a outras tabelas).
"""

from app.core.filters import FieldType
from app.models.editorial import Editorial
from app.models.equipment import Equipment
from app.models.gender import Gender
from app.models.plan import Plan
from app.models.room import RoomLocation
from app.models.statuses import BookStatus, LoanStatus, PlanStatus, RoomStatus
from app.repositories.lookup import (
    BookStatusRepository,
    EditorialRepository,
    EquipmentRepository,
    GenderRepository,
    LoanStatusRepository,
    PlanRepository,
    PlanStatusRepository,
    RoomLocationRepository,
    RoomStatusRepository,
)
from app.services.base import CrudService


class GenderService(CrudService[Gender]):
    entity_name = "gender"
    repository_class = GenderRepository
    field_types = {"name": FieldType.STRING}
    unique_fields = ("name",)


class EditorialService(CrudService[Editorial]):
    """Editoras; duplicidade avaliada pelo par nome + email."""

    entity_name = "editorial"
    repository_class = EditorialRepository
    field_types = {
        "name": FieldType.STRING,
        "address": FieldType.STRING,
        "email": FieldType.STRING,
    }
    unique_fields = ("name", "email")


class PlanService(CrudService[Plan]):
    entity_name = "plan"
    repository_class = PlanRepository
    field_types = {
        "name": FieldType.STRING,
        "fixed_price": FieldType.STRING,
        "monthly_price": FieldType.STRING,
        "max_simultaneous_loans": FieldType.NUMBER,
        "max_return_days": FieldType.NUMBER,
        "max_renewals_per_loan": FieldType.NUMBER,
    }
    unique_fields = ("name",)


class PlanStatusService(CrudService[PlanStatus]):
    entity_name = "plan_status"
    repository_class = PlanStatusRepository
    field_types = {"plan_status": FieldType.STRING}
    unique_fields = ("plan_status",)


class LoanStatusService(CrudService[LoanStatus]):
    entity_name = "loan_status"
    repository_class = LoanStatusRepository
    field_types = {"loan_status": FieldType.STRING}
    unique_fields = ("loan_status",)


class BookStatusService(CrudService[BookStatus]):
    entity_name = "book_status"
    repository_class = BookStatusRepository
    field_types = {"book_status": FieldType.STRING}
    unique_fields = ("book_status",)


class RoomStatusService(CrudService[RoomStatus]):
    entity_name = "room_status"
    repository_class = RoomStatusRepository
    field_types = {"room_status": FieldType.STRING}
    unique_fields = ("room_status",)


class RoomLocationService(CrudService[RoomLocation]):
    entity_name = "room_location"
    repository_class = RoomLocationRepository
    field_types = {"location": FieldType.STRING}
    unique_fields = ("location",)


class EquipmentService(CrudService[Equipment]):
    """Equipamentos; o número de inventário identifica cada item."""

    entity_name = "equipment"
    repository_class = EquipmentRepository
    field_types = {
        "name": FieldType.STRING,
        "inventory": FieldType.STRING,
        "brand": FieldType.STRING,
    }
    unique_fields = ("inventory",)
