"""
Testes unitários para ActivePlanService (assinaturas).
"""

import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from app.core.errors import (
    ActivePlanAlreadyCancelled,
    ActivePlanAlreadyFinished,
    ActivePlanStatusChangeNotAllowed,
    ObjectAlreadyExists,
    ObjectNotFound,
)
from app.models.active_plan import ActivePlan
from app.schemas.active_plan import ActivePlanCreate, ActivePlanUpdate
from app.services.active_plan import ActivePlanService

SUBSCRIPTION = timedelta(days=30)


class InMemoryActivePlanRepository:
    """Repository de assinaturas em memória com a mesma regra de vigência."""

    def __init__(self, statuses):
        self.items: dict[uuid.UUID, ActivePlan] = {}
        self.statuses_by_id = {status.id: status for status in statuses.values()}

    async def find_overlapping(self, user_id, active_status_id, start, end, exclude_id=None):
        for active_plan in self.items.values():
            if active_plan.id == exclude_id:
                continue
            if active_plan.user_id != user_id or active_plan.plan_status_id != active_status_id:
                continue
            ending = active_plan.created_at < end and (
                active_plan.ending_date is not None and active_plan.ending_date > start
            )
            finished = active_plan.created_at < end and (
                active_plan.finished_date is not None and active_plan.finished_date > start
            )
            if ending or finished:
                return active_plan
        return None

    async def create(self, **values):
        now = datetime.now(timezone.utc)
        active_plan = ActivePlan(id=uuid.uuid4(), created_at=now, updated_at=now, **values)
        active_plan.plan_status = self.statuses_by_id[active_plan.plan_status_id]
        self.items[active_plan.id] = active_plan
        return active_plan

    async def find_by_id(self, id):
        return self.items.get(id)

    async def update(self, instance, **values):
        for key, value in values.items():
            setattr(instance, key, value)
        instance.plan_status = self.statuses_by_id[instance.plan_status_id]
        return instance


@pytest.fixture
def service(mock_db):
    return ActivePlanService(mock_db)


@pytest.fixture
def find_by_label(plan_statuses):
    async def _find(label):
        return plan_statuses.get(label.upper())
    return _find


@pytest.fixture
def memory_service(service, plan_statuses, sample_user, sample_plan, find_by_label):
    """Service com repository em memória e referências existentes."""
    service.repo = InMemoryActivePlanRepository(plan_statuses)
    user_repo = service.reference_repos["user_id"][1]
    plan_repo = service.reference_repos["plan_id"][1]
    patches = [
        patch.object(user_repo, "find_by_id", return_value=sample_user),
        patch.object(plan_repo, "find_by_id", return_value=sample_plan),
        patch.object(service.user_repo, "lock_by_id", return_value=sample_user),
        patch.object(service.status_repo, "find_by_label", side_effect=find_by_label),
    ]
    for p in patches:
        p.start()
    yield service
    for p in patches:
        p.stop()


class TestActivePlanCreate:

    @pytest.mark.anyio
    async def test_defaults_to_active_and_subscription_period(
        self, memory_service, sample_user, sample_plan, plan_statuses
    ):
        before = datetime.now(timezone.utc)
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )
        after = datetime.now(timezone.utc)

        assert active_plan.plan_status_id == plan_statuses["ACTIVE"].id
        assert before + SUBSCRIPTION <= active_plan.ending_date <= after + SUBSCRIPTION
        assert active_plan.finished_date is None

    @pytest.mark.anyio
    async def test_second_overlapping_active_plan_fails(self, memory_service, sample_user, sample_plan):
        await memory_service.create(ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id))

        with pytest.raises(ObjectAlreadyExists) as exc_info:
            await memory_service.create(ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id))

        assert exc_info.value.name == "ActivePlanAlreadyExists"

    @pytest.mark.anyio
    async def test_overlap_through_finished_date(
        self, memory_service, sample_user, sample_plan, plan_statuses, make_active_plan
    ):
        """Assinatura ACTIVE sem ending_date ainda conflita via finished_date."""
        existing = make_active_plan(
            sample_user,
            sample_plan,
            plan_statuses["ACTIVE"],
            ending_date=None,
            finished_date=datetime.now(timezone.utc) + timedelta(days=3),
        )
        memory_service.repo.items[existing.id] = existing

        with pytest.raises(ObjectAlreadyExists):
            await memory_service.create(ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id))

    @pytest.mark.anyio
    async def test_cancelled_plan_does_not_block_new_subscription(
        self, memory_service, sample_user, sample_plan, plan_statuses, make_active_plan
    ):
        existing = make_active_plan(
            sample_user,
            sample_plan,
            plan_statuses["CANCELED"],
            ending_date=datetime.now(timezone.utc) + timedelta(days=10),
        )
        memory_service.repo.items[existing.id] = existing

        await memory_service.create(ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id))

        assert len(memory_service.repo.items) == 2

    @pytest.mark.anyio
    async def test_other_user_does_not_conflict(self, memory_service, sample_user, sample_plan):
        await memory_service.create(ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id))
        await memory_service.create(ActivePlanCreate(user_id=uuid.uuid4(), plan_id=sample_plan.id))

        assert len(memory_service.repo.items) == 2

    @pytest.mark.anyio
    async def test_locks_user_before_overlap_check(self, memory_service, sample_user, sample_plan):
        await memory_service.create(ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id))

        memory_service.user_repo.lock_by_id.assert_awaited_once_with(sample_user.id)

    @pytest.mark.anyio
    async def test_missing_active_status(self, service, sample_user, sample_plan):
        user_repo = service.reference_repos["user_id"][1]
        plan_repo = service.reference_repos["plan_id"][1]

        with patch.object(user_repo, "find_by_id", return_value=sample_user), \
             patch.object(plan_repo, "find_by_id", return_value=sample_plan), \
             patch.object(service.status_repo, "find_by_label", return_value=None):
            with pytest.raises(ObjectNotFound) as exc_info:
                await service.create(ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id))

        assert exc_info.value.name == "PlanStatusNotFound"

    @pytest.mark.anyio
    async def test_missing_plan(self, service, sample_user):
        user_repo = service.reference_repos["user_id"][1]
        plan_repo = service.reference_repos["plan_id"][1]

        with patch.object(user_repo, "find_by_id", return_value=sample_user), \
             patch.object(plan_repo, "find_by_id", return_value=None):
            with pytest.raises(ObjectNotFound) as exc_info:
                await service.create(ActivePlanCreate(user_id=sample_user.id, plan_id=uuid.uuid4()))

        assert exc_info.value.message == "Plan not found"


class TestActivePlanRenew:

    @pytest.mark.anyio
    async def test_renew_extends_by_exact_subscription_period(
        self, service, sample_user, sample_plan, plan_statuses, make_active_plan
    ):
        ending = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
        active_plan = make_active_plan(sample_user, sample_plan, plan_statuses["ACTIVE"], ending_date=ending)

        with patch.object(service.repo, "find_by_id", return_value=active_plan), \
             patch.object(service.repo, "update", return_value=active_plan) as mock_update:
            await service.renew(active_plan.id)

        mock_update.assert_awaited_once_with(active_plan, ending_date=ending + SUBSCRIPTION)

    @pytest.mark.anyio
    async def test_renew_without_ending_date_starts_from_now(
        self, service, sample_user, sample_plan, plan_statuses, make_active_plan
    ):
        active_plan = make_active_plan(sample_user, sample_plan, plan_statuses["ACTIVE"])
        before = datetime.now(timezone.utc)

        with patch.object(service.repo, "find_by_id", return_value=active_plan), \
             patch.object(service.repo, "update", return_value=active_plan) as mock_update:
            await service.renew(active_plan.id)

        new_ending = mock_update.await_args.kwargs["ending_date"]
        assert before + SUBSCRIPTION <= new_ending <= datetime.now(timezone.utc) + SUBSCRIPTION

    @pytest.mark.anyio
    @pytest.mark.parametrize("label", ["FINISHED", "CANCELED"])
    async def test_renew_terminal_plan_fails(
        self, service, sample_user, sample_plan, plan_statuses, make_active_plan, label
    ):
        active_plan = make_active_plan(
            sample_user, sample_plan, plan_statuses[label],
            ending_date=datetime.now(timezone.utc) + SUBSCRIPTION,
        )

        with patch.object(service.repo, "find_by_id", return_value=active_plan), \
             patch.object(service.repo, "update") as mock_update:
            with pytest.raises(ActivePlanAlreadyFinished):
                await service.renew(active_plan.id)

        mock_update.assert_not_called()

    @pytest.mark.anyio
    async def test_renew_with_finished_date_fails(
        self, service, sample_user, sample_plan, plan_statuses, make_active_plan
    ):
        active_plan = make_active_plan(
            sample_user, sample_plan, plan_statuses["ACTIVE"],
            ending_date=datetime.now(timezone.utc) + SUBSCRIPTION,
            finished_date=datetime.now(timezone.utc),
        )

        with patch.object(service.repo, "find_by_id", return_value=active_plan):
            with pytest.raises(ActivePlanAlreadyFinished):
                await service.renew(active_plan.id)

    @pytest.mark.anyio
    async def test_renew_not_found(self, service):
        with patch.object(service.repo, "find_by_id", return_value=None):
            with pytest.raises(ObjectNotFound):
                await service.renew(uuid.uuid4())


class TestActivePlanFinishCancel:

    @pytest.mark.anyio
    async def test_finish_sets_status_and_date(self, memory_service, sample_user, sample_plan, plan_statuses):
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )

        finished = await memory_service.finish(active_plan.id)

        assert finished.plan_status_id == plan_statuses["FINISHED"].id
        assert finished.finished_date is not None
        assert finished.is_finished

    @pytest.mark.anyio
    async def test_finish_then_cancel_fails(self, memory_service, sample_user, sample_plan):
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )
        await memory_service.finish(active_plan.id)

        with pytest.raises(ActivePlanAlreadyFinished):
            await memory_service.cancel(active_plan.id)

    @pytest.mark.anyio
    async def test_cancel_then_finish_fails(self, memory_service, sample_user, sample_plan):
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )
        cancelled = await memory_service.cancel(active_plan.id)

        assert cancelled.is_cancelled
        with pytest.raises(ActivePlanAlreadyCancelled):
            await memory_service.finish(active_plan.id)

    @pytest.mark.anyio
    async def test_cancel_twice_fails(self, memory_service, sample_user, sample_plan):
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )
        await memory_service.cancel(active_plan.id)

        with pytest.raises(ActivePlanAlreadyCancelled):
            await memory_service.cancel(active_plan.id)

    @pytest.mark.anyio
    async def test_finish_twice_fails(self, memory_service, sample_user, sample_plan):
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )
        await memory_service.finish(active_plan.id)

        with pytest.raises(ActivePlanAlreadyFinished):
            await memory_service.finish(active_plan.id)

    @pytest.mark.anyio
    async def test_finished_plan_frees_the_period(self, memory_service, sample_user, sample_plan):
        """Após finalizar, o usuário pode assinar de novo."""
        first = await memory_service.create(ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id))
        await memory_service.finish(first.id)

        await memory_service.create(ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id))

        assert len(memory_service.repo.items) == 2


class TestActivePlanUpdate:

    @pytest.fixture
    def status_repo(self, memory_service):
        return memory_service.reference_repos["plan_status_id"][1]

    @pytest.mark.anyio
    async def test_update_active_plan_excludes_itself(
        self, memory_service, sample_user, sample_plan
    ):
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )
        new_ending = active_plan.ending_date + timedelta(days=5)

        updated = await memory_service.update(active_plan.id, ActivePlanUpdate(ending_date=new_ending))

        assert updated.ending_date == new_ending

    @pytest.mark.anyio
    async def test_cancelled_plan_cannot_be_reactivated(
        self, memory_service, status_repo, sample_user, sample_plan, plan_statuses
    ):
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )
        await memory_service.cancel(active_plan.id)

        with patch.object(status_repo, "find_by_id", return_value=plan_statuses["ACTIVE"]):
            with pytest.raises(ActivePlanAlreadyCancelled):
                await memory_service.update(
                    active_plan.id,
                    ActivePlanUpdate(plan_status_id=plan_statuses["ACTIVE"].id),
                )

        assert memory_service.repo.items[active_plan.id].is_cancelled

    @pytest.mark.anyio
    async def test_cancelled_plan_overlapping_active_one_is_still_terminal(
        self, memory_service, status_repo, sample_user, sample_plan, plan_statuses, make_active_plan
    ):
        """O estado final é verificado antes da sobreposição."""
        current = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )
        cancelled = make_active_plan(
            sample_user, sample_plan, plan_statuses["CANCELED"],
            ending_date=current.ending_date,
        )
        memory_service.repo.items[cancelled.id] = cancelled

        with patch.object(status_repo, "find_by_id", return_value=plan_statuses["ACTIVE"]):
            with pytest.raises(ActivePlanAlreadyCancelled):
                await memory_service.update(
                    cancelled.id,
                    ActivePlanUpdate(plan_status_id=plan_statuses["ACTIVE"].id),
                )

    @pytest.mark.anyio
    async def test_finished_plan_cannot_be_reactivated(
        self, memory_service, status_repo, sample_user, sample_plan, plan_statuses
    ):
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )
        await memory_service.finish(active_plan.id)

        with patch.object(status_repo, "find_by_id", return_value=plan_statuses["ACTIVE"]):
            with pytest.raises(ActivePlanAlreadyFinished):
                await memory_service.update(
                    active_plan.id,
                    ActivePlanUpdate(plan_status_id=plan_statuses["ACTIVE"].id),
                )

        assert memory_service.repo.items[active_plan.id].is_finished

    @pytest.mark.anyio
    @pytest.mark.parametrize("label", ["FINISHED", "CANCELED"])
    async def test_update_cannot_close_plan(
        self, memory_service, status_repo, sample_user, sample_plan, plan_statuses, label
    ):
        """FINISHED e CANCELED só são alcançados por finish e cancel."""
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )

        with patch.object(status_repo, "find_by_id", return_value=plan_statuses[label]):
            with pytest.raises(ActivePlanStatusChangeNotAllowed):
                await memory_service.update(
                    active_plan.id,
                    ActivePlanUpdate(plan_status_id=plan_statuses[label].id),
                )

        stored = memory_service.repo.items[active_plan.id]
        assert stored.plan_status_id == plan_statuses["ACTIVE"].id
        assert stored.finished_date is None

    @pytest.mark.anyio
    async def test_same_status_is_accepted(
        self, memory_service, status_repo, sample_user, sample_plan, plan_statuses
    ):
        active_plan = await memory_service.create(
            ActivePlanCreate(user_id=sample_user.id, plan_id=sample_plan.id)
        )

        with patch.object(status_repo, "find_by_id", return_value=plan_statuses["ACTIVE"]):
            updated = await memory_service.update(
                active_plan.id,
                ActivePlanUpdate(plan_status_id=plan_statuses["ACTIVE"].id),
            )

        assert updated.plan_status_id == plan_statuses["ACTIVE"].id
