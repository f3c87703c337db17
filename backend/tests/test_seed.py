"""
Testes do seed de dados iniciais.
"""

from unittest.mock import MagicMock

import pytest

from app.db.seed import DEFAULT_PLANS, GENDERS, run_seed, seed_values
from app.models.gender import Gender
from app.models.plan import Plan
from app.models.statuses import BookStatus, PlanStatus


def _existing(values):
    result = MagicMock()
    result.scalars.return_value.all.return_value = values
    return result


@pytest.fixture
def seed_db(mock_db):
    mock_db.add = MagicMock()
    return mock_db


class TestSeed:

    @pytest.mark.anyio
    async def test_seed_values_skips_existing(self, seed_db):
        seed_db.execute.return_value = _existing(["Female", "Male"])

        created = await seed_values(seed_db, Gender, "name", [{"name": g} for g in GENDERS])

        assert created == len(GENDERS) - 2
        added = [call.args[0].name for call in seed_db.add.call_args_list]
        assert added == ["Non-binary", "Other"]

    @pytest.mark.anyio
    async def test_run_seed_on_empty_database(self, seed_db):
        seed_db.execute.return_value = _existing([])

        counts = await run_seed(seed_db)

        assert counts == {
            "plan_statuses": 3,
            "loan_statuses": 4,
            "book_statuses": 3,
            "room_statuses": 2,
            "genders": len(GENDERS),
            "plans": len(DEFAULT_PLANS),
        }
        seed_db.commit.assert_awaited_once()
        plans = [c.args[0] for c in seed_db.add.call_args_list if isinstance(c.args[0], Plan)]
        assert {plan.name for plan in plans} == {
            "Plan Lite Vindex",
            "Plan Premium Vindex",
            "Plan Full Vindex",
        }

    @pytest.mark.anyio
    async def test_run_seed_is_idempotent(self, seed_db):
        seed_db.execute.side_effect = [
            _existing(["ACTIVE", "FINISHED", "CANCELED"]),
            _existing(["PENDING", "ACTIVE", "RENEWED", "FINISHED"]),
            _existing(["AVAILABLE", "LENT", "NOT AVAILABLE"]),
            _existing(["AVAILABLE", "UNAVAILABLE"]),
            _existing(GENDERS),
            _existing([plan["name"] for plan in DEFAULT_PLANS]),
        ]

        counts = await run_seed(seed_db)

        assert set(counts.values()) == {0}
        seed_db.add.assert_not_called()

    @pytest.mark.anyio
    async def test_plan_statuses_seeded_in_upper_case(self, seed_db):
        seed_db.execute.return_value = _existing([])

        await run_seed(seed_db)

        labels = [
            c.args[0].plan_status
            for c in seed_db.add.call_args_list
            if isinstance(c.args[0], PlanStatus)
        ]
        assert labels == ["ACTIVE", "FINISHED", "CANCELED"]

    @pytest.mark.anyio
    async def test_book_statuses_seeded(self, seed_db):
        seed_db.execute.return_value = _existing([])

        await run_seed(seed_db)

        labels = [
            c.args[0].book_status
            for c in seed_db.add.call_args_list
            if isinstance(c.args[0], BookStatus)
        ]
        assert labels == ["AVAILABLE", "LENT", "NOT AVAILABLE"]
