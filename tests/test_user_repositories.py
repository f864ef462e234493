from datetime import datetime, timedelta, timezone

import pytest

from domca.shared.core.exceptions import InvalidArgumentError
from domca.shared.infrastructure.database.unit_of_work import SqlAlchemyUnitOfWork
from domca.modules.user_management.domain.models import (
    HydrationRecord,
    UserId,
    UserSession,
    UserSessionId,
)
from domca.modules.user_management.infrastructure.database.hydration_repository_impl import (
    HydrationRepositoryImpl,
)
from domca.modules.user_management.infrastructure.database.user_repository_impl import (
    UserRepositoryImpl,
)
from domca.modules.user_management.infrastructure.database.user_session_repository_impl import (
    UserSessionRepositoryImpl,
)
from tests.factories import make_user


async def store_user(session_factory, user):
    async with session_factory() as session:
        await UserRepositoryImpl(session).add(user)
        await SqlAlchemyUnitOfWork(session).save_changes()
    return user


class TestUserRepository:
    async def test_add_and_get_by_id(self, session_factory):
        user = make_user()
        user.add_session(UserSession.create(user.id, "token-1"))
        user.log_hydration(HydrationRecord.create(user.id, 250))

        async with session_factory() as session:
            await UserRepositoryImpl(session).add(user)
            assert await SqlAlchemyUnitOfWork(session).save_changes() == 3

        async with session_factory() as session:
            loaded = await UserRepositoryImpl(session).get_by_id(user.id)

        assert loaded is not None
        assert loaded.id == user.id
        assert loaded.user_name == "ada"
        assert loaded.email_address_normalized == "ADA@EXAMPLE.COM"
        assert loaded.created_at == user.created_at
        assert loaded.created_at.tzinfo is timezone.utc
        assert [s.token for s in loaded.sessions] == ["token-1"]
        assert [r.amount_ml for r in loaded.hydration_records] == [250]

    async def test_get_missing_user(self, db_session):
        assert await UserRepositoryImpl(db_session).get_by_id(UserId.new()) is None

    async def test_get_by_email_ignores_case(self, session_factory):
        user = await store_user(session_factory, make_user())

        async with session_factory() as session:
            found = await UserRepositoryImpl(session).get_by_email("ADA@example.COM")

        assert found is not None
        assert found.id == user.id

    async def test_is_email_unique(self, session_factory):
        await store_user(session_factory, make_user())

        async with session_factory() as session:
            repo = UserRepositoryImpl(session)
            assert not await repo.is_email_unique("ada@example.com")
            assert await repo.is_email_unique("grace@example.com")

    async def test_blank_email_lookup_rejected(self, db_session):
        with pytest.raises(InvalidArgumentError):
            await UserRepositoryImpl(db_session).get_by_email(" ")

    async def test_update(self, session_factory):
        user = await store_user(session_factory, make_user())

        async with session_factory() as session:
            repo = UserRepositoryImpl(session)
            loaded = await repo.get_by_id(user.id)
            loaded.change_email("ada@newmail.org")
            loaded.log_hydration(HydrationRecord.create(user.id, 400))
            await repo.update(loaded)
            assert await SqlAlchemyUnitOfWork(session).save_changes() >= 2

        async with session_factory() as session:
            reloaded = await UserRepositoryImpl(session).get_by_email("ADA@NEWMAIL.ORG")

        assert reloaded is not None
        assert reloaded.email_address == "ada@newmail.org"
        assert [r.amount_ml for r in reloaded.hydration_records] == [400]

    async def test_remove_deletes_owned_children(self, session_factory):
        user = make_user()
        user.add_session(UserSession.create(user.id, "token-1"))
        user.log_hydration(HydrationRecord.create(user.id, 250))
        await store_user(session_factory, user)

        async with session_factory() as session:
            repo = UserRepositoryImpl(session)
            await repo.remove(await repo.get_by_id(user.id))
            assert await SqlAlchemyUnitOfWork(session).save_changes() == 3

        async with session_factory() as session:
            assert await UserRepositoryImpl(session).get_by_id(user.id) is None
            assert await HydrationRepositoryImpl(session).get_by_user(user.id) == []
            assert await UserSessionRepositoryImpl(session).get_by_token("token-1") is None

    async def test_remove_user_with_several_children(self, session_factory):
        user = make_user()
        for token in ("token-1", "token-2"):
            user.add_session(UserSession.create(user.id, token))
        for amount in (250, 300):
            user.log_hydration(HydrationRecord.create(user.id, amount))
        await store_user(session_factory, user)

        async with session_factory() as session:
            repo = UserRepositoryImpl(session)
            await repo.remove(await repo.get_by_id(user.id))
            assert await SqlAlchemyUnitOfWork(session).save_changes() == 1 + 4

        async with session_factory() as session:
            assert await HydrationRepositoryImpl(session).get_by_user(user.id) == []
            assert await UserSessionRepositoryImpl(session).get_active_by_user_id(user.id) == []

    async def test_writes_are_staged_until_saved(self, db_session):
        repo = UserRepositoryImpl(db_session)
        user = make_user()

        await repo.add(user)

        assert len(db_session.new) == 1
        await db_session.rollback()
        assert await repo.get_by_id(user.id) is None


class TestUserSessionRepository:
    async def test_get_by_id_and_token(self, session_factory):
        user = await store_user(session_factory, make_user())
        user_session = UserSession.create(user.id, "secret-token")

        async with session_factory() as session:
            await UserSessionRepositoryImpl(session).add(user_session)
            assert await SqlAlchemyUnitOfWork(session).save_changes() == 1

        async with session_factory() as session:
            repo = UserSessionRepositoryImpl(session)
            by_id = await repo.get_by_id(user_session.id)
            by_token = await repo.get_by_token("secret-token")

        assert by_id.id == user_session.id
        assert by_token.user_id == user.id
        assert by_token.expires_at == user_session.expires_at

    async def test_missing_session(self, db_session):
        repo = UserSessionRepositoryImpl(db_session)
        assert await repo.get_by_id(UserSessionId.new()) is None
        assert await repo.get_by_token("nope") is None

    async def test_get_active_by_user_id(self, session_factory):
        user = await store_user(session_factory, make_user())
        active = UserSession.create(user.id, "active")
        issued = datetime.now(timezone.utc) - timedelta(days=40)
        expired = UserSession.rehydrate(
            id=UserSessionId.new(),
            user_id=user.id,
            token="expired",
            created_at=issued,
            expires_at=issued + timedelta(days=30),
        )
        other_user = UserSession.create(UserId.new(), "other")

        async with session_factory() as session:
            repo = UserSessionRepositoryImpl(session)
            for user_session in (active, expired, other_user):
                await repo.add(user_session)
            await SqlAlchemyUnitOfWork(session).save_changes()

        async with session_factory() as session:
            repo = UserSessionRepositoryImpl(session)
            now_active = await repo.get_active_by_user_id(user.id)
            later_active = await repo.get_active_by_user_id(
                user.id, utc_now=datetime.now(timezone.utc) + timedelta(days=31)
            )

        assert [s.token for s in now_active] == ["active"]
        assert later_active == []

    async def test_remove_range(self, session_factory):
        user = await store_user(session_factory, make_user())
        sessions = [UserSession.create(user.id, f"token-{i}") for i in range(3)]

        async with session_factory() as session:
            repo = UserSessionRepositoryImpl(session)
            for user_session in sessions:
                await repo.add(user_session)
            await SqlAlchemyUnitOfWork(session).save_changes()

        async with session_factory() as session:
            repo = UserSessionRepositoryImpl(session)
            await repo.remove_range(sessions[:2])
            assert await SqlAlchemyUnitOfWork(session).save_changes() == 2

        async with session_factory() as session:
            remaining = await UserSessionRepositoryImpl(session).get_active_by_user_id(user.id)

        assert [s.token for s in remaining] == ["token-2"]


def record_on(user_id, when, amount=250):
    return HydrationRecord.create(user_id, amount, date=when)


class TestHydrationRepository:
    @pytest.fixture
    async def seeded(self, session_factory):
        user = await store_user(session_factory, make_user())
        utc = timezone.utc
        records = [
            record_on(user.id, datetime(2025, 12, 31, 23, 0, tzinfo=utc), 100),
            record_on(user.id, datetime(2026, 10, 19, 0, 0, tzinfo=utc), 200),
            record_on(user.id, datetime(2026, 10, 25, 23, 59, tzinfo=utc), 300),
            record_on(user.id, datetime(2026, 10, 26, 0, 0, tzinfo=utc), 400),
            record_on(user.id, datetime(2026, 11, 3, 12, 0, tzinfo=utc), 500),
            record_on(UserId.new(), datetime(2026, 10, 20, 12, 0, tzinfo=utc), 999),
        ]
        async with session_factory() as session:
            await HydrationRepositoryImpl(session).add_range(records)
            assert await SqlAlchemyUnitOfWork(session).save_changes() == len(records)
        return user, records

    async def test_get_by_user_ordered_by_date(self, session_factory, seeded):
        user, _ = seeded
        async with session_factory() as session:
            records = await HydrationRepositoryImpl(session).get_by_user(user.id)
        assert [r.amount_ml for r in records] == [100, 200, 300, 400, 500]
        assert all(r.date.tzinfo is timezone.utc for r in records)

    async def test_week_window(self, session_factory, seeded):
        user, _ = seeded
        async with session_factory() as session:
            records = await HydrationRepositoryImpl(session).get_by_user_for_week(
                user.id, datetime(2026, 10, 22, 9, 0, tzinfo=timezone.utc)
            )
        assert [r.amount_ml for r in records] == [200, 300]

    async def test_month_window(self, session_factory, seeded):
        user, _ = seeded
        async with session_factory() as session:
            records = await HydrationRepositoryImpl(session).get_by_user_for_month(user.id, 10, 2026)
        assert [r.amount_ml for r in records] == [200, 300, 400]

    async def test_year_window(self, session_factory, seeded):
        user, _ = seeded
        async with session_factory() as session:
            records = await HydrationRepositoryImpl(session).get_by_user_for_year(user.id, 2026)
        assert [r.amount_ml for r in records] == [200, 300, 400, 500]

    async def test_invalid_month(self, db_session):
        with pytest.raises(InvalidArgumentError):
            await HydrationRepositoryImpl(db_session).get_by_user_for_month(UserId.new(), 13, 2026)

    async def test_today(self, session_factory):
        user = await store_user(session_factory, make_user())
        now = datetime.now(timezone.utc)
        async with session_factory() as session:
            await HydrationRepositoryImpl(session).add_range([
                record_on(user.id, now, 330),
                record_on(user.id, now - timedelta(days=1), 440),
            ])
            await SqlAlchemyUnitOfWork(session).save_changes()

        async with session_factory() as session:
            records = await HydrationRepositoryImpl(session).get_by_user_for_today(user.id)

        assert [r.amount_ml for r in records] == [330]

    async def test_update_and_remove(self, session_factory, seeded):
        user, records = seeded
        corrected = records[1].model_copy(update={"amount_ml": 250})

        async with session_factory() as session:
            repo = HydrationRepositoryImpl(session)
            await repo.update(corrected)
            await repo.remove(records[2])
            await SqlAlchemyUnitOfWork(session).save_changes()

        async with session_factory() as session:
            repo = HydrationRepositoryImpl(session)
            assert (await repo.get_by_id(records[1].id)).amount_ml == 250
            assert await repo.get_by_id(records[2].id) is None

    async def test_update_several_records_in_one_save(self, session_factory, seeded):
        user, records = seeded
        corrections = [
            records[1].model_copy(update={"amount_ml": 210}),
            records[3].model_copy(update={"amount_ml": 410}),
        ]

        async with session_factory() as session:
            repo = HydrationRepositoryImpl(session)
            for record in corrections:
                await repo.update(record)
            assert await SqlAlchemyUnitOfWork(session).save_changes() == 2

        async with session_factory() as session:
            stored = await HydrationRepositoryImpl(session).get_by_user(user.id)

        assert [r.amount_ml for r in stored] == [100, 210, 300, 410, 500]
