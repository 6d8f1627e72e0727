"""Elements API tests: availability, public reservations, renaming and deleting."""

from datetime import timedelta

from httpx import AsyncClient

from sponsorship.core.config import get_settings
from sponsorship.infrastructure.persistence.database import get_session_factory
from sponsorship.infrastructure.persistence.repositories import ElementRepository
from sponsorship.shared.utils.datetime import utc_now
from tests.conftest import FakeMailSender

RESERVATION = {"name": "Ada Lovelace", "mail": "ada@example.org"}


async def test_empty_availability(client: AsyncClient) -> None:
    response = await client.get("/api/elements")
    assert response.status_code == 200
    assert response.json() == {"taken": {}, "reserved": []}


async def test_reserve_sends_mail_and_marks_reserved(
    client: AsyncClient, mail_sender: FakeMailSender
) -> None:
    response = await client.post("/api/elements", params={"mid": "pv-003"}, json=RESERVATION)

    assert response.status_code == 200
    assert response.json() == {"taken": {}, "reserved": ["pv-003"]}
    assert [m.to for m in mail_sender.sent] == ["ada@example.org"]
    assert "PV-Modul 003" in mail_sender.sent[0].subject
    assert (await client.get("/api/elements")).json()["reserved"] == ["pv-003"]


async def test_reserving_a_reserved_element_fails(
    client: AsyncClient, mail_sender: FakeMailSender
) -> None:
    await client.post("/api/elements", params={"mid": "pv-003"}, json=RESERVATION)

    response = await client.post(
        "/api/elements", params={"mid": "pv-003"}, json={"name": "Ben", "mail": "ben@example.org"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "ELEMENT_UNAVAILABLE"
    assert mail_sender.attempts == 1


async def test_reserve_with_failing_mail_persists_nothing(
    client: AsyncClient, mail_sender: FakeMailSender
) -> None:
    mail_sender.fail = True

    response = await client.post("/api/elements", params={"mid": "pv-003"}, json=RESERVATION)

    assert response.status_code == 500
    assert "details" not in response.json()
    assert (await client.get("/api/elements")).json() == {"taken": {}, "reserved": []}


async def test_reserve_validates_input(client: AsyncClient, mail_sender: FakeMailSender) -> None:
    bad_mid = await client.post("/api/elements", params={"mid": "pv-999"}, json=RESERVATION)
    bad_prefix = await client.post("/api/elements", params={"mid": "xx-001"}, json=RESERVATION)
    no_mid = await client.post("/api/elements", json=RESERVATION)
    bad_mail = await client.post(
        "/api/elements", params={"mid": "pv-003"}, json={"name": "Ada", "mail": "not-an-address"}
    )
    no_name = await client.post(
        "/api/elements", params={"mid": "pv-003"}, json={"mail": "ada@example.org"}
    )

    for response in (bad_mid, bad_prefix, no_mid, bad_mail, no_name):
        assert response.status_code == 400
    assert bad_mid.json()["message"] == "invalid mID"
    assert mail_sender.attempts == 0


async def test_rename_and_delete_require_session(client: AsyncClient) -> None:
    await client.post("/api/elements", params={"mid": "pv-003"}, json=RESERVATION)

    rename = await client.patch("/api/elements", params={"mid": "pv-003"}, json={"name": "X"})
    delete = await client.delete("/api/elements", params={"mid": "pv-003"})

    assert rename.status_code == delete.status_code == 401
    assert (await client.get("/api/elements")).json()["reserved"] == ["pv-003"]


async def test_delete_frees_element(user_client: AsyncClient) -> None:
    await user_client.post("/api/elements", params={"mid": "pv-003"}, json=RESERVATION)

    response = await user_client.delete("/api/elements", params={"mid": "pv-003"})

    assert response.status_code == 200
    assert response.json() == {"taken": {}, "reserved": []}
    again = await user_client.post("/api/elements", params={"mid": "pv-003"}, json=RESERVATION)
    assert again.status_code == 200


async def test_rename_unknown_element_is_not_found(user_client: AsyncClient) -> None:
    response = await user_client.patch(
        "/api/elements", params={"mid": "pv-004"}, json={"name": "Nobody"}
    )
    assert response.status_code == 404


async def test_taken_elements_show_sponsor_name(user_client: AsyncClient) -> None:
    await user_client.post("/api/elements", params={"mid": "bs-002"}, json=RESERVATION)
    await user_client.post("/api/reservations", params={"mid": "bs-002"})

    response = await user_client.patch(
        "/api/elements", params={"mid": "bs-002"}, json={"name": "Ada King"}
    )

    assert response.status_code == 200
    assert response.json() == {"taken": {"bs-002": "Ada King"}, "reserved": []}


async def test_expired_reservation_is_purged_on_rebuild(client: AsyncClient) -> None:
    expiration = timedelta(hours=get_settings().reservation_expiration_hours)
    async with get_session_factory()() as session:
        repo = ElementRepository(session)
        await repo.create_reservation(
            "pv-001", "Old", "old@example.org", utc_now() - expiration - timedelta(minutes=1)
        )
        await repo.create_reservation("pv-002", "New", "new@example.org", utc_now())
        await repo.commit()

    response = await client.get("/api/elements")

    assert response.json() == {"taken": {}, "reserved": ["pv-002"]}
    async with get_session_factory()() as session:
        remaining = await ElementRepository(session).list_all()
    assert [e.mid for e in remaining] == ["pv-002"]
