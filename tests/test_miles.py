from sqlalchemy.orm import Query, Session

from src.enums import MilesTransactionType, TierLevel
from src.miles.service import MilesService
from src.models import UserMiles


def test_get_or_create_is_idempotent(db):
    service = MilesService(db)

    first = service.get_or_create_user_miles("user-1")
    second = service.get_or_create_user_miles("user-1")

    assert first.id == second.id
    assert first.total_miles == 0
    assert first.lifetime_miles == 0
    assert first.tier_level == TierLevel.BRONZE.value
    assert db.query(UserMiles).filter(UserMiles.user_id == "user-1").count() == 1


def test_redemption_does_not_reduce_lifetime_miles(db):
    service = MilesService(db)
    before = service.get_or_create_user_miles("user-1")
    previous_total, previous_lifetime = before.total_miles, before.lifetime_miles

    service.add_miles("user-1", 100)
    record = service.add_miles("user-1", -30)

    assert record.total_miles == previous_total + 70
    assert record.lifetime_miles == previous_lifetime + 100


def test_transaction_type_follows_sign(db):
    service = MilesService(db)

    service.add_miles("user-1", 500, description="Bienvenida")
    service.add_miles("user-1", -200)

    history = service.get_transactions("user-1")
    assert [(t.miles, t.type) for t in history] == [
        (-200, MilesTransactionType.REDEEMED.value),
        (500, MilesTransactionType.EARNED.value),
    ]
    assert history[0].description == "Miles redeemed"
    assert history[1].description == "Bienvenida"


def test_tier_upgrades_with_lifetime_miles(db):
    service = MilesService(db)

    assert service.add_miles("user-1", 19999).tier_level == TierLevel.BRONZE.value
    assert service.add_miles("user-1", 1).tier_level == TierLevel.SILVER.value
    assert service.add_miles("user-1", 30000).tier_level == TierLevel.GOLD.value
    assert service.add_miles("user-1", 50000).tier_level == TierLevel.PLATINUM.value


def test_redeeming_keeps_tier(db):
    service = MilesService(db)

    service.add_miles("user-1", 20000)
    record = service.add_miles("user-1", -15000)

    assert record.total_miles == 5000
    assert record.tier_level == TierLevel.SILVER.value


def test_balances_are_per_user(db):
    service = MilesService(db)

    service.add_miles("user-1", 300)
    service.add_miles("user-2", 40)

    assert service.get_or_create_user_miles("user-1").total_miles == 300
    assert service.get_or_create_user_miles("user-2").total_miles == 40
    assert len(service.get_transactions("user-2")) == 1


def test_my_miles_created_on_first_read(client, auth):
    headers, user = auth

    response = client.get("/api/my-miles", headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["userId"] == user["id"]
    assert body["totalMiles"] == 0
    assert body["lifetimeMiles"] == 0
    assert body["tierLevel"] == "bronze"


def test_my_miles_transactions(client, db, auth):
    headers, user = auth
    MilesService(db).add_miles(user["id"], 1200)

    response = client.get("/api/my-miles/transactions", headers=headers)

    assert response.status_code == 200
    transactions = response.json()
    assert len(transactions) == 1
    assert transactions[0]["miles"] == 1200
    assert transactions[0]["type"] == "earned"
    assert transactions[0]["bookingId"] is None


def test_miles_endpoints_require_authentication(client):
    assert client.get("/api/my-miles").status_code == 401
    assert client.get("/api/my-miles/transactions").status_code == 401


def test_get_or_create_rereads_row_created_concurrently(db, monkeypatch):
    # The first lookup misses, then another request inserts the row
    original_first = Query.first
    lookups = []

    def first_misses_once(query):
        if not lookups:
            lookups.append(query)
            with Session(bind=db.get_bind()) as other:
                other.add(UserMiles(user_id="user-1", total_miles=500, lifetime_miles=500,
                                    tier_level=TierLevel.BRONZE.value))
                other.commit()
            return None
        return original_first(query)

    monkeypatch.setattr(Query, "first", first_misses_once)

    record = MilesService(db).get_or_create_user_miles("user-1")

    assert lookups
    assert record.total_miles == 500
    assert record.lifetime_miles == 500
    assert db.query(UserMiles).filter(UserMiles.user_id == "user-1").count() == 1
