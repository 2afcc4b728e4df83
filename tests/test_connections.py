from datetime import date, time

from src.trips.journey_service import ConnectionService


def _hhmm_to_minutes(value):
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def test_connections_via_colonia(client, catalog):
    response = client.get(
        "/api/trips/connections",
        params={"origin": "Buenos Aires", "destination": "Montevideo"},
    )
    assert response.status_code == 200
    connections = response.json()

    # Only the 07:30 and 12:30 ferries arrive before the 16:00 COPSA bus
    assert [c["totalPrice"] for c in connections] == [268000, 298000]
    cheapest = connections[0]
    assert [leg["departure"] for leg in cheapest["legs"]] == ["12:30", "16:00"]
    assert cheapest["legs"][0]["destination"] == cheapest["legs"][1]["origin"] == "Colonia"
    assert cheapest["totalDuration"] == "3h 45m"


def test_connection_duration_is_sum_of_legs(client, catalog):
    connections = client.get(
        "/api/trips/connections",
        params={"origin": "Buenos Aires", "destination": "Punta del Este"},
    ).json()

    assert len(connections) == 1
    legs = connections[0]["legs"]
    assert [leg["departure"] for leg in legs] == ["09:00", "14:30"]
    assert connections[0]["totalPrice"] == 380000 + 65000
    assert connections[0]["totalDuration"] == "5h 0m"


def test_second_leg_always_departs_after_first_arrives(client, catalog, make_trip):
    make_trip(origin="Colonia", destination="Montevideo", departure=time(8, 45),
              arrival=time(11, 15), duration_minutes=150, price=50000)
    make_trip(origin="Colonia", destination="Montevideo", departure=time(13, 45),
              arrival=time(16, 15), duration_minutes=150, price=50000)

    connections = client.get(
        "/api/trips/connections",
        params={"origin": "Buenos Aires", "destination": "Montevideo"},
    ).json()

    assert connections
    for connection in connections:
        first, second = connection["legs"]
        assert _hhmm_to_minutes(second["departure"]) > _hhmm_to_minutes(first["arrival"])


def test_overnight_first_leg_does_not_connect(db, make_trip):
    make_trip(origin="Montevideo", destination="Rivera", departure=time(22, 0),
              arrival=time(4, 0), duration_minutes=360, price=120000)
    make_trip(origin="Rivera", destination="Santana do Livramento", departure=time(9, 0),
              arrival=time(9, 30), duration_minutes=30, price=5000)

    connections = ConnectionService(db).find_connections("Montevideo", "Santana do Livramento")

    assert connections == []


def test_connections_respect_travel_day(db, make_trip):
    make_trip(origin="Montevideo", destination="Rocha", departure=time(8, 0),
              arrival=time(11, 0), duration_minutes=180, price=60000)
    make_trip(origin="Rocha", destination="Cabo Polonio", departure=time(12, 0),
              arrival=time(13, 0), duration_minutes=60, price=20000,
              days_of_week=["SAT", "SUN"])

    service = ConnectionService(db)
    assert service.find_connections("Montevideo", "Cabo Polonio", date(2026, 10, 19)) == []

    weekend = service.find_connections("Montevideo", "Cabo Polonio", date(2026, 10, 24))
    assert len(weekend) == 1
    assert weekend[0].total_price == 80000
    assert weekend[0].total_duration == "4h 0m"


def test_connections_limited_and_sorted_by_price(db, make_trip):
    for hour in range(6, 12):
        make_trip(origin="Montevideo", destination="Minas", departure=time(hour, 0),
                  arrival=time(hour, 30), duration_minutes=30, price=10000 + hour)
    for hour in (13, 14):
        make_trip(origin="Minas", destination="Treinta y Tres", departure=time(hour, 0),
                  arrival=time(hour + 2, 0), duration_minutes=120, price=30000 + hour)

    connections = ConnectionService(db).find_connections("Montevideo", "Treinta y Tres")

    assert len(connections) == 10
    prices = [c.total_price for c in connections]
    assert prices == sorted(prices)
    assert prices[0] == 10006 + 30013


def test_connections_require_origin_and_destination(client, catalog):
    response = client.get("/api/trips/connections", params={"origin": "Buenos Aires"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Origin and destination are required"


def test_connections_honour_explicit_limit(db, make_trip):
    make_trip(origin="Montevideo", destination="Minas", departure=time(7, 0),
              arrival=time(8, 0), duration_minutes=60, price=12000)
    for hour in (10, 12, 14):
        make_trip(origin="Minas", destination="Treinta y Tres", departure=time(hour, 0),
                  arrival=time(hour + 2, 0), duration_minutes=120, price=30000 + hour)

    service = ConnectionService(db)

    assert service.find_connections("Montevideo", "Treinta y Tres", limit=0) == []
    assert len(service.find_connections("Montevideo", "Treinta y Tres", limit=2)) == 2
    assert len(service.find_connections("Montevideo", "Treinta y Tres")) == 3
