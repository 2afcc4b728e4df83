#!/usr/bin/env python3

from datetime import time

from sqlalchemy.orm import Session
from src.database import Base, SessionLocal, engine
from src.models import Operator, Trip, Booking, UserMiles, MilesTransaction
from src.trips.utils import parse_duration

# (operator, origin, destination, departure, arrival, duration, price, mode, features, seats)
TRIPS = [
    # Ferry trips
    ("Buquebus", "Buenos Aires", "Colonia", time(7, 30), time(8, 45), "1h 15m", 240000, "ferry", ["wifi", "cafe", "shop"], 200),
    ("Buquebus", "Buenos Aires", "Montevideo", time(9, 0), time(12, 0), "3h 00m", 380000, "ferry", ["wifi", "cafe", "shop", "bed"], 150),
    ("Colonia Express", "Buenos Aires", "Colonia", time(12, 30), time(13, 45), "1h 15m", 210000, "ferry", ["pets", "wifi"], 180),
    ("Colonia Express", "Buenos Aires", "Colonia", time(17, 0), time(18, 15), "1h 15m", 225000, "ferry", ["wifi", "cafe"], 180),
    # Bus trips
    ("COT", "Montevideo", "Punta del Este", time(9, 0), time(11, 0), "2h 00m", 65000, "bus", ["ac", "wifi"], 45),
    ("COT", "Montevideo", "Punta del Este", time(14, 30), time(16, 30), "2h 00m", 65000, "bus", ["ac", "wifi"], 45),
    ("Turil", "Montevideo", "Salto", time(14, 0), time(20, 0), "6h 00m", 110000, "bus", ["bed", "coffee", "wifi", "ac"], 38),
    ("Turil", "Montevideo", "Paysandú", time(15, 30), time(20, 30), "5h 00m", 95000, "bus", ["ac", "wifi", "coffee"], 42),
    ("EGA", "Montevideo", "Colonia", time(8, 0), time(10, 30), "2h 30m", 55000, "bus", ["ac", "wifi"], 48),
    ("COPSA", "Colonia", "Montevideo", time(16, 0), time(18, 30), "2h 30m", 58000, "bus", ["ac"], 50),
    ("COT", "Punta del Este", "Montevideo", time(18, 0), time(20, 0), "2h 00m", 65000, "bus", ["ac", "wifi"], 45),
]

OPERATORS = [
    ("Buquebus", "ferry"),
    ("Colonia Express", "ferry"),
    ("COT", "bus"),
    ("Turil", "bus"),
    ("EGA", "bus"),
    ("COPSA", "bus"),
]

def seed_catalog(db: Session) -> dict:
    """Replace operators and trips with the reference catalog; returns operators by name"""
    
    # Clear existing data (in reverse dependency order)
    db.query(MilesTransaction).delete()
    db.query(UserMiles).delete()
    db.query(Booking).delete()
    db.query(Trip).delete()
    db.query(Operator).delete()
    
    operators = {name: Operator(name=name, mode=mode) for name, mode in OPERATORS}
    db.add_all(operators.values())
    db.flush()
    
    trips = [
        Trip(
            operator_id=operators[operator].id,
            origin=origin,
            destination=destination,
            departure=departure,
            arrival=arrival,
            duration_minutes=parse_duration(duration),
            price=price,
            mode=mode,
            features=features,
            available_seats=seats
        )
        for operator, origin, destination, departure, arrival, duration, price, mode, features, seats in TRIPS
    ]
    db.add_all(trips)
    db.commit()
    
    return operators

def create_seed_data():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    
    try:
        print("🌱 Seeding ferry and bus catalog...")
        operators = seed_catalog(db)
        print("✅ Database seeded successfully!")
        print(f"  - {len(operators)} operators")
        print(f"  - {len(TRIPS)} trips")
    except Exception as e:
        print(f"❌ Seed failed: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
