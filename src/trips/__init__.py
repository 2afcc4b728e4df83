"""
Trip Search Module

Catalog search over scheduled ferry and bus trips. It includes:

- Trip filtering by route, transport mode, weekday and price range
- One-transfer connection finding when no direct trip exists
- Lowest price per day over a date range

Key Components:
- service.py: Trip search and price calendar
- journey_service.py: Connection finder for two-leg itineraries
- utils.py: Time-of-day, duration and weekday helpers
- router.py: FastAPI endpoints under /trips
- schemas.py: Pydantic models for trips, connections and date prices
"""
