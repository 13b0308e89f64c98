"""Master Data Reads — country/state/city pickers for the mobile app.

Invariants:
    - Ids are returned as strings, names default to "" (legacy client contract)
    - Rows ordered by id so list order is stable across calls
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bizcard.models.city import City
from bizcard.models.country import Country
from bizcard.models.state import State


async def list_countries(db: AsyncSession) -> list[dict]:
    result = await db.execute(
        select(Country.id, Country.name)
        .where(Country.deleted == 0)
        .order_by(Country.id),
    )
    return [
        {"country_id": str(row.id), "country_name": row.name or ""}
        for row in result
    ]


async def list_states(db: AsyncSession, country_id: int) -> list[dict]:
    result = await db.execute(
        select(State.id, State.name)
        .where(State.country_id == country_id, State.deleted == 0)
        .order_by(State.id),
    )
    return [
        {"state_id": str(row.id), "state_name": row.name or ""}
        for row in result
    ]


async def list_cities(db: AsyncSession, state_id: int) -> list[dict]:
    result = await db.execute(
        select(City.id, City.name)
        .where(City.state_id == state_id, City.deleted == 0)
        .order_by(City.id),
    )
    return [
        {"city_id": str(row.id), "city_name": row.name or ""}
        for row in result
    ]
