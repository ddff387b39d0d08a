"""Seed loader: fills the directory from the public demo users endpoint.

Runs once at startup as a fire-and-forget task. Any failure (bad URL,
transport error, non-2xx status, malformed payload) is logged and leaves the
directory empty; there is no retry.
"""


import logging
import random

import httpx
from pydantic import BaseModel, ValidationError

from admin_console.domain.directory import DirectoryRecord
from admin_console.domain.principal import Role
from admin_console.repositories.directory import DirectoryRepository

logger = logging.getLogger(__name__)

ROLES: tuple[Role, ...] = (Role.ADMIN, Role.UPLOADER, Role.VIEWER)


class SeedCompany(BaseModel):
    name: str = ""


class SeedAddress(BaseModel):
    city: str = ""


class SeedUser(BaseModel):
    """One entry of the seed payload. Unknown fields are ignored."""

    id: int
    name: str
    email: str
    website: str = ""
    company: SeedCompany = SeedCompany()
    address: SeedAddress = SeedAddress()


def to_records(payload: object, rng: random.Random | None = None) -> list[DirectoryRecord]:
    """Convert a decoded seed payload into directory records.

    Each record gets a role drawn uniformly from ``ROLES``.
    Raises ``ValueError`` when the payload is not a list of users.
    """
    if not isinstance(payload, list):
        raise ValueError(f"expected a JSON array, got {type(payload).__name__}")
    rng = rng or random.Random()
    records: list[DirectoryRecord] = []
    for raw in payload:
        try:
            user = SeedUser.model_validate(raw)
        except ValidationError as exc:
            raise ValueError(f"malformed seed entry: {exc.error_count()} error(s)") from exc
        records.append(
            DirectoryRecord(
                id=user.id,
                name=user.name,
                email=user.email,
                company_name=user.company.name,
                website=user.website,
                city=user.address.city,
                role=rng.choice(ROLES),
            )
        )
    return records


async def fetch_seed_records(
    url: str,
    *,
    timeout: float = 10.0,
    client: httpx.AsyncClient | None = None,
    rng: random.Random | None = None,
) -> list[DirectoryRecord]:
    """GET *url* and convert the JSON body. Raises on any failure."""
    if client is None:
        async with httpx.AsyncClient(timeout=timeout) as owned:
            response = await owned.get(url)
    else:
        response = await client.get(url)
    response.raise_for_status()
    return to_records(response.json(), rng)


async def load_seed(
    repo: DirectoryRepository,
    url: str,
    *,
    timeout: float = 10.0,
    client: httpx.AsyncClient | None = None,
    rng: random.Random | None = None,
) -> int:
    """Replace the directory with the seed users; return how many were loaded.

    Returns 0 and leaves *repo* untouched when the fetch fails.
    """
    try:
        records = await fetch_seed_records(url, timeout=timeout, client=client, rng=rng)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        logger.error("Seed fetch from %s failed: %s", url, exc)
        return 0
    repo.replace_all(records)
    logger.info("Seeded directory with %d users from %s", len(records), url)
    return len(records)
