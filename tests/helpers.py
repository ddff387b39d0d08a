"""Shared builders for the admin console tests."""

from __future__ import annotations

from admin_console.domain.directory import DirectoryRecord
from admin_console.domain.principal import Role
from admin_console.services.session import Session

ADMIN = ("admin@example.com", "admin123")
UPLOADER = ("uploader@example.com", "uploader123")
VIEWER = ("viewer@example.com", "viewer123")

MIB = 1024 * 1024


def make_record(record_id: int, name: str, email: str, city: str) -> DirectoryRecord:
    slug = name.split()[-1].lower()
    return DirectoryRecord(
        id=record_id,
        name=name,
        email=email,
        company_name=f"{slug.title()} Group",
        website=f"{slug}.org",
        city=city,
        role=Role.VIEWER,
    )


def sample_records() -> list[DirectoryRecord]:
    """Eleven users shaped like the demo endpoint's, plus a name twin."""
    return [
        make_record(1, "Leanne Graham", "Sincere@april.biz", "Gwenborough"),
        make_record(2, "Ervin Howell", "Shanna@melissa.tv", "Wisokyburgh"),
        make_record(3, "Clementine Bauch", "Nathan@yesenia.net", "McKenziehaven"),
        make_record(4, "Patricia Lebsack", "Julianne.OConner@kory.org", "South Elvis"),
        make_record(5, "Chelsey Dietrich", "Lucio_Hettinger@annie.ca", "Roscoeview"),
        make_record(6, "Mrs. Dennis Schulist", "Karley_Dach@jasper.info", "South Christy"),
        make_record(7, "Kurtis Weissnat", "Telly.Hoeger@billy.biz", "Howemouth"),
        make_record(8, "Nicholas Runolfsdottir V", "Sherwood@rosamond.me", "Aliyaview"),
        make_record(9, "Glenna Reichert", "Chaim_McDermott@dana.io", "Bartholomebury"),
        make_record(10, "Clementina DuBuque", "Rey.Padberg@karina.biz", "Lebsackbury"),
        make_record(11, "Leanne Twin", "twin@april.biz", "Gwenborough"),
    ]


def seed_payload(count: int) -> list[dict]:
    """JSON body in the shape the seed endpoint returns."""
    return [
        {
            "id": r.id,
            "name": r.name,
            "username": r.name.split()[0],
            "email": r.email,
            "address": {"street": "Kulas Light", "city": r.city, "zipcode": "92998-3874"},
            "phone": "1-770-736-8031",
            "website": r.website,
            "company": {"name": r.company_name, "catchPhrase": "Multi-layered"},
        }
        for r in sample_records()[:count]
    ]


def session_for(credentials: tuple[str, str]) -> Session:
    session = Session()
    assert session.login(*credentials)
    return session
