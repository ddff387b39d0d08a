import copy
from dataclasses import asdict

import pytest

from admin_console.core.exceptions import ValidationError
from admin_console.domain.principal import Role
from admin_console.repositories.directory import DirectoryRepository
from admin_console.services.directory import DirectoryService
from admin_console.services.outcome import Outcome
from admin_console.services.session import Session
from tests.helpers import ADMIN, UPLOADER, VIEWER, session_for


def _snapshot(repo: DirectoryRepository) -> list[dict]:
    return [asdict(r) for r in repo.list()]


def _service(repo: DirectoryRepository, session: Session) -> DirectoryService:
    return DirectoryService(repo, session, page_size=5)


def test_admin_adds_with_fresh_id(directory_repo) -> None:
    svc = _service(directory_repo, session_for(ADMIN))
    result = svc.add(name="Ada Lovelace", email="ada@example.org", city="London")

    assert result.outcome is Outcome.APPLIED
    assert result.value.id == 12
    assert result.value.role is Role.VIEWER
    assert directory_repo.list()[-1] is result.value


def test_ids_are_not_reused_after_delete(directory_repo) -> None:
    svc = _service(directory_repo, session_for(ADMIN))
    svc.delete(11)
    added = svc.add(name="New", email="new@example.org").value
    assert added.id == 12


def test_admin_edits_named_field_in_place(directory_repo) -> None:
    svc = _service(directory_repo, session_for(ADMIN))
    record = directory_repo.get_by_id(2)

    result = svc.edit(2, "company_name", "Initech")

    assert result.applied
    assert result.value is record
    assert record.company_name == "Initech"


def test_admin_edits_role(directory_repo) -> None:
    svc = _service(directory_repo, session_for(ADMIN))
    svc.edit(3, "role", "uploader")
    assert directory_repo.get_by_id(3).role is Role.UPLOADER


def test_edit_rejects_unknown_field_and_bad_role(directory_repo) -> None:
    svc = _service(directory_repo, session_for(ADMIN))
    with pytest.raises(ValidationError):
        svc.edit(1, "id", "99")
    with pytest.raises(ValidationError):
        svc.edit(1, "role", "superuser")


def test_missing_id_is_a_no_op(directory_repo) -> None:
    svc = _service(directory_repo, session_for(ADMIN))
    before = _snapshot(directory_repo)

    assert svc.edit(404, "name", "Ghost").outcome is Outcome.NOT_FOUND
    assert svc.edit(404, "role", "bogus").outcome is Outcome.NOT_FOUND
    assert svc.delete(404).outcome is Outcome.NOT_FOUND
    assert _snapshot(directory_repo) == before


def test_admin_deletes(directory_repo) -> None:
    svc = _service(directory_repo, session_for(ADMIN))
    assert svc.delete(1).applied
    assert directory_repo.get_by_id(1) is None
    assert len(directory_repo) == 10


@pytest.mark.parametrize("credentials", [UPLOADER, VIEWER, None])
def test_non_admin_mutations_leave_collection_unchanged(directory_repo, credentials) -> None:
    session = session_for(credentials) if credentials else Session()
    svc = _service(directory_repo, session)
    before = copy.deepcopy(_snapshot(directory_repo))
    version = directory_repo.version

    assert svc.add(name="Mallory", email="m@example.org").outcome is Outcome.DENIED
    assert svc.edit(1, "name", "Mallory").outcome is Outcome.DENIED
    assert svc.delete(1).outcome is Outcome.DENIED
    assert svc.can_manage is False

    assert _snapshot(directory_repo) == before
    assert directory_repo.version == version


def test_mutation_sends_listing_back_to_page_one(directory_repo) -> None:
    session = session_for(ADMIN)
    svc = _service(directory_repo, session)
    assert svc.page(page=2).page == 2

    svc.edit(1, "name", "Leanne G.")
    assert svc.page(page=2).page == 1


def test_page_reflects_search_and_city(directory_repo) -> None:
    svc = _service(directory_repo, session_for(VIEWER))

    result = svc.page(search="leanne")
    assert [r.id for r in result.rows] == [1, 11]

    result = svc.page(city="Gwenborough")
    assert result.search == "leanne"
    assert result.city == "Gwenborough"
    assert result.total == 2

    result = svc.page(search="", city="")
    assert result.total == 11
    assert result.page_buttons == [1, 2, 3]


def test_cities_in_first_seen_order(directory_repo) -> None:
    svc = _service(directory_repo, session_for(VIEWER))
    cities = svc.cities()
    assert cities[0] == "Gwenborough"
    assert cities.count("Gwenborough") == 1
    assert len(cities) == 10
