import threading

import pytest

from user_management.adapters.repository import UserRepository
from user_management.domain.user import User
from user_management.services.user_service import NotFound, Success, UserService, ValidationFailed
from user_management.services.validation import is_valid_email, validate_user


@pytest.fixture
def repository():
    return UserRepository()


@pytest.fixture
def service(repository):
    return UserService(repository, default_page=1, default_page_size=10)


def _create(service, name="Ann", email="ann@example.com", details=None):
    result = service.create_user(name, email, details)
    assert isinstance(result, Success)
    return result.value


# ---------- validation ----------
@pytest.mark.parametrize(
    "email, expected",
    [
        ("a@b.com", True),
        ("first.last@mail.example.org", True),
        ("a@b", False),
        ("", False),
        ("   ", False),
        (None, False),
        ("a@@b.com", False),
        ("a b@c.com", False),
        ("@b.com", False),
        ("a@b.com ", False),
    ],
)
def test_is_valid_email(email, expected):
    assert is_valid_email(email) is expected


def test_validate_user_checks_name_before_email():
    assert validate_user("  ", "not-an-email") == "Name is required."
    assert validate_user(None, "a@b.com") == "Name is required."
    assert validate_user("Ann", "a@b") == "Invalid email format."
    assert validate_user("Ann", "a@b.com") is None


# ---------- repository ----------
def test_repository_assigns_increasing_ids_and_never_reuses(repository):
    first, second = User("A", "a@b.com"), User("B", "b@b.com")
    repository.add(first)
    repository.add(second)
    assert (first.id, second.id) == (1, 2)

    assert repository.delete(2) is True
    third = User("C", "c@b.com")
    repository.add(third)
    assert third.id == 3
    assert [user.id for user in repository.list()] == [1, 3]


def test_repository_slice_clamps_negative_offset(repository):
    for name in ("A", "B", "C"):
        repository.add(User(name, f"{name.lower()}@b.com"))
    assert [user.name for user in repository.slice(-2, 2)] == ["A", "B"]
    assert repository.slice(0, 0) == []
    assert repository.slice(0, -1) == []
    assert repository.slice(10, 5) == []


def test_repository_hands_out_copies(repository):
    user = User("A", "a@b.com", details="old")
    repository.add(user)
    user.name = "changed after add"

    fetched = repository.get(user.id)
    fetched.name = "changed after get"
    repository.slice(0, 1)[0].email = "changed@b.com"

    updated = repository.update(user.id, "B", "b@b.com", None)
    updated.details = "changed after update"

    stored = repository.get(user.id)
    assert (stored.name, stored.email, stored.details) == ("B", "b@b.com", None)


def test_repository_update_is_not_torn_by_concurrent_reads(repository):
    repository.add(User("A", "a@a.com"))
    torn = []
    done = threading.Event()

    def writer():
        for index in range(2000):
            letter = "AB"[index % 2]
            repository.update(1, letter, f"{letter.lower()}@{letter.lower()}.com", None)
        done.set()

    def reader():
        while not done.is_set():
            user = repository.get(1)
            if user.email != f"{user.name.lower()}@{user.name.lower()}.com":
                torn.append(user)

    threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert torn == []


def test_repository_concurrent_adds_get_unique_ids(repository):
    def worker():
        for index in range(50):
            repository.add(User(f"user{index}", "u@b.com"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [user.id for user in repository.list()]
    assert len(ids) == 400
    assert sorted(ids) == list(range(1, 401))


# ---------- service ----------
def test_create_ignores_client_id_and_stores_fields(service):
    user = _create(service, details="likes tea")
    fetched = service.get_user(user.id)
    assert isinstance(fetched, Success)
    assert (fetched.value.name, fetched.value.email, fetched.value.details) == (
        "Ann",
        "ann@example.com",
        "likes tea",
    )


def test_create_result_is_marked_created(service):
    result = service.create_user("Ann", "ann@example.com")
    assert isinstance(result, Success)
    assert result.created is True


@pytest.mark.parametrize(
    "name, email, message",
    [
        ("", "a@b.com", "Name is required."),
        ("   ", "a@b.com", "Name is required."),
        ("Ann", "a@b", "Invalid email format."),
        ("Ann", None, "Invalid email format."),
    ],
)
def test_create_rejects_invalid_candidates(service, repository, name, email, message):
    assert service.create_user(name, email) == ValidationFailed(message)
    assert repository.count() == 0


def test_ids_increase_across_creates_after_delete(service):
    first = _create(service)
    second = _create(service, name="Bob")
    assert isinstance(service.delete_user(second.id), Success)
    third = _create(service, name="Cid")
    assert first.id < second.id < third.id


def test_list_defaults_and_paging(service):
    for name in ("A", "B", "C"):
        _create(service, name=name)
    assert [user.name for user in service.list_users()] == ["A", "B", "C"]
    assert [user.name for user in service.list_users(page=2, page_size=1)] == ["B"]
    assert [user.name for user in service.list_users(page=2, page_size=2)] == ["C"]
    assert service.list_users(page=5, page_size=2) == []


def test_list_page_zero_behaves_like_first_page(service):
    for name in ("A", "B", "C"):
        _create(service, name=name)
    assert [user.name for user in service.list_users(page=0, page_size=2)] == ["A", "B"]
    assert [user.name for user in service.list_users(page=-3, page_size=2)] == ["A", "B"]


def test_get_unknown_user_is_not_found(service):
    assert service.get_user(42) == NotFound()


def test_update_overwrites_fields_and_keeps_id(service):
    user = _create(service, details="old")
    result = service.update_user(user.id, "Annie", "annie@example.com", None)
    assert isinstance(result, Success)
    assert result.created is False
    assert result.value.id == user.id
    assert (result.value.name, result.value.email, result.value.details) == ("Annie", "annie@example.com", None)


def test_update_unknown_user_is_not_found_before_validation(service):
    assert service.update_user(7, "", "bad") == NotFound()


def test_update_with_empty_name_leaves_record_unmodified(service):
    user = _create(service, details="keep")
    assert service.update_user(user.id, "", "new@example.com", "changed") == ValidationFailed("Name is required.")
    stored = service.get_user(user.id).value
    assert (stored.name, stored.email, stored.details) == ("Ann", "ann@example.com", "keep")


def test_delete_then_get_is_not_found(service):
    user = _create(service)
    assert service.delete_user(user.id) == Success()
    assert service.get_user(user.id) == NotFound()
    assert service.delete_user(user.id) == NotFound()


def test_explicit_zero_page_size_default_is_kept(repository):
    service = UserService(repository, default_page=1, default_page_size=0)
    repository.add(User("A", "a@b.com"))
    assert service.list_users() == []
    assert [user.name for user in service.list_users(page_size=1)] == ["A"]


def test_repository_interface_requires_full_contract():
    from user_management.adapters.base import IRepository

    class AddOnly(IRepository):
        def add(self, data):
            pass

        def list(self):
            return []

    with pytest.raises(TypeError):
        AddOnly()
    assert isinstance(UserRepository(), IRepository)
