import pytest

from bankcli.user import (
    DuplicateUserError,
    EmptyUserError,
    Permission,
    User,
    UserRecordError,
    UserRepository,
    empty_user,
    format_user_line,
    new_user,
    parse_user_line,
)

password = "password"


def make_user(name="ann", permissions=3):
    user = new_user(name)
    user.first_name = "Ann"
    user.last_name = "Lee"
    user.email = "ann@example.com"
    user.phone = "555"
    user.password = password
    user.permissions = permissions
    return user


@pytest.fixture
def repo(tmp_path):
    return UserRepository(tmp_path / "Users.txt")


def test_format_user_line():
    user = User("Ann", "Lee", "ann@example.com", "555", "ann", password, 3)
    assert format_user_line(user) == "Ann#//#Lee#//#ann@example.com#//#555#//#ann#//#password#//#3"


def test_parse_round_trip():
    user = make_user(permissions=-1)
    parsed = parse_user_line(format_user_line(user))
    assert parsed == user
    assert not parsed.is_empty()


def test_parse_custom_separator():
    user = make_user()
    assert parse_user_line(format_user_line(user, ","), ",") == user


def test_parse_short_line_raises():
    with pytest.raises(UserRecordError):
        parse_user_line("a#//#b#//#c")


def test_parse_bad_permissions_raises():
    with pytest.raises(UserRecordError):
        parse_user_line("a#//#b#//#c#//#d#//#e#//#f#//#x")


def test_empty_user_is_empty():
    assert empty_user().is_empty()
    assert not new_user("bob").is_empty()


def test_has_permission_bits():
    user = make_user(permissions=Permission.LIST_CLIENTS | Permission.FIND_CLIENT)
    assert user.has_permission(Permission.LIST_CLIENTS)
    assert user.has_permission(Permission.FIND_CLIENT)
    assert not user.has_permission(Permission.MANAGE_USERS)


def test_full_access_mask_grants_everything():
    user = make_user(permissions=Permission.ALL)
    assert all(user.has_permission(p) for p in Permission)


def test_all_permission_always_granted():
    assert make_user(permissions=0).has_permission(Permission.ALL)


def test_missing_file_is_empty(repo):
    assert repo.all() == []
    assert repo.find("ann") is None


def test_save_new_then_find(repo):
    user = make_user()
    repo.save(user)
    assert repo.exists("ann")
    assert repo.find("ann") == user
    assert repo.find("ann", password) == user


def test_find_with_wrong_password(repo):
    repo.save(make_user())
    wrong_password = "secret"
    assert repo.find("ann", wrong_password) is None


def test_save_duplicate_raises(repo):
    repo.save(make_user())
    with pytest.raises(DuplicateUserError):
        repo.save(make_user())
    assert len(repo.all()) == 1


def test_save_empty_raises(repo):
    with pytest.raises(EmptyUserError):
        repo.save(empty_user())


def test_save_updates_existing(repo):
    user = make_user()
    repo.save(user)
    repo.save(make_user("bob"))
    user.email = "new@example.com"
    user.permissions = 64
    repo.save(user)
    stored = repo.find("ann")
    assert stored.email == "new@example.com"
    assert stored.permissions == 64
    assert [u.user_name for u in repo.all()] == ["ann", "bob"]


def test_delete(repo):
    repo.save(make_user())
    repo.save(make_user("bob"))
    assert repo.delete("ann") is True
    assert not repo.exists("ann")
    assert [u.user_name for u in repo.all()] == ["bob"]


def test_delete_missing(repo):
    repo.save(make_user())
    assert repo.delete("zed") is False
    assert len(repo.all()) == 1