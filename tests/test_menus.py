import io
import sys

import pytest

from bankcli.client import ClientRepository, new_client
from bankcli.menus import (
    login_screen,
    main,
    main_menu,
    manage_users_menu,
    record_login,
    run,
    transaction_menu,
)
from bankcli.session import Session
from bankcli.user import Permission, UserRepository, new_user
from bankcli.validate import Prompter

PASSWORD = "password"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def make_session(workdir, text, permissions=-1):
    session = Session(
        clients=ClientRepository(workdir / "clients.txt"),
        users=UserRepository(workdir / "users.txt"),
        prompter=Prompter(io.StringIO(text), io.StringIO()),
    )
    password = PASSWORD
    user = new_user("alice")
    user.first_name = "Alice"
    user.last_name = "Smith"
    user.email = "alice@example.com"
    user.phone = "555"
    user.password = password
    user.permissions = permissions
    session.users.save(user)
    client = new_client("A100")
    client.first_name = "Bob"
    client.last_name = "Jones"
    client.email = "bob@example.com"
    client.phone = "555"
    client.pin_code = "1234"
    client.balance = 100.0
    session.clients.save(client)
    return session


def output(session):
    return session.prompter.stdout.getvalue()


def login_as_alice(session):
    session.current_user = session.users.find("alice")


def test_record_login_appends_user_line(workdir):
    session = make_session(workdir, "")
    login_as_alice(session)
    log = workdir / "log.txt"
    record_login(session, log)
    record_login(session, log)
    lines = log.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("alice#//#password#//#-1")


def test_transaction_menu_deposit(workdir):
    session = make_session(workdir, "1\nA100\n50\n2\n")
    transaction_menu(session)
    assert session.clients.find("A100").balance == 150.0


def test_transaction_menu_withdraw(workdir):
    session = make_session(workdir, "2\nA100\n30\n2\n")
    transaction_menu(session)
    assert session.clients.find("A100").balance == 70.0


def test_transaction_menu_total_balance_and_back(workdir):
    session = make_session(workdir, "3\n1\n4\n")
    transaction_menu(session)
    text = output(session)
    assert "This Is Total Balance Screen" in text
    assert text.count("TransactionScreen") == 2


def test_manage_users_find(workdir):
    session = make_session(workdir, "5\nalice\n2\n")
    manage_users_menu(session)
    assert "User Found :-)" in output(session)


def test_manage_users_non_number_leaves(workdir):
    session = make_session(workdir, "abc\n")
    manage_users_menu(session)
    text = output(session)
    assert text.count("ManageUsers Screen") == 1
    assert "User Card" not in text


def test_manage_users_delete(workdir):
    session = make_session(workdir, "3\nalice\ny\n2\n")
    manage_users_menu(session)
    assert session.users.exists("alice") is False


def test_main_menu_logout_records_login(workdir):
    session = make_session(workdir, "8\n")
    login_as_alice(session)
    main_menu(session)
    assert session.current_user.is_empty()
    log = (workdir / "RejesterFile.txt").read_text(encoding="utf-8")
    assert "alice#//#password#//#-1" in log


def test_main_menu_denied_without_permission(workdir):
    session = make_session(workdir, "1\n2\n", permissions=0)
    login_as_alice(session)
    main_menu(session)
    text = output(session)
    assert "DisAllowed To Enter To This File" in text
    assert "TotalBalance Is" not in text


def test_main_menu_lists_clients_and_returns(workdir):
    session = make_session(workdir, "1\n1\n8\n", permissions=int(Permission.LIST_CLIENTS))
    login_as_alice(session)
    main_menu(session)
    text = output(session)
    assert "TotalBalance Is" in text
    assert text.count("Main Screan") == 2
    log_lines = (workdir / "RejesterFile.txt").read_text(encoding="utf-8").splitlines()
    assert len(log_lines) == 2


def test_main_menu_rejects_out_of_range_choice(workdir):
    session = make_session(workdir, "9\n8\n")
    login_as_alice(session)
    main_menu(session)
    assert "Number is not within range" in output(session)
    assert session.current_user.is_empty()


def test_main_menu_transactions_then_logout(workdir):
    session = make_session(workdir, "6\n1\nA100\n5\n2\n8\n")
    login_as_alice(session)
    main_menu(session)
    assert session.clients.find("A100").balance == 105.0
    assert session.current_user.is_empty()


def test_login_screen_blocks_after_four_failures(workdir):
    session = make_session(workdir, "x y\n" * 4 + "\n")
    login_screen(session)
    assert session.failed_logins == 4
    assert "You Are Blocked" in output(session)


def test_login_screen_success_then_blocked(workdir):
    session = make_session(workdir, "alice password\n8\n" + "x y\n" * 4 + "\n")
    login_screen(session)
    assert session.current_user.is_empty()
    log = (workdir / "RejesterFile.txt").read_text(encoding="utf-8")
    assert "alice#//#password" in log
    assert output(session).count("This Is Invalid UserName Or Passowrd") == 4


def test_run_returns_zero_at_end_of_input(workdir):
    session = make_session(workdir, "")
    assert run(session) == 0


def test_run_returns_one_when_blocked(workdir):
    session = make_session(workdir, "x y\n" * 4)
    assert run(session) == 1


def test_main_blocks_unknown_users(workdir, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x y\n" * 4))
    status = main(
        ["--clients", str(workdir / "c.txt"), "--users", str(workdir / "u.txt")]
    )
    assert status == 1
    assert "You Are Blocked" in capsys.readouterr().out