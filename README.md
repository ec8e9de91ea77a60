# bankcli

A small console bank. You log in as a user and, depending on your
permissions, list, add, delete, update and find clients, make deposits and
withdrawals, and manage other users.

## Installing

    pip install .

## Running

    bankcli

Options:

- `--clients PATH`: the clients file (default `Yarb.txt`)
- `--users PATH`: the users file (default `Users.txt`)

This opens the login screen. Each time the main menu is shown, a
time-stamped line naming the logged-in user is appended to
`RejesterFile.txt` in the current directory. After the fourth wrong login
the program reports that you are blocked, waits for one line of input and
exits with status 1; it exits with status 0 when input runs out.

The main menu offers: show client list, add new client, delete client,
update client info, find client, transactions (deposit, withdraw) and
manage users (list, add, delete, update, find), and log out. Deposit and
withdrawal amounts are read as whole numbers. A screen you lack the
permission for shows an access-denied message instead.

## Data files

Each line is one record, with fields separated by `#//#`.

Clients:

    FirstName#//#LastName#//#Email#//#Phone#//#AccountNumber#//#PinCode#//#Balance

Users:

    FirstName#//#LastName#//#Email#//#Phone#//#UserName#//#Password#//#Permissions

To get started, put at least one user line in the users file, for example:

    Ada#//#Admin#//#ada@example.com#//#none#//#admin#//#password#//#-1

and log in with user name `admin` and password `password`.

## Permissions

`Permissions` is a bit mask built from `bankcli.user.Permission`:

| Value | Access            |
|-------|-------------------|
| -1    | everything        |
| 1     | show client list  |
| 2     | add new client    |
| 4     | delete client     |
| 8     | update client     |
| 16    | find client       |
| 32    | transactions      |
| 64    | manage users      |

## Using the library

The record types and repositories work without the console:

```python
from bankcli.client import ClientRepository, new_client

repo = ClientRepository("Yarb.txt")
client = new_client("A100")
client.first_name = "Sam"
client.balance = 50.0
repo.save(client)
print(repo.total_balances())
```

`ClientRepository.save` raises `DuplicateAccountError` when the account
number is already stored; `UserRepository` in `bankcli.user` works the same
way for users and raises `DuplicateUserError`. `bankcli.dates.Date` holds
date arithmetic and calendars, and `bankcli.textutil` holds string helpers.

## What it does not do

- Passwords and PIN codes are stored, shown and logged in plain text; there
  is no hashing.
- The "Total Balance" transaction entry only prints a heading; the total of
  all balances is shown on the client list screen.
- Records are plain text files with no locking, so only one program should
  use them at a time.

## Tests

    pip install .[test]
    pytest