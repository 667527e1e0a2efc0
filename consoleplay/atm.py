"""A console cash machine backed by a delimited text file of clients."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

Reader = Callable[[str], str]
Writer = Callable[[str], None]

DELIMITER = "#//#"
DEFAULT_CLIENTS_FILE = "Clients.txt"

QUICK_WITHDRAW_AMOUNTS = {1: 20, 2: 50, 3: 100, 4: 200, 5: 400, 6: 600, 7: 800, 8: 1000}
QUICK_WITHDRAW_EXIT = 9

CONFIRM_PROMPT = "\nAre you sure do you want perform this transaction? y/n? "
BACK_PROMPT = "\nPress any key to go back to Main Menue..."
CONTINUE_PROMPT = "\nPress any key to continue...\n"
EXCEEDS_MESSAGE = "\n\nThe amount exceeds your balance, so make another choice!\n"
INVALID_LOGIN_MESSAGE = "Invalid Account Number/ Pin Code!\n"

_WIDE_RULE = "========================================\n"
_RULE = "====================================\n"
_LOGIN_RULE = "-------------------------------\n"


class InsufficientBalanceError(ValueError):
    """Raised when a withdrawal is not below the current balance."""


@dataclass
class Client:
    account_number: str
    pin_code: str
    name: str
    phone: str
    balance: int = 0


def split_fields(text: str, delimiter: str = DELIMITER) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty pieces."""
    return [piece for piece in text.split(delimiter) if piece]


def parse_client(line: str, separator: str = DELIMITER) -> Client:
    """Build a client from one line of the clients file."""
    fields = split_fields(line.rstrip("\r\n"), separator)
    if len(fields) < 5:
        raise ValueError(f"malformed client record: {line!r}")
    account_number, pin_code, name, phone, balance = fields[:5]
    return Client(account_number, pin_code, name, phone, int(float(balance)))


def format_client(client: Client, separator: str = DELIMITER) -> str:
    """Render a client as one line of the clients file."""
    return separator.join(
        [client.account_number, client.pin_code, client.name, client.phone, str(client.balance)]
    )


class ClientStore:
    """Clients kept one per line in a text file."""

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> list[Client]:
        """Read every client; a missing file holds none."""
        try:
            with self.path.open(encoding="utf-8") as handle:
                return [parse_client(line) for line in handle]
        except FileNotFoundError:
            return []

    def save(self, clients: Iterable[Client]) -> None:
        """Replace the file's contents with ``clients``."""
        with self.path.open("w", encoding="utf-8") as handle:
            for client in clients:
                handle.write(format_client(client) + "\n")

    def authenticate(self, account_number: str, pin_code: str) -> Client | None:
        """Return the client with these credentials, or None."""
        for client in self.load():
            if client.account_number == account_number and client.pin_code == pin_code:
                return client
        return None

    def update_balance(self, client: Client) -> None:
        """Store ``client``'s balance on every record with its account number."""
        clients = self.load()
        for stored in clients:
            if stored.account_number == client.account_number:
                stored.balance = client.balance
        self.save(clients)


class Session:
    """Transactions of one logged-in client."""

    def __init__(self, store: ClientStore, client: Client):
        self.store = store
        self.client = client

    def can_withdraw(self, amount: int) -> bool:
        """A withdrawal must stay strictly below the balance."""
        return amount < self.client.balance

    def withdraw(self, amount: int) -> int:
        """Take ``amount`` from the balance, save it and return the new balance."""
        if not self.can_withdraw(amount):
            raise InsufficientBalanceError("the amount exceeds your balance")
        self.client.balance -= amount
        self.store.update_balance(self.client)
        return self.client.balance

    def deposit(self, amount: int) -> int:
        """Add ``amount`` to the balance, save it and return the new balance."""
        if amount < 0:
            raise ValueError("deposit amount must not be negative")
        self.client.balance += amount
        self.store.update_balance(self.client)
        return self.client.balance

    def balance(self) -> int:
        return self.client.balance


def quick_withdraw_amount(option: int) -> int | None:
    """Return the amount for a quick-withdraw option, or None for exit."""
    if option == QUICK_WITHDRAW_EXIT:
        return None
    try:
        return QUICK_WITHDRAW_AMOUNTS[option]
    except KeyError:
        raise ValueError(f"no quick-withdraw option {option}") from None


def _read_int(read: Reader, prompt: str, accept: Callable[[int], bool] = lambda n: True) -> int:
    while True:
        try:
            number = int(read(prompt).strip())
        except ValueError:
            continue
        if accept(number):
            return number


def _confirmed(read: Reader) -> bool:
    return read(CONFIRM_PROMPT).strip()[:1].lower() == "y"


def _withdraw_with_confirmation(session: Session, amount: int, read: Reader, write: Writer) -> None:
    if _confirmed(read):
        session.withdraw(amount)
        write(f"\nDone Successfully. New Balance is: {session.balance()}\n")


def _login(store: ClientStore, read: Reader, write: Writer) -> Client:
    invalid = False
    while True:
        write(f"{_LOGIN_RULE}\t Login Screen\n{_LOGIN_RULE}")
        if invalid:
            write(INVALID_LOGIN_MESSAGE)
        account_number = read("Enter Account Number: ").strip()
        pin_code = read("Enter Pin Code: ").strip()
        client = store.authenticate(account_number, pin_code)
        if client is not None:
            return client
        invalid = True


def _quick_withdraw(session: Session, read: Reader, write: Writer) -> None:
    while True:
        write(
            f"{_RULE}\t Quick Withdraw Screen\n{_RULE}"
            "\t[1] 20\t   [2] 50\n"
            "\t[3] 100\t   [4] 200\n"
            "\t[5] 400\t   [6] 600\n"
            "\t[7] 800\t   [8] 1000\n"
            "\t[9] Exit\n"
            f"{_RULE}"
            f"Your Balance is: {session.balance()}\n"
        )
        option = _read_int(read, "Choose what do you want withdraw form [1] to [8]? ")
        try:
            amount = quick_withdraw_amount(option)
        except ValueError:
            return
        if amount is None:
            return
        if not session.can_withdraw(amount):
            write(EXCEEDS_MESSAGE)
            read(CONTINUE_PROMPT)
            continue
        _withdraw_with_confirmation(session, amount, read, write)
        return


def _normal_withdraw(session: Session, read: Reader, write: Writer) -> None:
    while True:
        write(f"{_RULE}\t Normal Withdraw Screen\n{_RULE}")
        amount = _read_int(read, "\nEnter an amount multiple of 5's: ", lambda n: n % 5 == 0)
        if not session.can_withdraw(amount):
            write(EXCEEDS_MESSAGE)
            read(CONTINUE_PROMPT)
            continue
        _withdraw_with_confirmation(session, amount, read, write)
        return


def _deposit(session: Session, read: Reader, write: Writer) -> None:
    write(f"{_RULE}\t Deposite Screen\n{_RULE}")
    amount = _read_int(read, "\nEnter a positive Deposite Amount: ", lambda n: n >= 0)
    if _confirmed(read):
        session.deposit(amount)
        write(f"\nDone Successfully. New Balance is: {session.balance()}\n")


def _check_balance(session: Session, read: Reader, write: Writer) -> None:
    write(f"{_RULE}\t Check Balance Screen\n{_RULE}")
    write(f"Your Balance is: {session.balance()}\n")


_SCREENS = {
    1: _quick_withdraw,
    2: _normal_withdraw,
    3: _deposit,
    4: _check_balance,
}
_LOGOUT = 5


def _main_menu(session: Session, read: Reader, write: Writer) -> bool:
    """Serve the main menu; True means log out, False means stop."""
    while True:
        write(
            f"{_WIDE_RULE}\t ATM Main Menue Screen\n{_WIDE_RULE}"
            "\t [1] Quick Withdraw.\n"
            "\t [2] Normal Withdraw.\n"
            "\t [3] Deposite.\n"
            "\t [4] Check Balance.\n"
            "\t [5] Logout.\n"
            f"{_WIDE_RULE}"
        )
        option = _read_int(read, "Choose what do you want to do? [1 - 5]? ")
        if option == _LOGOUT:
            return True
        screen = _SCREENS.get(option)
        if screen is None:
            return False
        screen(session, read, write)
        read(BACK_PROMPT)


def run(store: ClientStore, read: Reader, write: Writer) -> None:
    """Serve clients until input runs out or an unknown menu option is chosen."""
    try:
        while True:
            client = _login(store, read, write)
            if not _main_menu(Session(store, client), read, write):
                return
    except EOFError:
        return


def main(argv=None) -> int:
    """Run the cash machine on the console."""
    parser = argparse.ArgumentParser(description="Console cash machine.")
    parser.add_argument(
        "clients_file",
        nargs="?",
        default=DEFAULT_CLIENTS_FILE,
        help="file holding one client record per line",
    )
    args = parser.parse_args(argv)
    try:
        run(ClientStore(args.clients_file), input, lambda text: print(text, end="", flush=True))
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())