import pytest

from consoleplay.atm import (
    Client,
    ClientStore,
    InsufficientBalanceError,
    Session,
    format_client,
    parse_client,
    quick_withdraw_amount,
    run,
    split_fields,
)

LINE = "A100#//#1234#//#Jane Doe#//#000#//#1500"


def _clients():
    return [
        Client("A100", "1234", "Jane Doe", "000", 1500),
        Client("B200", "4321", "John Doe", "111", 300),
    ]


@pytest.fixture
def store(tmp_path):
    store = ClientStore(tmp_path / "clients.txt")
    store.save(_clients())
    return store


def _scripted(answers):
    remaining = iter(answers)

    def read(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def _collect():
    chunks = []
    return chunks, chunks.append


def test_split_fields_drops_empty_pieces():
    assert split_fields("a#//#b#//##//#c") == ["a", "b", "c"]


def test_split_fields_custom_delimiter():
    assert split_fields(",x,,y,", ",") == ["x", "y"]


def test_parse_client_reads_fields():
    client = parse_client(LINE + "\n")
    assert client == Client("A100", "1234", "Jane Doe", "000", 1500)


def test_parse_client_truncates_fractional_balance():
    client = parse_client("A100#//#1234#//#Jane#//#000#//#12.75")
    assert client.balance == 12


def test_parse_client_rejects_short_record():
    with pytest.raises(ValueError):
        parse_client("A100#//#1234#//#Jane")


def test_format_client_matches_file_format():
    assert format_client(Client("A100", "1234", "Jane Doe", "000", 1500)) == LINE


def test_format_parse_round_trip():
    for client in _clients():
        assert parse_client(format_client(client)) == client


def test_load_missing_file_is_empty(tmp_path):
    assert ClientStore(tmp_path / "absent.txt").load() == []


def test_save_load_round_trip(store):
    assert store.load() == _clients()


def test_saved_file_has_one_line_per_client(store):
    lines = store.path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == LINE
    assert len(lines) == len(_clients())


def test_authenticate(store):
    assert store.authenticate("B200", "4321") == _clients()[1]
    assert store.authenticate("B200", "1234") is None
    assert store.authenticate("Z999", "4321") is None


def test_update_balance_only_touches_matching_account(store):
    changed = Client("A100", "1234", "Jane Doe", "000", 42)
    store.update_balance(changed)
    loaded = store.load()
    assert loaded[0].balance == 42
    assert loaded[1] == _clients()[1]


def test_session_withdraw_persists(store):
    session = Session(store, store.authenticate("A100", "1234"))
    new_balance = session.withdraw(100)
    assert new_balance == 1500 - 100
    assert session.balance() == new_balance
    assert store.load()[0].balance == new_balance


def test_withdraw_must_stay_below_balance(store):
    session = Session(store, store.authenticate("B200", "4321"))
    assert session.can_withdraw(299)
    assert not session.can_withdraw(300)
    with pytest.raises(InsufficientBalanceError):
        session.withdraw(300)
    assert store.load()[1].balance == 300


def test_deposit_persists_and_rejects_negative(store):
    session = Session(store, store.authenticate("B200", "4321"))
    assert session.deposit(50) == 300 + 50
    assert store.load()[1].balance == 300 + 50
    with pytest.raises(ValueError):
        session.deposit(-1)


def test_quick_withdraw_amounts():
    assert quick_withdraw_amount(1) == 20
    assert quick_withdraw_amount(8) == 1000
    assert quick_withdraw_amount(9) is None
    with pytest.raises(ValueError):
        quick_withdraw_amount(10)


def test_run_quick_withdraw_after_failed_login(store):
    chunks, write = _collect()
    read = _scripted(["A100", "0000", "A100", "1234", "1", "3", "y", ""])
    run(store, read, write)
    output = "".join(chunks)
    assert "Invalid Account Number/ Pin Code!" in output
    assert store.load()[0].balance == 1500 - 100


def test_run_declined_deposit_keeps_balance(store):
    chunks, write = _collect()
    read = _scripted(["A100", "1234", "3", "500", "n", ""])
    run(store, read, write)
    assert store.load()[0].balance == 1500


def test_run_check_balance(store):
    chunks, write = _collect()
    run(store, _scripted(["A100", "1234", "4", ""]), write)
    output = "".join(chunks)
    assert "Check Balance Screen" in output
    assert "Your Balance is: 1500" in output
    assert store.load() == _clients()


def test_run_normal_withdraw_requires_multiple_of_five(store):
    chunks, write = _collect()
    read = _scripted(["B200", "4321", "2", "7", "10", "y", ""])
    run(store, read, write)
    assert store.load()[1].balance == 300 - 10


def test_run_normal_withdraw_over_balance_asks_again(store):
    chunks, write = _collect()
    read = _scripted(["B200", "4321", "2", "300", "", "20", "y", ""])
    run(store, read, write)
    assert "The amount exceeds your balance" in "".join(chunks)
    assert store.load()[1].balance == 300 - 20


def test_run_logout_returns_to_login(store):
    chunks, write = _collect()
    read = _scripted(["A100", "1234", "5", "B200", "4321", "3", "40", "y", ""])
    run(store, read, write)
    assert "".join(chunks).count("Login Screen") == 2
    assert store.load()[1].balance == 300 + 40
    assert store.load()[0].balance == 1500


def test_run_unknown_menu_option_stops(store):
    chunks, write = _collect()
    read = _scripted(["A100", "1234", "7", "3", "100", "y"])
    run(store, read, write)
    assert "Deposite Screen" not in "".join(chunks)
    assert store.load()[0].balance == 1500