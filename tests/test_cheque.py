import pytest

from marketdesk.cheque import (
    Cheque,
    ChequeError,
    cheque_code_exists,
    latest_cheque_id,
)


def write_cheques(path, cheques):
    lines = [str(cheques[-1].id if cheques else -1), str(len(cheques))]
    lines += [cheque.save_data() for cheque in cheques]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def cheque_file(tmp_path):
    cheques = [
        Cheque(id=1, code="AAAAA", client_egn="EGN1", amount=10.0),
        Cheque(id=2, code="BBBBB", client_egn="EGN2", amount=20.0),
    ]
    return write_cheques(tmp_path / "Cheques.txt", cheques)


def test_is_authorized():
    cheque = Cheque(id=3, code="ABCDE", client_egn="EGN1", amount=25.0)
    assert cheque.is_authorized("EGN1")
    assert not cheque.is_authorized("EGN2")


def test_save_data_record():
    assert Cheque(id=3, code="ABCDE", client_egn="EGN1", amount=25.0).save_data() == "3:ABCDE:25.00:0"


def test_save_data_used_flag():
    cheque = Cheque(id=3, code="ABCDE", client_egn="EGN1", amount=25.0, used=True)
    assert cheque.save_data().endswith(":1")


def test_code_exists_round_trip(cheque_file):
    assert cheque_code_exists(cheque_file, "AAAAA")
    assert cheque_code_exists(cheque_file, "BBBBB")
    assert not cheque_code_exists(cheque_file, "ZZZZZ")


def test_code_exists_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        cheque_code_exists(tmp_path / "missing.txt", "AAAAA")


def test_latest_cheque_id(cheque_file):
    assert latest_cheque_id(cheque_file) == 2


def test_redeem_known_code_marks_used(cheque_file):
    cheque = Cheque(id=1, code="AAAAA", client_egn="EGN1", amount=10.0)
    cheque.redeem("AAAAA", "OTHER", cheque_file)
    assert cheque.used is True


def test_redeem_by_owner_marks_used(cheque_file):
    cheque = Cheque(id=9, code="NEWCD", client_egn="EGN9", amount=5.0)
    cheque.redeem("NEWCD", "EGN9", cheque_file)
    assert cheque.used is True


def test_redeem_wrong_details_raises(cheque_file):
    cheque = Cheque(id=9, code="NEWCD", client_egn="EGN9", amount=5.0)
    with pytest.raises(ChequeError, match="incorrect"):
        cheque.redeem("NEWCD", "EGN1", cheque_file)
    assert cheque.used is False


def test_redeem_twice_raises(cheque_file):
    cheque = Cheque(id=1, code="AAAAA", client_egn="EGN1", amount=10.0)
    cheque.redeem("AAAAA", "EGN1", cheque_file)
    with pytest.raises(ChequeError, match="already used"):
        cheque.redeem("AAAAA", "EGN1", cheque_file)