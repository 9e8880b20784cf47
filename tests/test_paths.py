import dataclasses
from pathlib import Path

import pytest

from marketdesk.paths import DataPaths, data_paths


def test_default_directory():
    paths = data_paths()
    assert paths.products == Path("data") / "Products.txt"
    assert paths.users == Path("data") / "Users.txt"


def test_file_names(tmp_path):
    paths = data_paths(tmp_path)
    assert paths.carts == tmp_path / "Carts.txt"
    assert paths.transactions == tmp_path / "Transactions.txt"
    assert paths.cheques == tmp_path / "Cheques.txt"
    assert paths.last_logged == tmp_path / "LastData.txt"
    assert paths.orders == tmp_path / "Orders.txt"
    assert paths.refunds == tmp_path / "Refunds.txt"


def test_all_paths_share_directory_and_are_distinct(tmp_path):
    paths = data_paths(tmp_path)
    values = [getattr(paths, f.name) for f in dataclasses.fields(DataPaths)]
    assert all(p.parent == tmp_path for p in values)
    assert len(set(values)) == len(values)


def test_accepts_string_directory(tmp_path):
    assert data_paths(str(tmp_path)) == data_paths(tmp_path)


def test_paths_are_frozen(tmp_path):
    paths = data_paths(tmp_path)
    with pytest.raises(dataclasses.FrozenInstanceError):
        paths.users = tmp_path / "other.txt"
    assert paths.users == tmp_path / "Users.txt"