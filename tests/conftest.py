from __future__ import annotations

import copy

import pytest
from PySide6.QtCore import QCoreApplication

import config
from grid_store import GridStore


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture()
def restore_config():
    saved = copy.deepcopy(config.con_dict)
    yield config.con_dict
    config.con_dict.clear()
    config.con_dict.update(saved)


@pytest.fixture()
def store(qapp) -> GridStore:
    return GridStore()


@pytest.fixture()
def recorder():
    """Collects signal emissions as tuples of their arguments."""
    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, *args):
            self.calls.append(args)

    return Recorder
