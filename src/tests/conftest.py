"""Pytest configuration and fixtures shared by the test suite."""

import pytest

from src.models.material import Material
from src.utils.config import reset_config


class RecordingNotifier:
    """Notifier double that records every message."""

    def __init__(self):
        self.successes = []
        self.errors = []

    def success(self, message):
        self.successes.append(message)

    def error(self, message):
        self.errors.append(message)


class FakeMaterialService:
    """In-memory stand-in for MaterialService.

    Mutations are applied to ``materials`` like a server would, and each
    call is recorded in ``calls``. Set ``fail_with`` to an exception to
    make the next calls raise it, or assign canned results to
    ``create_result`` / ``update_result`` to override the server echo.
    """

    def __init__(self, materials=None):
        self.materials = list(materials or [])
        self.calls = []
        self.fail_with = None
        self.create_result = None
        self.update_result = None
        self._next_id = 100

    def _maybe_fail(self):
        if self.fail_with is not None:
            raise self.fail_with

    def get_all(self):
        self.calls.append(("get_all",))
        self._maybe_fail()
        return [m.copy() for m in self.materials]

    def create(self, draft):
        self.calls.append(("create", draft.to_dict()))
        self._maybe_fail()
        if self.create_result is not None:
            created = self.create_result
        else:
            self._next_id += 1
            created = Material(id=self._next_id, name=draft.name, is_active=draft.is_active)
        self.materials.append(created.copy())
        return created

    def update(self, material_id, material):
        self.calls.append(("update", material_id, material.to_dict()))
        self._maybe_fail()
        updated = self.update_result if self.update_result is not None else material.copy()
        self.materials = [updated.copy() if m.id == material_id else m for m in self.materials]
        return updated

    def delete(self, material_id):
        self.calls.append(("delete", material_id))
        self._maybe_fail()
        self.materials = [m for m in self.materials if m.id != material_id]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Give every test a fresh configuration singleton with English messages."""
    monkeypatch.delenv("MATERIALS_ADMIN_ENV", raising=False)
    monkeypatch.delenv("MATERIALS_ADMIN_LANGUAGE", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_materials():
    """Provide three materials in server order."""
    return [
        Material(id=1, name="Copper", is_active=True, alloys_count=4),
        Material(id=2, name="Aluminium", is_active=False, alloys_count=0),
        Material(id=3, name="Steel", is_active=True, alloys_count=12),
    ]


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def fake_service(sample_materials):
    return FakeMaterialService(sample_materials)


@pytest.fixture
def make_service(sample_materials):
    """Factory for fresh fake services seeded with the sample materials."""

    def _make(materials=None):
        return FakeMaterialService(sample_materials if materials is None else materials)

    return _make
