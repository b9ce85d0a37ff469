"""Concurrent writers never overwrite each other's checked state."""

import threading
from datetime import datetime

import pytest

from salon.domain.errors import ValidationError
from salon.operations import appointments, customers


def _paused(original, thread_name: str, read_done: threading.Event, proceed: threading.Event):
    """Wraps a repository read so the named thread stops right after it."""

    def wrapper(*args, **kwargs):
        result = original(*args, **kwargs)
        if threading.current_thread().name == thread_name:
            read_done.set()
            proceed.wait(timeout=5)
        return result

    return wrapper


def _run(target, name: str, errors: list) -> threading.Thread:
    def body():
        try:
            target()
        except Exception as e:
            errors.append(e)

    thread = threading.Thread(target=body, name=name)
    thread.start()
    return thread


@pytest.fixture
def gate():
    return threading.Event(), threading.Event()


def test_edit_does_not_revert_concurrent_completion(container, cut, monkeypatch, gate):
    read_done, proceed = gate
    booked = appointments.create_appointment("ゲスト", datetime(2024, 3, 1, 10, 0), [{"id": cut.id}])
    monkeypatch.setattr(
        container.appointments,
        "get_by_id",
        _paused(container.appointments.get_by_id, "editor", read_done, proceed),
    )
    errors = []

    editor = _run(lambda: appointments.update_appointment(booked.id, {"note": "前髪短め"}), "editor", errors)
    assert read_done.wait(timeout=5)
    completer = _run(lambda: appointments.complete_appointment(booked.id), "completer", errors)

    completer.join(timeout=0.2)
    assert completer.is_alive()
    proceed.set()
    editor.join(timeout=5)
    completer.join(timeout=5)

    assert errors == []
    final = appointments.get_appointment(booked.id)
    assert final.status == "completed"
    assert final.note == "前髪短め"


def test_concurrent_registrations_keep_phone_unique(container, monkeypatch, gate):
    read_done, proceed = gate
    monkeypatch.setattr(
        container.customers,
        "get_by_phone",
        _paused(container.customers.get_by_phone, "first", read_done, proceed),
    )
    errors = []

    first = _run(lambda: customers.create_customer("山田 花子", "090-1234-5678"), "first", errors)
    assert read_done.wait(timeout=5)
    second = _run(lambda: customers.create_customer("山田 太郎", "090-1234-5678"), "second", errors)

    second.join(timeout=0.2)
    proceed.set()
    first.join(timeout=5)
    second.join(timeout=5)

    assert [type(e) for e in errors] == [ValidationError]
    registered = customers.list_customers()
    assert [c.customer.name for c in registered] == ["山田 花子"]
