"""Tests for request-scoped use case construction."""

from concurrent.futures import ThreadPoolExecutor

from sqlalchemy.orm import Session

from noteswise.core import container
from noteswise.infrastructure.common.di import inject_use_case


def test_each_use_case_gets_its_own_session() -> None:
    build = inject_use_case(container.note_use_case)
    sessions = [Session() for _ in range(64)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        use_cases = list(pool.map(build, sessions))

    for session, use_case in zip(sessions, use_cases, strict=True):
        assert use_case.note_repository.db is session
        assert use_case.category_repository.db is session


def test_session_binding_is_released_after_build() -> None:
    inject_use_case(container.category_use_case)(Session())

    assert not container.db.overridden
