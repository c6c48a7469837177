"""Unit tests for the demo record repository."""

from __future__ import annotations

import pytest

from querylab.core.database.entities import Hello

pytestmark = pytest.mark.asyncio


async def test_create_then_fetch(repos):
    hello = await repos.hello.create(Hello())

    found = await repos.hello.get_by_id(hello.id)

    assert found is not None
    assert found.id == hello.id


async def test_identifiers_are_distinct(repos):
    first = await repos.hello.create(Hello())
    second = await repos.hello.create(Hello())

    assert first.id != second.id
    assert await repos.hello.count() == 2


async def test_fetch_missing(repos):
    assert await repos.hello.get_by_id(999) is None
