"""Unit tests for the entity models.

Covers construction defaults, the member/team relationship kept in sync on
both sides, and the foreign key enforced by the database.
"""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from querylab.core.database.entities import Hello, Member, Product, Team


class TestHello:
    async def test_identifier_generated_on_flush(self, session):
        hello = Hello()
        assert hello.id is None

        session.add(hello)
        await session.flush()

        assert hello.id is not None
        assert await session.get(Hello, hello.id) is hello


class TestProduct:
    def test_defaults(self):
        product = Product()

        assert product.name is None
        assert product.price == 0

    def test_keyword_construction(self, sample_product_data):
        product = Product(**sample_product_data)

        assert product.name == "keyboard"
        assert product.price == 30000
        assert repr(product) == "Product(id=None, name=keyboard, price=30000)"


class TestMember:
    def test_defaults(self):
        member = Member()

        assert member.username is None
        assert member.age == 0
        assert member.team is None

    def test_construction(self, sample_member_data):
        member = Member(**sample_member_data)

        assert member.username == "member1"
        assert member.age == 10
        assert repr(member) == "Member(id=None, username=member1, age=10)"

    def test_constructed_with_team_joins_collection(self):
        team = Team(name="teamA")

        member = Member(username="member1", age=10, team=team)

        assert member.team is team
        assert team.members == [member]

    def test_change_team_updates_both_sides(self):
        team_a = Team(name="teamA")
        team_b = Team(name="teamB")
        member = Member(username="member1", age=10, team=team_a)

        member.change_team(team_b)

        assert member.team is team_b
        assert member not in team_a.members
        assert team_b.members == [member]

    async def test_team_id_set_on_flush(self, session):
        team = Team(name="teamA")
        member = Member(username="member1", age=10, team=team)
        session.add_all([team, member])

        await session.flush()

        assert member.team_id == team.id


class TestTeam:
    async def test_members_loaded_in_id_order(self, session, seeded):
        team = await session.get(Team, seeded.team_b.id)

        assert [m.username for m in team.members] == ["member3", "member4"]

    async def test_delete_with_members_is_rejected(self, session, seeded):
        await session.delete(seeded.team_a)

        with pytest.raises(IntegrityError):
            await session.flush()

    async def test_delete_without_members(self, session):
        team = Team(name="empty")
        session.add(team)
        await session.flush()

        await session.delete(team)
        await session.flush()

        assert await session.get(Team, team.id) is None
