"""
Database entity models.

Each module holds one table:

- hello: Demo record carrying only an identifier
- teams: Teams (one side of member/team)
- members: Members, optionally belonging to a team
- products: Products with a name and a price
"""

from . import hello, members, products, teams
from .hello import Hello
from .members import Member
from .products import Product
from .teams import Team

__all__ = [
    "Hello",
    "Member",
    "Product",
    "Team",
    "hello",
    "members",
    "products",
    "teams",
]
