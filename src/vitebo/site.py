# src/vitebo/site.py
"""
Site metadata for Vitebo.

Classes:
    Site: Name, contact e-mail and homepage listing sizes
    Social: A social network profile link
"""
from dataclasses import dataclass, asdict
from typing import Dict, Any, Tuple


@dataclass(frozen=True)
class Site:
    """
    Static metadata describing the site.

    Attributes:
        name (str): Site / author name shown in titles
        email (str): Contact e-mail address
        num_posts_on_homepage (int): Latest posts listed on the home page
        num_works_on_homepage (int): Work entries listed on the home page
        num_projects_on_homepage (int): Projects listed on the home page
    """
    name: str
    email: str
    num_posts_on_homepage: int
    num_works_on_homepage: int
    num_projects_on_homepage: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Social:
    """A social profile link (``name`` is the network, ``href`` the URL)."""
    name: str
    href: str


SITE = Site(
    name="Vitebo",
    email="vitebo@hotmail.com",
    num_posts_on_homepage=3,
    num_works_on_homepage=2,
    num_projects_on_homepage=3,
)

SOCIALS: Tuple[Social, ...] = (
    Social(name="github", href="https://github.com/vitebo"),
    Social(name="linkedin", href="https://www.linkedin.com/in/andre-vitebo/"),
)
