"""
Tests for site metadata constants.
"""
import dataclasses

import pytest

from vitebo.site import SITE, SOCIALS, Site


class TestSite:
    """Test the Site record and SITE constant."""

    def test_site_values(self):
        assert SITE.name == "Vitebo"
        assert SITE.email == "vitebo@hotmail.com"
        assert SITE.num_posts_on_homepage == 3
        assert SITE.num_works_on_homepage == 2
        assert SITE.num_projects_on_homepage == 3

    def test_to_dict(self):
        data = SITE.to_dict()
        assert data["name"] == "Vitebo"
        assert Site(**data) == SITE

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            SITE.name = "Other"


class TestSocials:
    """Test the SOCIALS links."""

    def test_networks_in_order(self):
        assert [s.name for s in SOCIALS] == ["github", "linkedin"]

    def test_links_are_https(self):
        for social in SOCIALS:
            assert social.href.startswith("https://")
