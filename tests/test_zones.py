# tests/test_zones.py
"""Tests for the fixed branding zones."""

import pytest


class TestZonesFor:
    def test_regular_page_has_two_zones(self):
        from slide_scrub.models.zones import zones_for

        assert len(zones_for(False)) == 2

    def test_last_page_adds_one_zone(self):
        from slide_scrub.models.zones import LAST_PAGE_OUTRO, zones_for

        zones = zones_for(True)
        assert len(zones) == 3
        assert zones[-1] == LAST_PAGE_OUTRO

    def test_base_zones_are_a_stable_prefix(self):
        from slide_scrub.models.zones import zones_for

        assert zones_for(True)[:2] == zones_for(False)

    def test_calls_do_not_share_state(self):
        from slide_scrub.models.zones import zones_for

        zones_for(False).append(zones_for(True)[-1])
        assert len(zones_for(False)) == 2

    def test_all_zones_within_page(self):
        from slide_scrub.models.zones import zones_for

        for zone in zones_for(True):
            assert 0 <= zone.x and zone.x + zone.w <= 100
            assert 0 <= zone.y and zone.y + zone.h <= 100


class TestZone:
    def test_rejects_zone_outside_page(self):
        from slide_scrub.models.zones import Zone

        with pytest.raises(ValueError):
            Zone(90, 0, 20, 10)

    def test_rejects_empty_zone(self):
        from slide_scrub.models.zones import Zone

        with pytest.raises(ValueError):
            Zone(10, 10, 0, 5)

    def test_to_pixels(self):
        from slide_scrub.models.zones import Zone

        rect = Zone(74, 83, 26, 17).to_pixels(1000, 500)
        assert (rect.left, rect.top, rect.width, rect.height) == pytest.approx(
            (740, 415, 260, 85)
        )


class TestPixelRect:
    def test_box_covers_partial_pixels(self):
        from slide_scrub.models.zones import PixelRect

        assert PixelRect(10.5, 20.2, 5, 5).box() == [10, 20, 15, 25]

    def test_expanded(self):
        from slide_scrub.models.zones import PixelRect

        rect = PixelRect(10, 10, 10, 10).expanded(5)
        assert rect == PixelRect(5, 5, 20, 20)
        assert rect.box() == [5, 5, 24, 24]
