"""
Unit tests for the browsing helpers: URLs, media hints, filtering,
stats and the audio playback state.
"""

import pytest

from asset_catalog.core.catalog.browse import (
    CatalogStats,
    MediaKind,
    PlaybackState,
    PlaybackStatus,
    build_asset_url,
    classify_media,
    filter_catalog,
)
from asset_catalog.core.catalog.models import CategoryFolder, FlatAsset

PUBLIC_BASE = "https://example.supabase.co/storage/v1/object/public/game-assets"


def category(name: str, *item_names: str) -> CategoryFolder:
    return CategoryFolder(name=name, items=tuple(FlatAsset(name=n) for n in item_names))


@pytest.fixture
def catalog():
    return (
        category("sounds", "Hit.wav", "sfx/explosion.ogg", "music/theme.mp3"),
        category("sprites", "hero.png", "enemies/slime.png"),
        category("ui", "button.png"),
        category("backgrounds", "forest.jpg"),
        category("docs", "notes.txt"),
    )


# ---------------------------------------------------------------------------
# URLs and Media Hints
# ---------------------------------------------------------------------------

class TestAssetUrl:

    def test_joins_category_and_name(self):
        assert build_asset_url(PUBLIC_BASE, "sounds", "hit.wav") == f"{PUBLIC_BASE}/sounds/hit.wav"

    def test_keeps_flattened_subfolder(self):
        url = build_asset_url(PUBLIC_BASE, "sounds", "sfx/explosion.ogg")

        assert url == f"{PUBLIC_BASE}/sounds/sfx/explosion.ogg"

    def test_tolerates_trailing_slash_on_base(self):
        assert build_asset_url(PUBLIC_BASE + "/", "ui", "a.png") == f"{PUBLIC_BASE}/ui/a.png"


class TestClassifyMedia:

    @pytest.mark.parametrize("name", ["hero.png", "bg.jpg", "enemies/slime.png"])
    def test_images(self, name):
        assert classify_media(name) is MediaKind.IMAGE

    @pytest.mark.parametrize("name", ["hit.wav", "theme.mp3", "sfx/explosion.ogg"])
    def test_audio(self, name):
        assert classify_media(name) is MediaKind.AUDIO

    @pytest.mark.parametrize("name", ["notes.txt", "clip.mp4", "photo.jpeg", "HERO.PNG", "sfx"])
    def test_everything_else_is_other(self, name):
        """Suffix match is exact and case-sensitive."""
        assert classify_media(name) is MediaKind.OTHER


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------

class TestFilterCatalog:

    def test_no_filters_keeps_everything(self, catalog):
        assert filter_catalog(catalog) == catalog

    def test_query_is_case_insensitive_substring(self, catalog):
        filtered = filter_catalog(catalog, query="HIT")

        assert [f.name for f in filtered] == [f.name for f in catalog]
        assert [item.name for item in filtered[0].items] == ["Hit.wav"]
        assert all(f.count == 0 for f in filtered[1:])

    def test_query_matches_subfolder_part_of_name(self, catalog):
        filtered = filter_catalog(catalog, query="enemies")

        assert filtered[1].items == (FlatAsset(name="enemies/slime.png"),)

    def test_category_selects_exactly_one_folder(self, catalog):
        filtered = filter_catalog(catalog, category="sprites")

        assert filtered == (catalog[1],)

    def test_category_is_exact_match(self, catalog):
        assert filter_catalog(catalog, category="sprite") == ()

    def test_query_and_category_combine(self, catalog):
        filtered = filter_catalog(catalog, query="hero", category="sprites")

        assert len(filtered) == 1
        assert filtered[0].count == 1

    def test_does_not_modify_input(self, catalog):
        filter_catalog(catalog, query="nothing-matches")

        assert catalog[0].count == 3


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------

class TestCatalogStats:

    def test_counts_from_catalog(self, catalog):
        stats = CatalogStats.from_catalog(catalog)

        assert stats == CatalogStats(sprites_and_ui=3, sounds=3, backgrounds=1, total=8)

    def test_missing_categories_count_zero(self):
        stats = CatalogStats.from_catalog((category("docs", "a.txt"),))

        assert stats == CatalogStats(total=1)

    def test_ui_matches_as_substring(self):
        """Folder names containing 'ui' count towards sprites & UI."""
        stats = CatalogStats.from_catalog((category("guitars", "riff.wav"),))

        assert stats.sprites_and_ui == 1

    def test_empty_catalog(self):
        assert CatalogStats.from_catalog(()) == CatalogStats()


# ---------------------------------------------------------------------------
# Playback State
# ---------------------------------------------------------------------------

class TestPlaybackState:

    def test_starts_idle(self):
        state = PlaybackState()

        assert state.status is PlaybackStatus.IDLE
        assert state.url is None

    def test_select_starts_playing(self):
        state = PlaybackState().select("a.wav")

        assert state.status is PlaybackStatus.PLAYING
        assert state.is_playing("a.wav")

    def test_reselecting_same_url_stops(self):
        state = PlaybackState().select("a.wav").select("a.wav")

        assert state.status is PlaybackStatus.IDLE

    def test_selecting_other_url_replaces(self):
        state = PlaybackState().select("a.wav").select("b.wav")

        assert state.is_playing("b.wav")
        assert not state.is_playing("a.wav")

    def test_finish_of_current_url_goes_idle(self):
        state = PlaybackState().select("a.wav").finish("a.wav")

        assert state == PlaybackState()

    def test_stale_finish_leaves_newer_selection_playing(self):
        state = PlaybackState().select("a.wav").select("b.wav").finish("a.wav")

        assert state.is_playing("b.wav")

    def test_finish_while_idle_is_noop(self):
        assert PlaybackState().finish("a.wav") == PlaybackState()

    def test_transitions_return_new_states(self):
        idle = PlaybackState()

        idle.select("a.wav")

        assert idle.status is PlaybackStatus.IDLE
