"""Tests for cobblestone generation and the texture store."""

import pygame
import pytest

from via_romana.core.errors import TextureLoadError
from via_romana.gui.assets import (
    COLORS, TextureState, TextureStore, create_cobblestone_texture,
)


def same_pixels(a, b):
    w, h = a.get_size()
    return all(a.get_at((x, y)) == b.get_at((x, y)) for y in range(h) for x in range(w))


def test_texture_has_tile_size():
    assert create_cobblestone_texture(40, 0).get_size() == (40, 40)
    assert create_cobblestone_texture(16, 3).get_size() == (16, 16)


def test_texture_is_deterministic():
    assert same_pixels(create_cobblestone_texture(40, 2), create_cobblestone_texture(40, 2))


def test_variants_differ():
    a = create_cobblestone_texture(40, 0)
    b = create_cobblestone_texture(40, 1)
    assert a.get_at((1, 1)) != b.get_at((1, 1))


def test_mortar_lines_between_stones():
    tex = create_cobblestone_texture(40, 0)
    # 4px stones with a 1px gap: first mortar line at 5
    assert tuple(tex.get_at((0, 5)))[:3] == COLORS["mortar"]
    assert tuple(tex.get_at((5, 30)))[:3] == COLORS["mortar"]


def test_invalid_size_raises():
    with pytest.raises(TextureLoadError):
        create_cobblestone_texture(0, 0)


def test_store_starts_empty():
    store = TextureStore(tile_size=16)
    assert store.state is TextureState.EMPTY
    assert store.try_get() is None


def test_synchronous_load():
    store = TextureStore(tile_size=16, count=4)
    store.load()
    assert store.state is TextureState.READY
    textures = store.try_get()
    assert len(textures) == 4
    assert all(t.get_size() == (16, 16) for t in textures)


def test_background_load():
    store = TextureStore(tile_size=16, count=2)
    store.load_async()
    assert store.state in (TextureState.LOADING, TextureState.READY)
    store.wait(timeout=10)
    assert store.state is TextureState.READY
    assert len(store.try_get()) == 2


def test_second_load_is_ignored():
    calls = []

    def provider(size, i):
        calls.append(i)
        return pygame.Surface((size, size))

    store = TextureStore(tile_size=8, count=2, provider=provider)
    store.load()
    store.load()
    store.load_async()
    assert calls == [0, 1]


def test_failed_variant_is_skipped():
    def provider(size, i):
        if i == 1:
            raise TextureLoadError("boom")
        return pygame.Surface((size, size))

    store = TextureStore(tile_size=8, count=3, provider=provider)
    store.load()
    assert store.state is TextureState.READY
    assert len(store.try_get()) == 2


def test_unexpected_failure_marks_store_failed():
    def provider(size, i):
        raise ValueError("broken recipe")

    store = TextureStore(tile_size=8, count=3, provider=provider)
    store.load()
    assert store.state is TextureState.FAILED
    assert store.try_get() is None


def test_all_variants_failing_leaves_flat_colour_path():
    def provider(size, i):
        raise TextureLoadError("nope")

    store = TextureStore(tile_size=8, count=2, provider=provider)
    store.load()
    assert store.state is TextureState.READY
    assert store.try_get() is None


def test_preloaded_store():
    surf = pygame.Surface((8, 8))
    store = TextureStore.preloaded([surf])
    assert store.state is TextureState.READY
    assert store.try_get() == [surf]
