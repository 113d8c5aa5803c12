import logging

import pygame
import pytest

from ecsgame.assets import Assets
from ecsgame.vec2 import Vec2


class TextureLoader:
    def __init__(self, size=(128, 32)):
        self.size = size
        self.paths = []

    def __call__(self, path):
        self.paths.append(path)
        return pygame.Surface(self.size)


def make_assets():
    textures = TextureLoader()
    fonts = []

    def font_loader(path):
        fonts.append(path)
        return ("font", path)

    return Assets(texture_loader=textures, font_loader=font_loader), textures, fonts


def test_load_from_file_registers_every_kind(tmp_path):
    listing = tmp_path / "assets.txt"
    listing.write_text(
        "Texture Wizard images/wizard.png\n"
        "Animation WizardStand Wizard 4 10\n"
        "Font Tech fonts/tech.ttf\n"
    )
    assets, textures, fonts = make_assets()
    assets.load_from_file(str(listing))

    assert textures.paths == ["images/wizard.png"]
    assert fonts == ["fonts/tech.ttf"]
    assert assets.font("Tech") == ("font", "fonts/tech.ttf")
    animation = assets.animation("WizardStand")
    assert animation.frame_count == 4
    assert animation.speed == 10
    assert animation.texture is assets.texture("Wizard")
    assert animation.size == Vec2(32, 32)


def test_unknown_asset_type_is_logged_and_skipped(tmp_path, caplog):
    listing = tmp_path / "assets.txt"
    listing.write_text("Sprite foo\nFont Tech tech.ttf\n")
    assets, _, _ = make_assets()
    with caplog.at_level(logging.WARNING):
        assets.load_from_file(str(listing))
    assert "Unknown Asset Type: Sprite" in caplog.text
    assert "Unknown Asset Type: foo" in caplog.text
    assert assets.font("Tech") == ("font", "tech.ttf")


def test_texture_that_fails_to_load_is_not_stored(caplog):
    def broken(path):
        raise pygame.error("cannot open")

    assets = Assets(texture_loader=broken)
    with caplog.at_level(logging.ERROR):
        assets.add_texture("a", "x.png")
    assert "Could not load texture file: x.png" in caplog.text
    with pytest.raises(KeyError):
        assets.texture("a")


def test_font_that_fails_to_load_is_not_stored(caplog):
    def broken(path):
        raise OSError("missing")

    assets = Assets(font_loader=broken)
    with caplog.at_level(logging.ERROR):
        assets.add_font("roboto", "roboto.ttf")
    assert "Could not load font file: roboto.ttf" in caplog.text
    with pytest.raises(KeyError):
        assets.font("roboto")


def test_animation_needs_a_loaded_texture():
    assets, _, _ = make_assets()
    with pytest.raises(KeyError):
        assets.add_animation("Run", "Missing", 4, 1)


def test_animation_round_trip():
    assets, _, _ = make_assets()
    assets.add_texture("Sheet", "sheet.png")
    assets.add_animation("Run", "Sheet", 2, 5)
    assert assets.animation("Run").name == "Run"
    assert list(assets.animations) == ["Run"]


def test_truncated_entry_raises(tmp_path):
    listing = tmp_path / "assets.txt"
    listing.write_text("Texture Wizard w.png\nAnimation Run Wizard 4\n")
    assets, _, _ = make_assets()
    with pytest.raises(ValueError):
        assets.load_from_file(str(listing))


def test_non_numeric_frame_count_raises(tmp_path):
    listing = tmp_path / "assets.txt"
    listing.write_text("Texture Wizard w.png\nAnimation Run Wizard many 4\n")
    assets, _, _ = make_assets()
    with pytest.raises(ValueError):
        assets.load_from_file(str(listing))


def test_missing_asset_file_raises(tmp_path):
    assets, _, _ = make_assets()
    with pytest.raises(FileNotFoundError):
        assets.load_from_file(str(tmp_path / "absent.txt"))


def test_missing_lookups_raise_key_error():
    assets, _, _ = make_assets()
    for lookup in (assets.texture, assets.animation, assets.font):
        with pytest.raises(KeyError):
            lookup("nothing")


def test_texture_mapping_is_read_only():
    assets, _, _ = make_assets()
    assets.add_texture("Sheet", "sheet.png")
    assert "Sheet" in assets.textures
    with pytest.raises(TypeError):
        assets.textures["Other"] = None