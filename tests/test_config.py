"""Configuration: colors, validation, builder and config file."""

from __future__ import annotations

import json
import logging

import pygame
import pytest

from zodiacview.models.config import (
    ConfigError,
    ZodiacBuilder,
    ZodiacConfig,
    color_to_hex,
    load_config,
    parse_color,
    save_config,
    validate_config,
)


class TestParseColor:
    def test_hex_string(self):
        assert parse_color("#16151f") == pygame.Color(0x16, 0x15, 0x1F, 255)

    def test_hex_string_with_alpha(self):
        assert parse_color("#49348b80") == pygame.Color(0x49, 0x34, 0x8B, 0x80)

    def test_packed_argb_int(self):
        assert parse_color(0x8049348B) == pygame.Color(0x49, 0x34, 0x8B, 0x80)

    def test_tuple(self):
        assert parse_color((1, 2, 3)) == pygame.Color(1, 2, 3, 255)

    def test_returns_copy_of_color(self):
        original = pygame.Color(10, 20, 30)
        parsed = parse_color(original)
        parsed.r = 99
        assert original.r == 10

    @pytest.mark.parametrize("value", ["not-a-color", (300, 0, 0), (1, 2), None, True, -1])
    def test_invalid(self, value):
        with pytest.raises(ConfigError):
            parse_color(value)

    def test_hex_round_trip(self):
        assert color_to_hex(parse_color("#49348b")) == "#49348bff"


class TestZodiacConfig:
    def test_defaults(self):
        config = ZodiacConfig()
        assert config.star_count == 30
        assert (config.star_size_min, config.star_size_max) == (10, 20)
        assert config.relation_size == 5
        assert config.speed == pytest.approx(0.7)
        assert config.distance == 200
        assert config.color_background == pygame.Color("#16151f")
        assert config.interaction_enabled is False

    def test_colors_accept_strings(self):
        config = ZodiacConfig(color_star="#ffffff")
        assert isinstance(config.color_star, pygame.Color)

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"star_count": -1}, "star_count"),
            ({"star_count": 2.5}, "star_count"),
            ({"star_size_min": 30, "star_size_max": 20}, "greater than"),
            ({"star_size_min": -2}, "star_size_min"),
            ({"relation_size": -1}, "relation_size"),
            ({"speed": -0.1}, "speed"),
            ({"distance": 0}, "distance"),
            ({"color_relation": "nope"}, "color"),
            ({"speed": float("nan")}, "speed"),
            ({"distance": float("nan")}, "distance"),
            ({"distance": float("inf")}, "distance"),
            ({"star_size_max": float("inf")}, "star_size_max"),
            ({"speed": "fast"}, "speed"),
            ({"interaction_enabled": "false"}, "interaction_enabled"),
            ({"interaction_enabled": 1}, "interaction_enabled"),
        ],
    )
    def test_rejects_malformed(self, kwargs, message):
        with pytest.raises(ConfigError, match=message):
            ZodiacConfig(**kwargs)

    def test_zero_stars_allowed(self):
        assert ZodiacConfig(star_count=0).star_count == 0

    def test_unknown_keys_are_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = validate_config({"star_count": 12, "sparkle": True})
        assert config.star_count == 12
        assert "sparkle" in caplog.text

    def test_dict_round_trip(self):
        config = ZodiacConfig(star_count=8, color_star="#010203", interaction_enabled=True)
        assert validate_config(config.model_dump()) == config


class TestBuilder:
    def test_chained_setters(self):
        config = (
            ZodiacBuilder()
            .star_count(12)
            .star_size_min(2)
            .star_size_max(4)
            .relation_size(1)
            .speed(1.5)
            .distance(90)
            .color_background("#000000")
            .color_star((255, 255, 255))
            .color_relation(0xFF00FF00)
            .interaction_enabled(True)
            .build()
        )
        assert config.star_count == 12
        assert (config.star_size_min, config.star_size_max) == (2, 4)
        assert config.relation_size == 1
        assert config.speed == 1.5
        assert config.distance == 90
        assert config.color_relation == pygame.Color(0, 255, 0, 255)
        assert config.interaction_enabled is True

    def test_order_does_not_matter_until_build(self):
        builder = ZodiacBuilder().star_size_min(40)
        builder.star_size_max(50)
        assert builder.build().star_size_min == 40

    def test_build_validates(self):
        with pytest.raises(ConfigError):
            ZodiacBuilder().star_size_min(40).build()

    def test_build_rejects_wrong_types(self):
        with pytest.raises(ConfigError, match="speed"):
            ZodiacBuilder().speed("fast").build()
        with pytest.raises(ConfigError, match="interaction_enabled"):
            ZodiacBuilder().interaction_enabled("yes").build()


class TestConfigFile:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.json") == ZodiacConfig()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        config = ZodiacConfig(star_count=4, distance=150)
        assert save_config(config, path) == path
        assert load_config(path) == config

    def test_bad_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"star_count": -5}))
        with pytest.raises(ConfigError, match="star_count"):
            load_config(path)

    def test_string_bool_is_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"interaction_enabled": "false"}))
        with pytest.raises(ConfigError, match="interaction_enabled"):
            load_config(path)

    def test_json_bool_is_accepted(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"interaction_enabled": True}))
        assert load_config(path).interaction_enabled is True

    @pytest.mark.parametrize("text", ['{"speed": NaN}', '{"distance": NaN}', '{"distance": Infinity}'])
    def test_non_finite_numbers_are_rejected(self, tmp_path, text):
        path = tmp_path / "config.json"
        path.write_text(text)
        with pytest.raises(ConfigError):
            load_config(path)

    def test_saved_colors_are_hex(self, tmp_path):
        path = save_config(ZodiacConfig(color_star="#010203"), tmp_path / "config.json")
        assert json.loads(path.read_text())["color_star"] == "#010203ff"
