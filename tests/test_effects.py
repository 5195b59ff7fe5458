"""
Tests for the per-effect configuration and frame state calculations.
"""

from datetime import timedelta

import pytest

from gif_effects.colors import ColorPair, hsl_to_rgb
from gif_effects.effects import (
    EFFECTS,
    ColorVaryingTextConfig,
    ColorVaryingTextEffect,
    CountdownConfig,
    CountdownEffect,
    CountdownState,
    FlashingLettersConfig,
    FlashingLettersEffect,
    FlashingTextConfig,
    FlashingTextEffect,
    LedBannerConfig,
    LedBannerEffect,
    TypingTextConfig,
    TypingTextEffect,
    get_effect,
    normalize_effect_name,
)
from gif_effects.effects import flashing_letters
from gif_effects.effects.color_varying import color_pair_for_hue
from gif_effects.effects.countdown import format_date, parse_date
from gif_effects.effects.flashing_text import generate_word_positions
from gif_effects.errors import ConfigurationError


def countdown(fonts, now, **options):
    return CountdownEffect(CountdownConfig.from_options(options), fonts=fonts, now=now)


class TestRegistry:
    """Tests for effect lookup."""

    def test_all_effects_registered(self):
        assert set(EFFECTS) == {
            "countdown",
            "led-banner",
            "flashing-letters",
            "flashing-text",
            "color-varying-text",
            "typing-text",
        }

    @pytest.mark.parametrize("name", ["ledBanner", "led_banner", "LED-Banner", " led-banner "])
    def test_aliases(self, name):
        assert get_effect(name) is LedBannerEffect

    def test_normalize(self):
        assert normalize_effect_name("colorVaryingText") == "color-varying-text"

    def test_unknown_effect(self):
        with pytest.raises(ConfigurationError, match="Unknown effect"):
            get_effect("fireworks")


class TestFrameClamping:
    """Frame counts are clamped, never rejected."""

    @pytest.mark.parametrize(
        "config_class, ceiling",
        [
            (CountdownConfig, 60),
            (LedBannerConfig, 30),
            (FlashingLettersConfig, 60),
            (FlashingTextConfig, 60),
            (ColorVaryingTextConfig, 60),
        ],
    )
    def test_bounds(self, config_class, ceiling):
        assert config_class.from_options({"frames": 0}).frames == 1
        assert config_class.from_options({"frames": -5}).frames == 1
        assert config_class.from_options({"frames": 1000}).frames == ceiling

    def test_defaults_are_frozen(self):
        config = LedBannerConfig()
        with pytest.raises(AttributeError):
            config.frames = 5  # type: ignore[misc]

    def test_dimensions_clamped(self):
        config = FlashingTextConfig.from_options({"width": 0, "height": 99999})
        assert config.size == (1, 2000)

    def test_delay_bounded_by_gif_field(self):
        assert LedBannerConfig.from_options({"delay": "10000000"}).delay == 655350
        assert LedBannerConfig.from_options({"delay": -5}).delay == 0


class TestCountdown:
    """Tests for the countdown effect."""

    def test_parse_date(self):
        parsed = parse_date("2030-01-02T03:04:05.678Z")
        assert (parsed.year, parsed.month, parsed.day, parsed.hour, parsed.second) == (2030, 1, 2, 3, 5)
        assert parsed.utcoffset() == timedelta(0)

    def test_format_round_trip(self, fixed_now):
        assert parse_date(format_date(fixed_now)) == fixed_now

    def test_invalid_date(self, fonts, fixed_now):
        with pytest.raises(ConfigurationError):
            countdown(fonts, fixed_now, date="next tuesday")

    def test_remaining_components(self, fonts, fixed_now):
        target = fixed_now + timedelta(days=2, hours=3, minutes=4, seconds=5)
        effect = countdown(fonts, fixed_now, date=format_date(target), frames=5)

        assert effect.frame_count == 5
        assert effect.frame_state(0) == CountdownState(2, 3, 4, 5)
        assert effect.frame_state(1) == CountdownState(2, 3, 4, 4)
        assert effect.frame_state(4) == CountdownState(2, 3, 4, 1)

    def test_one_second_delay(self, fonts, fixed_now):
        effect = countdown(fonts, fixed_now, delay=20)
        assert effect.delay == 1000

    def test_past_target_single_zero_frame(self, fonts, fixed_now):
        effect = countdown(fonts, fixed_now, date=format_date(fixed_now - timedelta(seconds=1)), frames=30)
        assert effect.frame_count == 1
        state = effect.frame_state(0)
        assert state == CountdownState(0, 0, 0, 0)
        assert state.text == "0d 0h 0m 0s"

    def test_target_equal_now_is_past(self, fonts, fixed_now):
        effect = countdown(fonts, fixed_now, date=format_date(fixed_now))
        assert effect.frame_count == 1

    def test_never_negative(self, fonts, fixed_now):
        effect = countdown(fonts, fixed_now, date=format_date(fixed_now + timedelta(seconds=2)), frames=10)
        assert effect.frame_count == 10
        for index in range(10):
            assert all(value >= 0 for value in effect.frame_state(index).values())

    def test_gmt_offset_extends_remaining_time(self, fonts, fixed_now):
        target = format_date(fixed_now + timedelta(hours=5))
        assert countdown(fonts, fixed_now, date=target, gmt=2).frame_state(0) == CountdownState(0, 7, 0, 0)
        assert countdown(fonts, fixed_now, date=target, gmt=-2).frame_state(0) == CountdownState(0, 3, 0, 0)

    def test_gmt_offset_does_not_revive_past_date(self, fonts, fixed_now):
        effect = countdown(fonts, fixed_now, date=format_date(fixed_now - timedelta(hours=1)), gmt=5)
        assert effect.frame_count == 1
        assert effect.frame_state(0) == CountdownState(0, 0, 0, 0)

    def test_gmt_offset_clamped(self, fonts, fixed_now):
        assert CountdownConfig.from_options({"gmt": "1e12"}).gmt == 14
        assert CountdownConfig.from_options({"gmt": -99}).gmt == -12
        target = format_date(fixed_now + timedelta(hours=1))
        effect = countdown(fonts, fixed_now, date=target, gmt="1e12")
        assert effect.frame_state(0) == CountdownState(0, 15, 0, 0)

    def test_default_target_ten_days_out(self, fonts):
        effect = CountdownEffect(CountdownConfig.from_options({}), fonts=fonts)
        assert effect.frame_count == 10
        assert effect.frame_state(0).days in (9, 10)

    def test_translated_labels(self, fonts, fixed_now):
        assert countdown(fonts, fixed_now, lang="de").label("hours") == "STUNDEN"
        assert countdown(fonts, fixed_now, lang="xx").label("hours") == "HOURS"

    def test_defaults(self):
        config = CountdownConfig.from_options({})
        assert config.kind == "rounded"
        assert config.size == (700, 200)
        assert config.lang == "en"


class TestLedBanner:
    """Tests for the LED banner effect."""

    def test_scroll_offsets(self, fonts):
        effect = LedBannerEffect(
            LedBannerConfig.from_options({"text": "HI", "width": 800, "frames": 10, "forward": True}),
            fonts=fonts,
        )
        assert effect.frame_count == 10
        assert effect.frame_state(0).offset == 0
        assert effect.frame_state(9).offset == pytest.approx(0.9 * effect.block_width)

    def test_direction(self, fonts):
        forward = LedBannerEffect(LedBannerConfig.from_options({"forward": True}), fonts=fonts)
        backward = LedBannerEffect(LedBannerConfig.from_options({"forward": "false"}), fonts=fonts)

        assert forward.frame_state(0).x == pytest.approx(-forward.block_width)
        assert backward.frame_state(0).x == 0
        assert forward.frame_state(3).x > forward.frame_state(2).x
        assert backward.frame_state(3).x < backward.frame_state(2).x

    def test_tiling_covers_canvas(self, fonts):
        effect = LedBannerEffect(LedBannerConfig.from_options({"text": "HI", "width": 800}), fonts=fonts)
        tiled_width, _ = effect.font_face.measure(effect.tiled_text)
        assert tiled_width >= 800 + effect.block_width

    def test_empty_text(self, fonts):
        effect = LedBannerEffect(LedBannerConfig.from_options({"text": "", "spaceSize": 0}), fonts=fonts)
        assert effect.block_width == 1.0
        assert effect.frame_state(5).offset == pytest.approx(0.5)


class TestFlashingLetters:
    """Tests for the flashing letters effect."""

    def test_probability_clamped(self):
        assert FlashingLettersConfig.from_options({"flashProbability": 5}).flash_probability == 1.0
        assert FlashingLettersConfig.from_options({"flashProbability": -1}).flash_probability == 0.0

    def test_never_flash(self, fonts):
        effect = FlashingLettersEffect(FlashingLettersConfig.from_options({"flashProbability": 0}), fonts=fonts)
        assert all(effect.frame_state(index).visible == (True,) * 4 for index in range(effect.frame_count))

    def test_always_flash(self, fonts):
        effect = FlashingLettersEffect(FlashingLettersConfig.from_options({"flashProbability": 1}), fonts=fonts)
        assert effect.frame_state(0).visible == (False,) * 4

    def test_uses_global_generator(self, fonts, monkeypatch):
        effect = FlashingLettersEffect(FlashingLettersConfig.from_options({"text": "AB"}), fonts=fonts)
        monkeypatch.setattr(flashing_letters.random, "random", lambda: 0.1)
        assert effect.frame_state(0).visible == (False, False)
        monkeypatch.setattr(flashing_letters.random, "random", lambda: 0.9)
        assert effect.frame_state(0).visible == (True, True)

    def test_one_advance_per_character(self, fonts):
        effect = FlashingLettersEffect(FlashingLettersConfig.from_options({"text": "SALE!"}), fonts=fonts)
        assert len(effect.advances) == 5
        assert all(advance > 0 for advance in effect.advances)


class TestFlashingText:
    """Tests for the flashing text effect."""

    def test_positions_deterministic(self):
        first = generate_word_positions(600, 400, "SALE", 10)
        second = generate_word_positions(600, 400, "SALE", 10)
        assert first == second
        assert len({(position.x, position.y) for position in first}) == 10

    def test_positions_within_padding(self):
        for position in generate_word_positions(600, 400, "SALE", 20):
            assert 40 <= position.x <= 600 - 40 - position.size
            assert 40 <= position.y <= 400 - 40 - position.size

    def test_word_count_clamped(self):
        assert FlashingTextConfig.from_options({"words": 0}).words == 1
        assert FlashingTextConfig.from_options({"words": 50}).words == 20

    def test_cycles_through_instances(self, fonts):
        effect = FlashingTextEffect(FlashingTextConfig.from_options({"words": 3, "frames": 7}), fonts=fonts)
        assert [effect.frame_state(index).visible_index for index in range(7)] == [0, 1, 2, 0, 1, 2, 0]


class TestColorVaryingText:
    """Tests for the color-varying text effect."""

    def test_hue_progression(self, fonts):
        effect = ColorVaryingTextEffect(ColorVaryingTextConfig.from_options({"frames": 4}), fonts=fonts)
        assert [effect.frame_state(index).hue for index in range(4)] == [0, 90, 180, 270]

    def test_colors_follow_state(self, fonts):
        effect = ColorVaryingTextEffect(ColorVaryingTextConfig.from_options({"frames": 4}), fonts=fonts)
        state = effect.frame_state(1)
        assert effect.colors(state) == state.colors

    @pytest.mark.parametrize(
        "scheme, shift",
        [("complementary", 180), ("triadic", 120), ("analogous", 30), ("unknown", 30)],
    )
    def test_scheme_shifts(self, scheme, shift):
        pair = color_pair_for_hue(40, scheme)
        assert pair == ColorPair(
            background=hsl_to_rgb(40, 1.0, 0.3),
            foreground=hsl_to_rgb(40 + shift, 1.0, 0.8),
        )

    def test_monochromatic(self):
        pair = color_pair_for_hue(200, "monochromatic")
        assert pair.background == hsl_to_rgb(200, 0.8, 0.2)
        assert pair.foreground == hsl_to_rgb(200, 0.8, 0.8)

    def test_layout_fits(self, fonts):
        effect = ColorVaryingTextEffect(
            ColorVaryingTextConfig.from_options({"text": "  Biggest sale of the year  "}), fonts=fonts
        )
        assert effect.config.text == "Biggest sale of the year"
        assert effect.layout.total_height <= 400 - 80
        assert " ".join(effect.layout.lines) == "Biggest sale of the year"


class TestTypingText:
    """Tests for the typing text effect."""

    def test_frame_sequence(self, fonts):
        effect = TypingTextEffect(TypingTextConfig.from_options({"text": "HI"}), fonts=fonts)
        assert effect.frame_count == 2 + 1 + 6
        states = [effect.frame_state(index) for index in range(effect.frame_count)]

        assert [state.length for state in states] == [0, 1, 2, 2, 2, 2, 2, 2, 2]
        assert [state.cursor for state in states] == [False, False, False, True, False, True, False, True, False]

    def test_font_fits_box(self, fonts):
        effect = TypingTextEffect(TypingTextConfig.from_options({}), fonts=fonts)
        width, _ = effect.font_face.measure("BLACK FRIDAY|")
        assert width <= 800 - 80

    def test_text_trimmed(self):
        assert TypingTextConfig.from_options({"text": "  hello  "}).text == "hello"

    def test_text_length_bounded_by_frame_limit(self, fonts):
        effect = TypingTextEffect(TypingTextConfig.from_options({"text": "x" * 500}), fonts=fonts)
        assert effect.config.text == "x" * 53
        assert effect.frame_count == 60
