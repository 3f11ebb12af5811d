"""DarknessController state, mutators and per-frame ticking."""

from __future__ import annotations

import pytest

from lighting.darkness import DarknessConfig, DarknessController, parse_bool
from render.draw_batch import DrawBatch
from render.gradient_mask import FrameContext


class FakeSubject:
    def __init__(self, x: float, y: float) -> None:
        self.pos = (x, y)

    def current_screen_position(self):
        return self.pos


class FakeViewport:
    def current_size(self):
        return 640, 480


def make_controller(**overrides) -> DarknessController:
    cfg = DarknessConfig(
        enabled=overrides.pop("enabled", True),
        light_radius=overrides.pop("light_radius", 100),
        darkness_opacity=overrides.pop("darkness_opacity", 245),
        gradient_width=overrides.pop("gradient_width", 40),
    )
    return DarknessController(cfg, light_offset_y=overrides.pop("light_offset_y", 0))


FRAME = FrameContext(200, 150, 640, 480)


def test_defaults_come_from_config() -> None:
    controller = DarknessController()
    cfg = controller.config

    assert cfg.enabled is False
    assert cfg.light_radius == 100
    assert cfg.darkness_opacity == 245
    assert cfg.gradient_width == 40
    assert controller.inner_radius == 60


def test_tick_before_attach_is_a_no_op() -> None:
    controller = make_controller()
    controller.tick(FRAME)
    assert controller.target is None
    assert controller.last_mask is None


def test_attach_performs_initial_draw() -> None:
    controller = make_controller(light_offset_y=24)
    controller.position_provider = FakeSubject(100, 100)
    controller.viewport_provider = FakeViewport()
    batch = DrawBatch()

    controller.attach(batch)

    assert len(batch) == 12
    assert controller.last_mask is not None
    assert (controller.last_mask.x, controller.last_mask.y) == (100.0, 76.0)


def test_enabled_tick_draws_twelve_ops() -> None:
    controller = make_controller()
    batch = DrawBatch()
    controller.attach(batch)

    controller.tick(FRAME)

    assert len(batch) == 12
    radii = [c.radius for c in batch.circles]
    assert radii[0] == 100.0 and radii[-1] == 60.0


def test_disabled_ticks_leave_nothing_drawn() -> None:
    controller = make_controller()
    batch = DrawBatch()
    controller.attach(batch)
    controller.tick(FRAME)
    assert not batch.is_empty()

    controller.set_enabled(False)
    for _ in range(3):
        controller.tick(FRAME)
        assert batch.is_empty()
    assert controller.last_mask is None


def test_disabled_clears_even_when_target_was_written_elsewhere() -> None:
    controller = make_controller(enabled=False)
    batch = DrawBatch()
    controller.attach(batch)
    batch.fill_rect(0, 0, 10, 10, (0, 0, 0), 1.0)

    controller.tick(FRAME)

    assert batch.is_empty()


def test_re_enable_resumes_drawing() -> None:
    controller = make_controller(enabled=False)
    batch = DrawBatch()
    controller.attach(batch)
    assert batch.is_empty()

    controller.set_enabled(True)
    controller.tick(FRAME)
    assert len(batch) == 12


def test_radius_change_shows_on_next_tick() -> None:
    controller = make_controller()
    batch = DrawBatch()
    controller.attach(batch)
    controller.tick(FRAME)

    controller.set_light_radius(150)
    controller.tick(FRAME)

    assert batch.circles[0].radius == 150.0
    assert batch.holes[0].radius == 110.0


@pytest.mark.parametrize(
    "radius, opacity, width",
    [(10, 0, 0), (120, 128, 25), (300, 255, 100), (57.5, 12.25, 3.5)],
)
def test_in_bound_values_round_trip(radius, opacity, width) -> None:
    controller = make_controller()
    batch = DrawBatch()
    controller.attach(batch)

    controller.set_light_radius(radius)
    controller.set_darkness_opacity(opacity)
    controller.set_gradient_width(width)
    controller.tick(FRAME)

    mask = controller.last_mask
    assert mask.outer_radius == radius
    assert mask.opacity == opacity
    assert mask.outer_radius - mask.inner_radius == min(width, radius)
    assert controller.config.light_radius == radius
    assert controller.config.darkness_opacity == opacity
    assert controller.config.gradient_width == width


def test_mutators_clamp_defensively() -> None:
    controller = make_controller()

    controller.set_light_radius(-20)
    controller.set_darkness_opacity(1000)
    controller.set_gradient_width(-1)
    cfg = controller.config
    assert cfg.light_radius == 0.0
    assert cfg.darkness_opacity == 255.0
    assert cfg.gradient_width == 0.0

    controller.set_darkness_opacity(-4)
    assert controller.config.darkness_opacity == 0.0


def test_constructor_clamps_initial_config() -> None:
    controller = DarknessController(DarknessConfig(True, -5, 400, -1))
    cfg = controller.config
    assert (cfg.light_radius, cfg.darkness_opacity, cfg.gradient_width) == (0.0, 255.0, 0.0)


def test_config_accessor_returns_a_copy() -> None:
    controller = make_controller()
    snapshot = controller.config
    snapshot.light_radius = 5

    assert controller.config.light_radius == 100


def test_inner_radius_never_negative() -> None:
    controller = make_controller()
    for radius in (0, 20, 100, 300):
        for width in (0, 40, 100, 500):
            controller.set_light_radius(radius)
            controller.set_gradient_width(width)
            assert controller.inner_radius == max(0, radius - width)
            assert 0 <= controller.inner_radius <= controller.config.light_radius


def test_moving_subject_recenters_everything() -> None:
    controller = make_controller()
    batch = DrawBatch()
    controller.attach(batch)

    controller.tick(FrameContext(100, 100, 640, 480))
    controller.tick(FrameContext(300, 220, 640, 480))

    centres = {(op.x, op.y) for op in batch.circles + batch.holes}
    assert centres == {(300.0, 220.0)}


def test_light_offset_lifts_center_above_subject() -> None:
    controller = make_controller(light_offset_y=24)
    batch = DrawBatch()
    controller.attach(batch)

    controller.tick(FrameContext(100, 100, 640, 480))

    assert {(op.x, op.y) for op in batch.circles} == {(100.0, 76.0)}


def test_tick_samples_providers_when_no_frame_given() -> None:
    subject = FakeSubject(50, 60)
    controller = DarknessController(
        DarknessConfig(True, 100, 245, 40),
        position_provider=subject,
        viewport_provider=FakeViewport(),
        light_offset_y=0,
    )
    batch = DrawBatch()
    controller.attach(batch)
    assert batch.ops[0].w == 640 and batch.ops[0].h == 480

    subject.pos = (70, 80)
    controller.tick()
    assert {(op.x, op.y) for op in batch.circles} == {(70.0, 80.0)}


def test_enabled_tick_without_providers_or_frame_does_nothing() -> None:
    controller = make_controller()
    batch = DrawBatch()
    controller.attach(batch)
    assert batch.is_empty()
    assert controller.sample_frame() is None


def test_from_params_parses_plugin_values() -> None:
    cfg = DarknessConfig.from_params(
        {
            "DefaultEnableOnStartup": "true",
            "DefaultLightRadius": "150",
            "DefaultDarknessOpacity": "300",
            "GradientSize": "",
        }
    )
    assert cfg.enabled is True
    assert cfg.light_radius == 150.0
    assert cfg.darkness_opacity == 255.0
    assert cfg.gradient_width == 40


def test_from_params_falls_back_to_defaults() -> None:
    cfg = DarknessConfig.from_params({"DefaultLightRadius": "wide"})
    assert cfg == DarknessConfig()


def test_parse_bool() -> None:
    assert parse_bool("true") is True
    assert parse_bool(" TRUE ") is True
    assert parse_bool("false") is False
    assert parse_bool("yes") is False
    assert parse_bool(True) is True
    assert parse_bool(0) is False
