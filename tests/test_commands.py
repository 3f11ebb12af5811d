import pytest

from lighting.commands import COMMANDS, CommandError, dispatch, nudge
from lighting.darkness import DarknessConfig, DarknessController


@pytest.fixture
def controller() -> DarknessController:
    return DarknessController(DarknessConfig(False, 100, 245, 40))


def test_command_table_matches_plugin_commands() -> None:
    assert set(COMMANDS) == {
        "toggleDarkness",
        "setLightRadius",
        "setDarknessLevel",
        "setGradientSize",
    }
    assert (COMMANDS["setLightRadius"].minimum, COMMANDS["setLightRadius"].maximum) == (10, 300)
    assert (COMMANDS["setDarknessLevel"].minimum, COMMANDS["setDarknessLevel"].maximum) == (0, 255)
    assert (COMMANDS["setGradientSize"].minimum, COMMANDS["setGradientSize"].maximum) == (0, 100)


def test_toggle_parses_string_booleans(controller) -> None:
    dispatch(controller, "toggleDarkness", {"enabled": "true"})
    assert controller.enabled is True

    dispatch(controller, "toggleDarkness", {"enabled": "false"})
    assert controller.enabled is False

    dispatch(controller, "toggleDarkness", {"enabled": True})
    assert controller.enabled is True


def test_toggle_without_argument_uses_default(controller) -> None:
    dispatch(controller, "toggleDarkness")
    assert controller.enabled is True


def test_numeric_commands_apply_values(controller) -> None:
    assert dispatch(controller, "setLightRadius", {"radius": "120"}) == 120.0
    assert dispatch(controller, "setDarknessLevel", {"opacity": 90}) == 90.0
    assert dispatch(controller, "setGradientSize", {"size": "12.5"}) == 12.5

    cfg = controller.config
    assert (cfg.light_radius, cfg.darkness_opacity, cfg.gradient_width) == (120.0, 90.0, 12.5)


@pytest.mark.parametrize(
    "name, arg, raw, expected",
    [
        ("setLightRadius", "radius", "5", 10.0),
        ("setLightRadius", "radius", 900, 300.0),
        ("setDarknessLevel", "opacity", -10, 0.0),
        ("setDarknessLevel", "opacity", "256", 255.0),
        ("setGradientSize", "size", 250, 100.0),
        ("setGradientSize", "size", "inf", 100.0),
    ],
)
def test_arguments_are_pre_clamped_to_command_bounds(controller, name, arg, raw, expected) -> None:
    assert dispatch(controller, name, {arg: raw}) == expected


def test_unknown_command_raises(controller) -> None:
    with pytest.raises(CommandError):
        dispatch(controller, "setTorchColor", {"color": "red"})


@pytest.mark.parametrize("raw", ["abc", "nan", [1, 2]])
def test_unparsable_number_raises(controller, raw) -> None:
    with pytest.raises(CommandError):
        dispatch(controller, "setLightRadius", {"radius": raw})
    assert controller.config.light_radius == 100


def test_missing_numeric_argument_uses_plugin_default(controller) -> None:
    controller.set_light_radius(250)
    assert dispatch(controller, "setLightRadius", {}) == 100.0


def test_command_error_is_a_value_error() -> None:
    assert issubclass(CommandError, ValueError)


def test_nudge_steps_within_bounds(controller) -> None:
    assert nudge(controller, "setLightRadius", 10) == 110.0
    controller.set_light_radius(295)
    assert nudge(controller, "setLightRadius", 10) == 300.0
    assert nudge(controller, "setGradientSize", -50) == 0.0
    assert nudge(controller, "setDarknessLevel", 15) == 255.0


def test_nudge_rejects_toggle(controller) -> None:
    with pytest.raises(CommandError):
        nudge(controller, "toggleDarkness", 1)
