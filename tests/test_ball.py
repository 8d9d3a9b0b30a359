import math

import pytest

from trickball.ball import (
    DTR,
    BallEnviron,
    BallExec,
    BallState,
    BallStateInit,
    ball_print,
    environ_default_data,
    force_field,
    format_position,
    state_default_data,
    state_deriv,
    state_init,
)


def test_environ_default_data_values():
    env = environ_default_data()
    assert env.origin == [0.0, 2.0]
    assert env.force == 8.0


def test_environ_default_data_returns_independent_objects():
    first = environ_default_data()
    second = environ_default_data()
    first.origin[0] = 42.0
    assert second.origin[0] == 0.0


def test_force_field_magnitude_equals_field_strength():
    env = environ_default_data()
    result = force_field(env, [5.0, 5.0])
    assert math.hypot(*result.force) == pytest.approx(env.force)


def test_force_field_points_towards_origin():
    env = BallEnviron(origin=[1.0, -3.0], force=2.5)
    pos = [7.0, 4.0]
    result = force_field(env, pos)
    rel = (env.origin[0] - pos[0], env.origin[1] - pos[1])
    # Parallel: cross product zero; same direction: dot product positive.
    cross = result.force[0] * rel[1] - result.force[1] * rel[0]
    dot = result.force[0] * rel[0] + result.force[1] * rel[1]
    assert cross == pytest.approx(0.0, abs=1e-12)
    assert dot > 0.0


def test_force_field_straight_up():
    env = environ_default_data()
    result = force_field(env, [0.0, 0.0])
    assert result.force[0] == pytest.approx(0.0)
    assert result.force[1] == pytest.approx(env.force)


def test_force_field_at_origin_raises():
    env = environ_default_data()
    with pytest.raises(ZeroDivisionError):
        force_field(env, list(env.origin))


def test_state_default_data_values():
    init, state = state_default_data()
    assert init.mass == 10.0
    assert init.location == [5.0, 5.0]
    assert init.speed == 3.5
    assert init.elevation == pytest.approx(math.pi / 4)
    assert state.mass == init.mass
    assert state.position == init.location


def test_state_default_data_position_not_shared_with_init():
    init, state = state_default_data()
    state.position[0] = -1.0
    assert init.location[0] == 5.0


def test_state_init_copies_location_and_sets_velocity():
    init = BallStateInit(mass=2.0, location=[1.5, -2.5], speed=4.0, elevation=30.0 * DTR)
    state = BallState(mass=2.0)
    position_ref = state.position
    state_init(init, state)
    assert state.position == [1.5, -2.5]
    assert state.position is position_ref
    assert math.hypot(*state.velocity) == pytest.approx(init.speed)
    assert math.atan2(state.velocity[1], state.velocity[0]) == pytest.approx(init.elevation)


def test_state_init_default_elevation_gives_equal_components():
    init, state = state_default_data()
    state_init(init, state)
    assert state.velocity[0] == pytest.approx(state.velocity[1])


def test_state_deriv_single_collected_force():
    shared = [3.0, -6.0]
    exec_data = BallExec(collected_forces=[shared])
    state = BallState(mass=3.0)
    state_deriv(exec_data, state)
    assert exec_data.force == shared
    assert state.acceleration[0] * state.mass == pytest.approx(shared[0])
    assert state.acceleration[1] * state.mass == pytest.approx(shared[1])


def test_state_deriv_sums_forces_and_follows_shared_reference():
    shared = [1.0, 2.0]
    other = [0.5, -0.5]
    exec_data = BallExec(collected_forces=[shared, other])
    state = BallState(mass=4.0)
    state_deriv(exec_data, state)
    assert exec_data.force == [shared[0] + other[0], shared[1] + other[1]]
    shared[0] = 10.0
    state_deriv(exec_data, state)
    assert exec_data.force[0] == shared[0] + other[0]
    assert state.acceleration[0] * state.mass == pytest.approx(exec_data.force[0])


def test_state_deriv_no_forces_gives_zero_acceleration():
    exec_data = BallExec(force=[9.0, 9.0])
    state = BallState(mass=1.0, acceleration=[5.0, 5.0])
    state_deriv(exec_data, state)
    assert exec_data.force == [0.0, 0.0]
    assert state.acceleration == [0.0, 0.0]


def test_format_position_layout():
    state = BallState(position=[5.0, 5.0])
    assert format_position(1.0, state) == (
        "time =     1.00 , position =     5.000000 ,     5.000000"
    )


def test_ball_print_writes_line(capsys):
    state = BallState(position=[5.0, -2.0])
    ball_print(0.5, BallExec(), state)
    assert capsys.readouterr().out == format_position(0.5, state) + "\n"


def test_ball_print_suppressed(capsys):
    ball_print(0.5, BallExec(print_off=True), BallState())
    assert capsys.readouterr().out == ""