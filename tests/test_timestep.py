from lunalite.timestep import Timestep


def test_default_is_zero():
    step = Timestep()
    assert float(step) == 0.0
    assert step.seconds == 0.0
    assert step.milliseconds == 0.0


def test_seconds_match_float():
    step = Timestep(0.25)
    assert step.seconds == float(step) == 0.25


def test_milliseconds_scale():
    assert Timestep(0.5).milliseconds == 500.0


def test_milliseconds_invariant():
    for value in (0.001, 0.016, 1.0, 3.5):
        step = Timestep(value)
        assert abs(step.milliseconds - step.seconds * 1000.0) < 1e-9


def test_equality():
    assert Timestep(0.5) == Timestep(0.5)
    assert Timestep(0.5) != Timestep(0.25)