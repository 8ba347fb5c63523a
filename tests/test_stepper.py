from grid import CellState
from engine import RenderEvent, Stepper, StepperState


def make_events(*offsets):
    return [RenderEvent(row=0, col=i, state=CellState.VISITED, offset_ms=o) for i, o in enumerate(offsets)]


def test_tick_hands_out_due_events(clock):
    stepper = Stepper(clock=clock)
    run_id = stepper.start(make_events(0, 10, 20, 30))

    assert run_id == 1
    assert stepper.state is StepperState.PLAYING
    assert [ev.col for ev in stepper.tick()] == [0]

    clock.advance_ms(15)
    assert [ev.col for ev in stepper.tick()] == [1]
    assert stepper.tick() == []

    clock.advance_ms(100)
    assert [ev.col for ev in stepper.tick()] == [2, 3]
    assert stepper.is_finished


def test_is_animating_until_last_offset(clock):
    stepper = Stepper(clock=clock)
    assert not stepper.is_animating

    stepper.start(make_events(0, 50))
    assert stepper.is_animating
    clock.advance_ms(49)
    assert stepper.is_animating
    clock.advance_ms(5)
    assert not stepper.is_animating
    assert not stepper.is_finished


def test_new_run_drops_stale_events(clock):
    stepper = Stepper(clock=clock)
    old = stepper.start(make_events(0, 10, 20))
    stepper.tick()

    new = stepper.start(make_events(0))
    assert new == old + 1
    assert stepper.is_stale(old)
    assert not stepper.is_stale(new)
    assert len(stepper.tick()) == 1
    assert stepper.pending == 0


def test_cancel_and_reset(clock):
    stepper = Stepper(clock=clock)
    stepper.start(make_events(0, 100))
    stepper.cancel()

    assert stepper.state is StepperState.IDLE
    assert not stepper.is_animating
    assert stepper.tick() == []
    assert stepper.run_id == 1

    stepper.reset()
    assert stepper.run_id == 0


def test_jump_to_end_and_callback(clock):
    seen = []
    stepper = Stepper(clock=clock, on_event=seen.append)
    stepper.start(make_events(0, 10, 20))

    rest = stepper.jump_to_end()
    assert [ev.col for ev in rest] == [0, 1, 2]
    assert seen == rest
    assert stepper.is_finished
    assert stepper.jump_to_end() == []


def test_empty_run_finishes_immediately(clock):
    stepper = Stepper(clock=clock)
    stepper.start([])
    assert stepper.is_finished
    assert not stepper.is_animating
