"""Tests for engine lifecycle, tick counting, and pacing."""

import time

from tick.engine import Engine
from tick.types import TickFlavor


# --- Initialization ---

def test_engine_init_defaults():
    engine = Engine()
    assert engine.clock.tps == 20
    assert engine.clock.tick_number == 0
    assert engine.clock.flavor is TickFlavor.DRIVEN


def test_engine_init_custom_tps_and_flavor():
    engine = Engine(tps=60, flavor=TickFlavor.DRIVING)
    assert engine.clock.tps == 60
    assert engine.clock.flavor is TickFlavor.DRIVING


# --- System registration ---

def test_systems_run_in_order():
    engine = Engine()
    order = []

    engine.add_system(lambda ctx: order.append("first"))
    engine.add_system(lambda ctx: order.append("second"))
    engine.add_system(lambda ctx: order.append("third"))
    engine.step()
    assert order == ["first", "second", "third"]


def test_systems_receive_flavor_and_dt():
    engine = Engine(tps=50, flavor=TickFlavor.DRIVING)
    seen = []

    engine.add_system(lambda ctx: seen.append((ctx.flavor, ctx.dt)))
    engine.step()
    assert seen == [(TickFlavor.DRIVING, 0.02)]


# --- step() ---

def test_step_advances_one_tick():
    engine = Engine()
    engine.add_system(lambda ctx: None)
    engine.step()
    assert engine.clock.tick_number == 1
    engine.step()
    assert engine.clock.tick_number == 2


def test_step_does_not_call_hooks():
    engine = Engine()
    hooks_called = []

    engine.on_start(lambda ctx: hooks_called.append("start"))
    engine.on_stop(lambda ctx: hooks_called.append("stop"))
    engine.step()
    assert hooks_called == []


# --- run(n) ---

def test_run_n_ticks():
    engine = Engine()
    tick_numbers = []

    engine.add_system(lambda ctx: tick_numbers.append(ctx.tick_number))
    engine.run(5)
    assert tick_numbers == [1, 2, 3, 4, 5]
    assert engine.clock.tick_number == 5


def test_run_calls_start_and_stop_hooks():
    engine = Engine()
    events = []

    engine.on_start(lambda ctx: events.append("start"))
    engine.on_stop(lambda ctx: events.append("stop"))
    engine.add_system(lambda ctx: events.append(f"tick-{ctx.tick_number}"))
    engine.run(2)
    assert events == ["start", "tick-1", "tick-2", "stop"]


def test_run_hooks_receive_boundary_contexts():
    engine = Engine()
    seen = []

    engine.on_start(lambda ctx: seen.append(("start", ctx.tick_number)))
    engine.on_stop(lambda ctx: seen.append(("stop", ctx.tick_number)))
    engine.run(5)
    assert seen == [("start", 0), ("stop", 5)]


def test_run_zero_ticks():
    engine = Engine()
    events = []

    engine.on_start(lambda ctx: events.append("start"))
    engine.on_stop(lambda ctx: events.append("stop"))
    engine.run(0)
    assert events == ["start", "stop"]


# --- request_stop ---

def test_request_stop_from_system():
    engine = Engine()
    tick_numbers = []

    def stop_at_3(ctx):
        tick_numbers.append(ctx.tick_number)
        if ctx.tick_number == 3:
            ctx.request_stop()

    engine.add_system(stop_at_3)
    engine.run(100)
    assert tick_numbers == [1, 2, 3]


def test_request_stop_prevents_later_systems_in_same_tick():
    engine = Engine()
    calls = []

    def stopper(ctx):
        calls.append("stopper")
        ctx.request_stop()

    engine.add_system(stopper)
    engine.add_system(lambda ctx: calls.append("after"))
    engine.run(1)
    assert calls == ["stopper"]


# --- run_forever ---

def test_run_forever_stops_on_request():
    engine = Engine(tps=1000)
    tick_nums = []

    def sys(ctx):
        tick_nums.append(ctx.tick_number)
        if ctx.tick_number >= 5:
            ctx.request_stop()

    engine.add_system(sys)
    engine.run_forever()
    assert tick_nums == [1, 2, 3, 4, 5]


def test_run_forever_calls_hooks():
    engine = Engine(tps=1000)
    events = []

    engine.on_start(lambda ctx: events.append("start"))
    engine.on_stop(lambda ctx: events.append("stop"))

    def sys(ctx):
        events.append(f"tick-{ctx.tick_number}")
        if ctx.tick_number >= 2:
            ctx.request_stop()

    engine.add_system(sys)
    engine.run_forever()
    assert events == ["start", "tick-1", "tick-2", "stop"]


def test_run_forever_pacing():
    engine = Engine(tps=100)  # 10ms per tick
    start_time = time.monotonic()
    count = [0]

    def sys(ctx):
        count[0] += 1
        if count[0] >= 5:
            ctx.request_stop()

    engine.add_system(sys)
    engine.run_forever()
    elapsed = time.monotonic() - start_time
    # 4 full sleeps before the 5th tick stops; generous bound for slow machines
    assert elapsed >= 0.03
