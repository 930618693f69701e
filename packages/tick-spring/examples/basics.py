"""Springs on a tick engine -- the three damping regimes.

Demonstrates:
- Bridging the engine to a FrameClock with make_clock_system
- Retargeting springs with set_target
- Listening to on_step and on_complete
- Deferring a goal with initial_goal

Run: python -m examples.basics
"""

from tick import Engine
from tick_spring import FrameClock, Spring, make_clock_system


def main() -> None:
    print("=== Spring regimes ===\n")

    engine = Engine(tps=30)
    clock = FrameClock()
    engine.add_system(make_clock_system(clock))

    springs = {
        "under": Spring(0.0, frequency=1.0, damping=0.3, clock=clock),
        "critical": Spring(0.0, frequency=1.0, damping=1.0, clock=clock),
        "over": Spring(0.0, frequency=1.0, damping=2.0, clock=clock),
    }

    for name, spring in springs.items():
        spring.on_complete.connect(
            lambda name=name: print(
                f"  {name:>8} settled at tick {engine.clock.tick_number}"
            )
        )
        spring.set_target(1.0)

    # Print a row every 5 ticks.
    def report(ctx) -> None:
        if ctx.tick_number % 5 == 0:
            row = "  ".join(
                f"{name}={spring.value:+.3f}" for name, spring in springs.items()
            )
            print(f"  t={ctx.elapsed:5.2f}s  {row}")

    # Stop once every watched spring has settled.
    watched = list(springs.values())

    def stop_when_settled(ctx) -> None:
        if not any(spring.active for spring in watched):
            ctx.request_stop()

    engine.add_system(report)
    engine.add_system(stop_when_settled)
    engine.run_forever()

    print("\n=== Deferred goal ===\n")
    vector = Spring((0.0, 0.0), initial_goal=(3.0, 4.0), clock=clock)
    watched[:] = [vector]
    engine.step()
    print(f"  after one tick: active={vector.active} value={vector.value}")
    engine.run_forever()
    print(f"  after settling: value={vector.value}")


if __name__ == "__main__":
    main()
