from __future__ import annotations

from _infra import banner, run, show

from purelog import Info, Logging, Warn, pure, run_io


def sum_w(x: int, y: int) -> Logging[int]:
    return Logging(Info(f"{x} + {y}"), x + y)


def neg_w(x: int) -> Logging[int]:
    return Logging(Warn(f"Neg {x}"), -x)


def main() -> None:
    banner("04_pure: empty effect + monad laws")

    show("pure(10)", pure(10).description)
    show("run_io(pure(10))", run_io(pure(10)))

    left = pure(9).bind(neg_w).normalized()
    show("left identity", left == neg_w(9).normalized())

    m = sum_w(4, 5)
    show("right identity", m.bind(pure).normalized() == m.normalized())

    nested = m.bind(neg_w).bind(neg_w).normalized()
    grouped = m.bind(lambda x: neg_w(x).bind(neg_w)).normalized()
    show("associativity", nested == grouped)


if __name__ == "__main__":
    run(main)
