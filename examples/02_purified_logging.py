from __future__ import annotations

from _infra import banner, run, show

from purelog import Info, Logging, Warn, run_io


def sum_w(x: int, y: int) -> Logging[int]:
    """
    "Pure" logging function: the log is part of the result, no side effects.
    """
    return Logging(Info(f"{x} + {y}"), x + y)


def neg_w(x: int) -> Logging[int]:
    return Logging(Warn(f"Neg {x}"), -x)


def main() -> None:
    banner("02_purified_logging: logging as data + interpreter")

    operation = sum_w(4, 5)
    show("sum_w(4, 5)", operation.description)
    show("neg_w(7)", neg_w(7).description)
    show("log is Info(4 + 5)", operation.log.description == "Info(4 + 5)")
    show("result is 9", operation.result == 9)

    # The interpreter removes the decoration and returns the pure value.
    show("run_io", run_io(sum_w(4, 5)))
    show("run_io", run_io(sum_w(2, 3)))
    show("run_io", run_io(neg_w(8)))


if __name__ == "__main__":
    run(main)
