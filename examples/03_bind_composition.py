from __future__ import annotations

from _infra import banner, run, show

from purelog import Info, MultiLog, Warn, lift as L, run_io


@L.logged(Info, lambda x, y: f"{x} + {y}")
def sum_w(x: int, y: int) -> int:
    return x + y


@L.logged(Warn, lambda x: f"Neg {x}")
def neg_w(x: int) -> int:
    return -x


def main() -> None:
    banner("03_bind_composition: MultiLog + bind")

    # neg_w(sum_w(4, 5)) does not type check: neg_w wants an int.
    show("MultiLog", MultiLog.of(Info("info1"), Warn("warn1")).description)

    program = sum_w(4, 5).bind(neg_w)
    show("sum_w(4, 5).bind(neg_w)", program.description)
    show("run_io", run_io(program))


if __name__ == "__main__":
    run(main)
