from __future__ import annotations

from _infra import banner, run, show


def sum_pure(x: int, y: int) -> int:
    # Output depends only on inputs, nothing else happens.
    return x + y


def sum_with_side_effect(x: int, y: int) -> int:
    # Not pure: the print is not declared anywhere in the signature.
    print("I'm a side effect")
    return x + y


def main() -> None:
    banner("01_pure_functions: pure vs impure")

    show("sum_pure(4, 5)", sum_pure(4, 5))
    show("sum_with_side_effect(4, 5)", sum_with_side_effect(4, 5))


if __name__ == "__main__":
    run(main)
