"""Integer arithmetic on two numbers, with a fixed and a whimsical mode."""

from __future__ import annotations

import argparse
import operator
from typing import Callable, Sequence


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS: dict[int, Callable[[int, int], int]] = {
    1: operator.add,
    2: operator.sub,
    3: operator.mul,
    4: _truncating_div,
}


def calculate(a: int, b: int, operation: int) -> int:
    """Apply operation 1 (+), 2 (-), 3 (*) or 4 (/, truncating toward zero)."""
    try:
        func = _OPERATIONS[operation]
    except KeyError:
        raise ValueError("없는 계산식입니다.") from None
    return func(a, b)


def whimsical(a: int, b: int) -> tuple[str, int | None]:
    """Add if the first is larger, subtract if smaller, give up if equal."""
    if a > b:
        return "첫번째 값이 더 크네요.", a + b
    if a < b:
        return "첫번째 값이 더 작네요.", a - b
    return "두 값이 같네요. 흥미가 사라졌습니다.", None


def _read_int() -> int:
    while True:
        try:
            return int(input().strip())
        except ValueError:
            print("정수를 입력해주세요.")


def _run_calculator() -> int:
    print("계산을 도와드립니다.")
    a, b = _read_int(), _read_int()
    print("원하는 계산식은 무엇인가요?")
    print("1. 더하기 +\n2. 빼기 -\n3. 곱하기 *\n4. 나누기 /")
    operation = _read_int()
    try:
        print(f"답 : {calculate(a, b, operation)}")
    except ValueError as error:
        print(error)
    except ZeroDivisionError:
        print("0으로 나눌 수 없습니다.")
        return 1
    return 0


def _run_whimsical() -> int:
    print("제 맘대로 계산해볼게요.")
    a, b = _read_int(), _read_int()
    message, answer = whimsical(a, b)
    print(message)
    if answer is not None:
        print(f"답 : {answer}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Read two integers and an operation, then print the answer."""
    parser = argparse.ArgumentParser(description="Two-number calculator.")
    parser.add_argument(
        "--whimsical",
        action="store_true",
        help="pick the operation from how the numbers compare",
    )
    args = parser.parse_args(argv)
    try:
        return _run_whimsical() if args.whimsical else _run_calculator()
    except EOFError:
        return 1