"""Small demonstration of the container's traversal orders."""

from __future__ import annotations

from typing import Iterable, Sequence

from multiorder.container import MyContainer


def _print_row(values: Iterable[object]) -> None:
    print("".join(f"{value} " for value in values))


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a container with sample numbers and print each traversal."""
    container: MyContainer[int] = MyContainer()
    for value in (7, 15, 6, 1, 2):
        container.add_element(value)

    print(f"Size of container: {len(container)}")
    _print_row(container.ascending())
    _print_row(container.descending())
    _print_row(container.side_cross())
    _print_row(container.reverse())
    _print_row(container.order())
    _print_row(container.middle_out())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())