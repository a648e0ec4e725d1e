"""Demonstration: python -m pymatrix"""

from pymatrix.dense import from_elements, one_filled


def main() -> None:
    m = from_elements(3, 2, [1, 2, 3, 90000, 5])
    print(m)

    n = from_elements(2, 3, [1, 0, 2, 0, 1, 3])
    print(m @ n)
    print(m * m)

    print(one_filled(8, 8))


if __name__ == "__main__":
    main()
