"""
Demo: f(x, y) = x*y + sin(x) at (2, 3).

Seeding both x and y as inputs gives the derivative along (1, 1);
seeding only y gives ∂f/∂y. gradient() does one pass per input.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import dualdiff as dd


def f(xs):
    x, y = xs
    return dd.add(dd.mul(x, y), dd.sin(x))


def main():
    print("=" * 70)
    print("f(x,y) = x*y + sin(x) at x=2, y=3")
    print("=" * 70)

    # Both seeded: directional derivative along (1, 1)
    x = dd.input(2.0)
    y = dd.input(3.0)
    z = f([x, y])
    print(f"Value:           {z.value:.6f}")
    print(f"d/d(1,1):        {z.tangent:.6f}")

    # Only y seeded
    x = dd.scalar(2.0)
    y = dd.input(3.0)
    z = f([x, y])
    print(f"df/dy:           {z.tangent:.6f}")

    grad = dd.gradient(f, [2.0, 3.0])
    print(f"gradient:        [{grad[0]:.6f}, {grad[1]:.6f}]")

    check = dd.check_gradient(f, [2.0, 3.0])
    status = "✓" if check.passed else "✗"
    print(f"{status} finite-difference check, max abs error {check.max_abs_error:.2e}")


if __name__ == "__main__":
    main()
