#!/usr/bin/env python3
"""
Demo: Centering and rotating a small 3-D point set with CoordMatrix.

Shows the view/copy split (row views write through, clones don't),
row selection with untrusted indices, and the parallel product.
"""

import numpy as np

from coordmatrix import new_matrix, zeros, empty_matrix


def main():
    print("=" * 50)
    print("CoordMatrix: 3-D coordinate demo")
    print("=" * 50)

    # Four points, one per row
    pts = new_matrix([
        1.0, 0.0, 0.0,
        0.0, 1.0, 0.0,
        0.0, 0.0, 1.0,
        1.0, 1.0, 1.0,
    ], 4, 3)
    n, d = pts.dims()

    # Centroid as a 1 x 3 row: ones(1, n) × pts / n
    ones = new_matrix([1.0] * n, 1, n)
    centroid = zeros(1, d)
    centroid.mul(ones, pts)
    centroid.scale(1.0 / n, centroid)
    print(f"\nCentroid: {centroid.row(0)}")

    centered = zeros(n, d)
    centered.sub_row(pts, centroid)
    print(f"Centered sum (should be 0): {centered.sum():.2e}")

    # 90° about z, applied as pts × Rᵀ
    c, s = np.cos(np.pi / 2), np.sin(np.pi / 2)
    rot_t = new_matrix([c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0], 3, 3)
    rotated = zeros(n, d)
    rotated.mul(centered, rot_t)
    print(f"\nRotated:\n{rotated}")

    # Views alias, clones copy
    first = empty_matrix()
    first.row_view(rotated, 0)
    first.scale(0.0, first)
    print(f"\nRow 0 after zeroing its view: {rotated.row(0)}")

    # Untrusted indices go through the safe variant
    picked = zeros(2, d)
    err = picked.select_rows_safe(rotated, [1, 9])
    print(f"\nselect_rows_safe([1, 9]) -> {err!r}")


if __name__ == "__main__":
    main()
