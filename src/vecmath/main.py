# vecmath/main.py
import copy

import numpy as np

from vecmath.vector import Vector3


def main():
    v1 = Vector3(x=np.int64(1), y=np.int64(2), z=np.int64(3))
    v2 = Vector3.new(np.int64(3), np.int64(4), np.int64(5))
    print(v1)
    print(v1 + v2)
    print(v2)

    # Vector3 is mutable, so take a copy before adding in place
    v3 = copy.copy(v2)
    v3 += v3
    print(v3)
    print(v3 - v1)
    print(f"{-v1} {(-v1).abs()}")


if __name__ == "__main__":
    main()
