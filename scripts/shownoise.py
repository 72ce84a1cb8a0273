from subprocess import call
from sys import argv
from time import sleep, time

from fractal_noise import create_noise


_SHADES = " .:-=+*#%@"


def _shade(value):
    return _SHADES[min(int(value * len(_SHADES)), len(_SHADES) - 1)]


if __name__ == "__main__":
    # Run a visual test of a drifting noise field.
    seed = int(argv[1]) if len(argv) > 1 else int(time() % 10000)
    field = create_noise(seed=seed, octaves=4, wavelength=16)
    offset = 0
    while True:
        rows = field.generate_layer(109, 37, center=(offset, 0))
        call("clear")
        for row in rows:
            print("".join(_shade(value) for value in row))
        print("Seed: {}  X: {}  Lattice points: {}"
              .format(field.seed, offset, len(field.lattice)))
        offset += 1
        sleep(0.1)
