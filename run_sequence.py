# run_sequence.py
import sys

from noise_rng.cli import main

if __name__ == "__main__":
    sys.exit(main())
