"""Allow running Math Utils with ``python -m math_utils``."""

from math_utils.main import main

main()
