"""Entry point for `python -m carcassonne`."""

from carcassonne import main

main()
