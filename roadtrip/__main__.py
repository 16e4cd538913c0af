"""Allow ``python -m roadtrip borders.txt capdist.csv state_name.tsv``."""

from .cli import run

if __name__ == "__main__":
    run()
