"""
Usage:
    python -m repnum 42
    python -m repnum -b 16 ff
    python -m repnum --help
"""

from .cli import run

if __name__ == "__main__":
    run()
