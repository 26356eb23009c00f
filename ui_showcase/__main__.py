"""Main entry point for running the showcase as a module.

This allows running with: python -m ui_showcase
"""

from .app import run


if __name__ == "__main__":
    run()
