"""Entry point kept minimal by delegating to Engine.

Opens a window showing the folded four-tile ground plane under a single
point light, drawn solid white with its triangle edges overlaid.
"""

from core.engine import Engine  # noqa: E402 (local import order)


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
