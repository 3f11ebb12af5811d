"""Entry point kept minimal by delegating to Engine.

Opens the dungeon scene with the darkness overlay attached. Darkness starts
off by default (see config.DARKNESS_ENABLED); press F in game to toggle it.
"""

from core.engine import Engine  # noqa: E402 (local import order)


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
