# SPDX-License-Identifier: MIT

from weekplan.cleanup import register_cleanup
from weekplan.initialize import initialize
from weekplan.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
