# SPDX-License-Identifier: MIT

from humantime.initialize import initialize
from humantime.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
