# SPDX-License-Identifier: MIT

from toado.terminal.app import run


def main() -> None:
    run()
