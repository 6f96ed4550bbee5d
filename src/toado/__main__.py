# SPDX-License-Identifier: MIT

from toado import main

main()
