"""
Templates and visual telemetry constants.
"""

# GOSKEL: ANSI Cyan (\033[36m)
_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_GOSKEL_ART: str = r"""
   ____  ___  ____  _  __ ____ __
  / ___|/ _ \/ ___|| |/ /| ___|| |
 | |  _| | | \___ \| ' / |  _| | |
 | |_| | |_| |___) | . \ | |___| |___
  \____|\___/|____/|_|\_\|_____|_____|   Template Initializer
"""
GOSKEL_BANNER = _CYAN + _GOSKEL_ART + _RESET

MAIN_GO_TEMPLATE: str = """package main

import (
\t"fmt"
\t"os"
)

func main() {
\tfmt.Println("Hello, World!")
\tos.Exit(0)
}
"""

# Formatted with the entry point path, e.g. ./cmd/foo/main.go
MAKEFILE_TEMPLATE: str = "all:\n\tgo run ./{entry_point}\n"

# Directories created next to cmd/<segment>
SKELETON_DIRECTORIES: tuple[str, ...] = ("pkg", "internal")

REMOTE_SCHEMES: tuple[str, ...] = ("https://", "http://", "ssh://", "git://")
