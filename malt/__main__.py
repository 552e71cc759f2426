"""Console REPL for malt.

Reads one line at a time from stdin, prints the result or `error: <message>`.
End of input prints a farewell and exits normally.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from malt import config
from malt.errors import MaltError
from malt.interpreter import Interpreter

logger = logging.getLogger("malt.repl")


def repl(
    interp: Interpreter,
    prompt: str,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            print("Goodbye!", file=stdout)
            return
        line = line.rstrip("\r\n")
        try:
            print(interp.rep(line), file=stdout)
        except MaltError as ex:
            logger.debug("line %r failed: %s", line, ex)
            print(f"error: {ex}", file=stdout)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="malt", description="malt Lisp REPL")
    parser.add_argument("--prompt", default=config.get_prompt(), help="prompt written before each read")
    parser.add_argument("--log-level", default=config.get_log_level(), help="logging level (DEBUG, INFO, ...)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    repl(Interpreter(), args.prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
