"""Interactive line loop over a Session.

Reads stdin until 'exit'/'quit' or EOF. Input errors and division by
zero are reported and the loop continues.
"""

from __future__ import annotations

from memocalc.cli.session import Session
from memocalc.config import CalcConfig


BANNER = "memocalc (undo/redo calculator). Type 'help' for commands.\n"


def run_repl(cfg: CalcConfig, session: Session | None = None) -> Session:
    session = session or Session()

    if cfg.banner:
        print(BANNER)

    while True:
        try:
            line = input(cfg.prompt)
        except EOFError:
            print()
            print("Bye!")
            break

        reply = session.handle_line(line)
        if reply is None:
            continue
        print(reply.message)
        if reply.done:
            break

    return session
