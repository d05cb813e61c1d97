from desiredcaps.core.parser import CapabilityParser
from desiredcapsctl.commands import COMMANDS

PROMPT = "desiredcaps> "


def repl(parser: CapabilityParser, read=input, write=print) -> None:
    while True:
        try:
            line = read(PROMPT).strip()
        except EOFError:
            break

        if not line:
            continue

        parts = line.split(maxsplit=1)
        op = parts[0]

        if op in ("quit", "exit"):
            break

        if op not in COMMANDS:
            write("Unknown command. Available:")
            for name in COMMANDS:
                write(f"  {name}")
            continue

        args = parts[1] if len(parts) > 1 else ""

        try:
            write(COMMANDS[op](parser, args))
        except Exception as exc:
            write(f"Error: {exc}")
