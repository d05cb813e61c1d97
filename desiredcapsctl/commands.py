import json

from desiredcaps.core.model.capability import kind_of
from desiredcaps.core.parser import CapabilityParser
from desiredcaps.core.types_ import Capabilities


COMMANDS = {}

def command(name):
    def decorator(fn):
        COMMANDS[name] = fn
        return fn
    return decorator


def render_json(capabilities: Capabilities) -> str:
    return json.dumps(capabilities, indent=2, ensure_ascii=False)


def render_explain(capabilities: Capabilities) -> str:
    lines = []
    for name, value in capabilities.items():
        shown = json.dumps(value, ensure_ascii=False)
        lines.append(f"{name}: {kind_of(value).name} = {shown}")
    return "\n".join(lines)


@command("parse")
def cmd_parse(parser: CapabilityParser, args: str) -> str:
    """
    Handle the 'parse' command.

    Expected syntax:
        parse <capabilities>

    The whole remainder of the line is the capability string, commas and
    quotes included; it is not shell-split.
    """
    return render_json(parser.convert(args))


@command("explain")
def cmd_explain(parser: CapabilityParser, args: str) -> str:
    return render_explain(parser.convert(args))


@command("help")
def cmd_help(parser: CapabilityParser, args: str) -> str:
    return "\n".join([
        "Commands:",
        "  parse <capabilities>",
        "  explain <capabilities>",
        "  help",
        "  exit",
    ])
