from desiredcaps.bootstrap.config.settings import DesiredCapsConfig
from desiredcaps.core.diagnostics import get_sink
from desiredcaps.core.parser import CapabilityParser


def get_parser(config: DesiredCapsConfig) -> CapabilityParser:
    sink = get_sink(config.logging.diagnostics)
    return CapabilityParser(settings=config.parser, sink=sink)
