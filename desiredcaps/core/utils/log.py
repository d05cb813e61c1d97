import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    # stderr only: stdout carries the converted capabilities
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s [%(name)s:%(funcName)s] %(levelname)-8s : %(message)s',
    )
