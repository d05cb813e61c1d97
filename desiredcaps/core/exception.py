class ScanError(Exception):
    pass


class NestingTooDeep(ScanError):
    """
    Raised once a structured value has been scanned past ``max_depth``.

    ``stop`` is where the value really ends (its closer, or the end of the
    input), so the caller can carry on with the next entry.
    """

    def __init__(self, position: int, max_depth: int, stop: int):
        self.position = position
        self.max_depth = max_depth
        self.stop = stop
        super().__init__(f"Nesting depth exceeds {max_depth} at character {position}")
