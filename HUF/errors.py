class InputUnavailable(OSError):
    """Source file or stream cannot be opened or read."""


class MalformedHeader(ValueError):
    """Frequency table header cannot be parsed back from a container."""


class TraversalError(ValueError):
    """A walk through the Huffman tree reached a missing child."""
