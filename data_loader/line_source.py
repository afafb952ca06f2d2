from typing import Iterator, TextIO


def iter_lines(handle: TextIO) -> Iterator[str]:
    """
    Yield the lines of an already opened text stream without their line endings.
    The caller owns the handle; it is read lazily until end of input.
    """
    for line in handle:
        yield line.rstrip("\r\n")
