from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .traits import SeekOrigin


class StreamException(Exception):
    pass


class InvalidSeekOffsetException(StreamException):
    offset: int
    origin: "SeekOrigin"
    target: int

    def __init__(self, offset: int, origin: "SeekOrigin", target: int):
        self.offset = offset
        self.origin = origin
        self.target = target
        super().__init__(
            f"Invalid seek offset {offset} from {origin.name}: target {target}"
        )


class InsufficientDataException(StreamException):
    expected: int
    actual: int

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} bytes, but only {actual} remain")


class NotEnoughSpaceException(StreamException):
    capacity: int
    required: int

    def __init__(self, capacity: int, required: int):
        self.capacity = capacity
        self.required = required
        super().__init__(
            f"Required {required} bytes, but capacity is fixed at {capacity}"
        )


class StaleViewException(StreamException):
    pass


class StreamClosedException(StreamException):
    pass
