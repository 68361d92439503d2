from collections.abc import Buffer, Iterator
from typing import Protocol, overload

from .error import StaleViewException


class _Generational(Protocol):
    @property
    def generation(self) -> int: ...


class BorrowedView:
    """
    Read-only window into the storage of a stream, created without copying.

    The view is bound to the storage generation of its owner at creation
    time. Any write, reallocation or close of the owner advances the
    generation, after which every access raises `StaleViewException`.
    Seeking and reading leave the generation untouched.
    """

    _owner: _Generational
    _generation: int
    _view: memoryview
    _released: bool

    def __init__(self, owner: _Generational, view: memoryview):
        self._owner = owner
        self._generation = owner.generation
        self._view = view.toreadonly()
        self._released = False

    def _checked(self) -> memoryview:
        if self._released:
            raise StaleViewException("View has been released")
        if self._owner.generation != self._generation:
            raise StaleViewException(
                f"View of generation {self._generation} is stale, "
                f"stream is at generation {self._owner.generation}"
            )
        return self._view

    @property
    def is_valid(self) -> bool:
        return not self._released and self._owner.generation == self._generation

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._view.release()

    def tobytes(self) -> bytes:
        return self._checked().tobytes()

    def copy_into(self, target: Buffer) -> int:
        """
        Copy the viewed bytes to the front of `target` and return the count.
        """
        source = self._checked()
        with memoryview(target) as raw, raw.cast("B") as dest:
            dest[: len(source)] = source
        return len(source)

    def __enter__(self) -> "BorrowedView":
        return self

    def __exit__(self, *_) -> None:
        self.release()

    def __buffer__(self, flags: int) -> memoryview:
        return self._checked()[:]

    def __bytes__(self) -> bytes:
        return self.tobytes()

    def __len__(self) -> int:
        return len(self._checked())

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> bytes: ...

    def __getitem__(self, index: int | slice) -> int | bytes:
        value = self._checked()[index]
        if isinstance(value, memoryview):
            return value.tobytes()
        return value

    def __iter__(self) -> Iterator[int]:
        return iter(self.tobytes())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BorrowedView):
            return self._checked() == other._checked()
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._checked() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self.is_valid:
            return "BorrowedView(<stale>)"
        return f"BorrowedView({self._view.tobytes()!r})"
