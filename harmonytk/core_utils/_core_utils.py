# !/usr/bin/python
# coding=utf-8
import inspect
import contextlib
from functools import wraps
from typing import Callable, Iterator

import pythontk as ptk


class CoreUtils(ptk.CoreUtils):
    """ """

    @staticmethod
    @contextlib.contextmanager
    def undo_chunk(scene, name: str) -> Iterator[None]:
        """Context manager to place everything done inside it into a single host undo entry.

        The accumulation is always closed, including when the body raises.
        Nothing is rolled back; whatever was changed before the error is undone as one step.

        Parameters:
            scene (HostScene): The scene whose undo stack receives the entry.
            name (str): The name of the undo entry.
        """
        scene.begin_undo(name)
        try:
            yield
        finally:
            scene.end_undo()

    def undoable(name: str) -> Callable:
        """A decorator to place a function into the host's undo stack as a single named entry.
        The decorated function must take a ``scene`` parameter.

        Parameters:
            name (str): The name of the undo entry.

        Example:
            @CoreUtils.undoable("Reset_Pegs")
            def reset_pegs(scene, nodes): ...
        """
        if callable(name):
            raise TypeError("undoable requires an undo name: @CoreUtils.undoable('Name')")

        def decorator(fn: Callable) -> Callable:
            signature = inspect.signature(fn)
            if "scene" not in signature.parameters:
                raise ValueError(f"'{fn.__qualname__}' has no 'scene' parameter.")

            @wraps(fn)
            def wrapper(*args, **kwargs):
                scene = signature.bind(*args, **kwargs).arguments["scene"]
                with CoreUtils.undo_chunk(scene, name):
                    return fn(*args, **kwargs)

            return wrapper

        return decorator


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    pass

# -----------------------------------------------------------------------------
# Notes
# -----------------------------------------------------------------------------
