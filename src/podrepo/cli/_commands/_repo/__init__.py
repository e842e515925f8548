# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""Spec repo commands."""

from . import _list as _list, _push as _push
from ._app import app

__all__ = ["app"]
