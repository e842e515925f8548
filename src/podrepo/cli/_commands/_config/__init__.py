# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""Config commands."""

from . import _show as _show
from ._app import app

__all__ = ["app"]
