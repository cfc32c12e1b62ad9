"""Bot Framework Activity protocol schema for Python.

Typed pydantic models for activities, cards, tokens and payments, with
camelCase JSON on the wire and round-trip preservation of unknown fields.
"""

from .config import Settings, cfg
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all
from .util import Result

__version__ = "0.1.0"

__all__ = ["Result", "Settings", "cfg", *_models_all]
