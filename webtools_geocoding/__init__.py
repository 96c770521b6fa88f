from .geocode import *  # noqa: F401,F403
from .geocode import __all__

__version__ = "1.0.0"
