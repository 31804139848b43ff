"""Response-side helpers: redirects and error rendering."""
from .errors import ErrorRenderer, ErrorReporter, HaltResponse
from .redirects import redirect

__all__ = ["ErrorRenderer", "ErrorReporter", "HaltResponse", "redirect"]
