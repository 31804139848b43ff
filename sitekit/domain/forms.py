from __future__ import annotations

__all__ = ["METHOD_FIELD", "method"]

# Form field read by method-override middleware.
METHOD_FIELD = "_method"


def method(name: str) -> str:
    """Return a hidden input that spoofs the HTTP method of an HTML form.

    The name is upper-cased but otherwise not checked: method("patch") gives
    <input type="hidden" name="_method" value="PATCH">.
    """
    return f'<input type="hidden" name="{METHOD_FIELD}" value="{name.upper()}">'
