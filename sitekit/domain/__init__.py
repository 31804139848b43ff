"""Pure domain helpers: paths, urls, request, forms.

These modules are free of response handling so they can be unit-tested and
reused outside the FastAPI app.
"""
__all__ = ["paths", "urls", "request", "forms"]
