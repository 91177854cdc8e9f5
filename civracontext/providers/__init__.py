# civracontext/providers/__init__.py
