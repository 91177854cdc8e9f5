# civracontext/core/__init__.py
