# civra/core/__init__.py
