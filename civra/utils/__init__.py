# civra/utils/__init__.py
