# courses/services/__init__.py
