# logbook/services/__init__.py
