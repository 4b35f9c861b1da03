"""
The VIEW layer contains the PySide6 widgets.
It reads from and writes to the LogBook, and holds no calculation logic.
"""
