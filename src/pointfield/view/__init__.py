"""
The VIEW layer draws the scene with PyVista and exposes the inspector UI.
"""
