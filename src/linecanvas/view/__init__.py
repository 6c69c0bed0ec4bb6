"""
The VIEW layer holds everything that touches Qt's graphics scene:
the drawing surface wrapper, both line variants and the main window.
"""
