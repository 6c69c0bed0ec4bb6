"""
The MODEL layer contains pure data structures and geometry logic.
It has NO knowledge of the GUI (Qt).
It deals with line poses, rasterization and the Line capability contract.
"""
