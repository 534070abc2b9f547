"""
The MODEL layer contains pure value types and the geometry kernel.
It has NO knowledge of the Visualization (matplotlib) or the command line.
It deals with Vectors, Rotations and Orientation frames.
"""
