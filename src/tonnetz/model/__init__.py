"""
The MODEL layer contains pure value types and lattice math.
It has NO knowledge of the GUI (Qt) or of any rendering.
It deals with pitch classes, projection, hit testing and chord placement.
"""
