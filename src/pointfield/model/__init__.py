"""
The MODEL layer contains pure data structures and generation logic.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It deals with grid geometry, the scalar field and instance attributes.
"""
