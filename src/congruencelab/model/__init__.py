"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or of pointer handling.
It deals with Geometry, Measurements and Congruence rules.
"""
