"""
The MODEL layer contains pure data structures and parsing logic.
It deals with the OBJ grammar, the resolved geometry, and I/O.
"""
