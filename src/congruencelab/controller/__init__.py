"""
The CONTROLLER layer turns pointer input into in-place edits of the model.
"""
