"""State/tree layer.

Pure helpers that locate an action's data in the nested state tree and
compute the next tree without mutating the previous one.
"""
