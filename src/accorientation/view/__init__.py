"""
The VIEW layer renders kernel results. It only reads model objects and never
changes them.
"""
