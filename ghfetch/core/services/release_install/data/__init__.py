"""
L0 Data — static tables used by every other layer.
"""
