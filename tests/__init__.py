"""
Only the root tests directory carries an __init__.py; test subdirectories are namespace packages
(PEP 420), which keeps the tree uncluttered while pytest still imports every module consistently.
"""
