"""
file_refactor - Console wizards for renaming and creating files in batches
"""

__version__ = "0.1.0"
