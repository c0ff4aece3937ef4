"""
lop — shorten links, paste code and upload files from the command line.
"""

__version__ = '0.3.0'
