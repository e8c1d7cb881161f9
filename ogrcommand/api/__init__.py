"""API router subpackage.

Submodules:
    - commands: endpoints rendering (and optionally running) ogr2ogr and
      ogrinfo command lines.
"""
