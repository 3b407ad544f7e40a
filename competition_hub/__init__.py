"""Competition Hub API package.

Keeps the local ``competition_hub`` package as a regular package so imports
never resolve to a namespace package picked up from site-packages.
"""
