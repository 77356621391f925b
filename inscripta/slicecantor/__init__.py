"""
SliceCantor models regions of a genome assembly, including regions on circular replicons that wrap across
the origin, and projects them between assembly coordinate systems through injected data-access collaborators.
"""
__version__ = "0.1.0"
