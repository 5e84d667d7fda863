"""Application Layer.

Infrastructure that orchestrates domain logic.
This layer handles I/O (report files, text rendering) and coordinates
domain operations.
"""
