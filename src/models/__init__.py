"""
Data models package.

Plain dataclasses mirroring the records served by the materials API.
"""

from .material import Material, MaterialDraft

__all__ = [
    "Material",
    "MaterialDraft",
]
