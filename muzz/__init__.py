"""Muzzle energy calculator package."""

__version__ = "1.1.0"
__author__ = "James Hendrie <hendrie.james@gmail.com>"

from muzz.adapter import MuzzleEnergyAPI

__all__ = ["MuzzleEnergyAPI"]
