"""Core calculation modules for MoistAir.

This package contains the psychrometric calculations:
- saturation: Saturation vapour pressure of water (ASHRAE correlation)
- humidity: Humidity input normalisation to humidity ratio
- properties: Density, specific volume, enthalpy and full state bundles
- solvers: Bracketed root finding for dewpoint and wetbulb temperature
- errors: Exception hierarchy
- config: Solver settings and state persistence (JSON)
"""
