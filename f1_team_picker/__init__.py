"""
F1 Team Picker Package

An F1 Fantasy team optimizer for a single transfer window. Given priced driver and
constructor pools with projected points and the user's current roster, it searches
every feasible 5-driver / 2-constructor combination under the budget, ranks them by
projected points net of transfer penalties, and works out the transfers needed to
reach a chosen team.
"""

__version__ = "1.0.0"
