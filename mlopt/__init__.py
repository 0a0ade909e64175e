"""Stochastic first-order optimization of decomposable objectives."""
