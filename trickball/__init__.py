"""Bouncing-ball model with RK2 propagation and a Regula Falsi zero-crossing finder."""

__version__ = "0.1.0"

__all__ = ["ball", "model", "regula_falsi", "status"]