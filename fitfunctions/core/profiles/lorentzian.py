"""
Lorentzian profile model.
"""

import numpy as np


def lorentzian(x, par):
    """
    Lorentzian (Cauchy) peak profile.
    
    Parameters
    ----------
    x : array_like
        Independent variable (x-axis data)
    par : array_like
        ``(amplitude, center, gamma)``: peak height, center (x₀) and
        half-width at half-maximum (γ)
    
    Returns
    -------
    array_like
        Lorentzian peak values at x positions
    
    Notes
    -----
    Mathematical form: f(x) = A * (γ² / ((x - x₀)² + γ²))
    """
    amplitude, center, gamma = par
    x = np.asarray(x)
    return amplitude * (gamma**2 / ((x - center)**2 + gamma**2))


lorentzian.parameter_names = ('amplitude', 'center', 'gamma')
