"""
Matplotlib overlay of fit function curves.
"""

import numpy as np
import matplotlib.pyplot as plt

from .core.rendering import DEFAULT_NPOINTS


def plot_fit_function(ff, ax=None, npoints=DEFAULT_NPOINTS, use_initial_parameters=False,
                      bin_width=1.0, **plot_kws):
    """
    Draw the model of a fit function over its first fit range.
    
    Parameters
    ----------
    ff : FitFunction
        Fit function to draw
    ax : matplotlib.axes.Axes, optional
        Axes to draw on, default the current axes
    npoints : int, optional
        Number of samples, default 501
    use_initial_parameters : bool, optional
        Draw with the initial instead of the fitted parameters
    bin_width : float, optional
        Scale factor applied to the model values
    **plot_kws
        Passed to ``Axes.plot``; override the default color and label
    
    Returns
    -------
    matplotlib.lines.Line2D
        The drawn line
    """
    if ax is None:
        ax = plt.gca()
    
    series = ff.curve(npoints=npoints, use_initial_parameters=use_initial_parameters,
                      bin_width=bin_width)
    x, y = series.evaluate()
    style = series.style
    style.update(plot_kws)
    line, = ax.plot(x, y, '-', **style)
    return line


def plot_fit(ff, x_data, y_data, ax=None, show_initial=False, **kwargs):
    """
    Draw data points with the fitted model on top.
    
    Parameters
    ----------
    ff : FitFunction
        Fitted fit function
    x_data, y_data : array_like
        Data to draw as points
    ax : matplotlib.axes.Axes, optional
        Axes to draw on, default the current axes
    show_initial : bool, optional
        Also draw the model with the initial parameters
    **kwargs
        Passed to :func:`plot_fit_function`
    
    Returns
    -------
    matplotlib.axes.Axes
    """
    if ax is None:
        ax = plt.gca()
    
    ax.plot(np.asarray(x_data), np.asarray(y_data), 'o', markersize=4, label='Data',
            alpha=0.6, color='#34495e')
    if show_initial:
        plot_fit_function(ff, ax=ax, use_initial_parameters=True, **kwargs)
    plot_fit_function(ff, ax=ax, **kwargs)
    ax.legend(loc='best', fontsize=9)
    ax.grid(True, alpha=0.3)
    return ax
