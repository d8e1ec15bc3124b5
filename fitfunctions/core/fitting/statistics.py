"""
Goodness-of-fit statistics for fit functions.
"""

import numpy as np

from ..errors import ShapeMismatch


def calculate_statistics(y_data, y_model, n_params, weights=None):
    """
    Calculate goodness-of-fit statistics.
    
    Parameters
    ----------
    y_data : array_like
        Measured Y data
    y_model : array_like
        Model Y values at the same points
    n_params : int
        Number of fitted parameters
    weights : array_like, optional
        Residual weights (e.g. 1/sigma); chi-squared uses weighted residuals
    
    Returns
    -------
    stats : dict
        'r_squared', 'adj_r_squared', 'chi_squared', 'reduced_chi_squared',
        'rmse', 'aic', 'bic', 'n_data', 'n_params' and 'dof'
    """
    y_data = np.asarray(y_data, dtype=float)
    y_model = np.asarray(y_model, dtype=float)
    if y_data.shape != y_model.shape:
        raise ShapeMismatch("Model values do not match the data",
                            expected=y_data.size, actual=y_model.size)
    
    n = y_data.size
    residuals = y_data - y_model
    ss_res = np.sum(residuals**2)
    ss_tot = np.sum((y_data - np.mean(y_data))**2)
    
    weighted = residuals if weights is None else residuals * np.asarray(weights, dtype=float)
    chi_squared = np.sum(weighted**2)
    dof = n - n_params
    
    r_squared = 1 - ss_res / ss_tot if ss_tot != 0 else 0.0
    stats = {
        'r_squared': r_squared,
        'adj_r_squared': _adjusted_r_squared(r_squared, n, n_params),
        'chi_squared': chi_squared,
        'reduced_chi_squared': chi_squared / dof if dof > 0 else np.inf,
        'rmse': np.sqrt(ss_res / n) if n else np.nan,
        'n_data': n,
        'n_params': n_params,
        'dof': dof,
    }
    
    # AIC = n*ln(chi2/n) + 2k, BIC = n*ln(chi2/n) + k*ln(n)
    if chi_squared > 0 and n > 0:
        log_likelihood_term = n * np.log(chi_squared / n)
        stats['aic'] = log_likelihood_term + 2 * n_params
        stats['bic'] = log_likelihood_term + n_params * np.log(n)
    else:
        stats['aic'] = -np.inf
        stats['bic'] = -np.inf
    
    return stats


def _adjusted_r_squared(r_squared, n, k):
    if n > k + 1:
        return 1 - (1 - r_squared) * (n - 1) / (n - k - 1)
    return r_squared


def extract_lmfit_statistics(result):
    """
    Extract statistics from an lmfit MinimizerResult.
    
    Parameters
    ----------
    result : lmfit.minimizer.MinimizerResult
        Backend result stored on a fit function
    
    Returns
    -------
    stats : dict
        Same keys as :func:`calculate_statistics` except the R² entries,
        which need the data and are left out
    """
    return {
        'chi_squared': result.chisqr,
        'reduced_chi_squared': result.redchi,
        'aic': result.aic,
        'bic': result.bic,
        'rmse': np.sqrt(result.chisqr / result.ndata),
        'n_data': result.ndata,
        'n_params': result.nvarys,
        'dof': result.nfree,
    }


def format_statistics(stats):
    """
    Format statistics for display.
    
    Parameters
    ----------
    stats : dict
        Statistics dictionary
    
    Returns
    -------
    str
        One statistic per line; missing entries are skipped
    """
    rows = [
        ('r_squared', "R² = {:.6f}"),
        ('adj_r_squared', "Adj. R² = {:.6f}"),
        ('rmse', "RMSE = {:.6e}"),
        ('chi_squared', "χ² = {:.6e}"),
        ('reduced_chi_squared', "Reduced χ² = {:.6f}"),
        ('aic', "AIC = {:.2f}"),
        ('bic', "BIC = {:.2f}"),
        ('n_data', "N data = {}"),
        ('n_params', "N parameters = {}"),
        ('dof', "Degrees of freedom = {}"),
    ]
    lines = ["=== Fit Statistics ==="]
    lines.extend(template.format(stats[key]) for key, template in rows if key in stats)
    return '\n'.join(lines)
