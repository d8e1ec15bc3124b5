"""
Fit function configuration files.

A configuration is a JSON object such as::

    {
      "profile": "gaussian",
      "precision": "float64",
      "fit_ranges": [[0, 10]],
      "initial_parameters": {"amplitude": 1.0, "center": 5.0, "sigma": 1.0},
      "parameter_bounds": [[0, 100], [0, 10], [0.001, 5]],
      "render": {"npoints": 1001, "bin_width": 0.5}
    }

``profile`` names a registered profile model. Without it the model is
passed to :func:`fit_function_from_config` and ``nparams`` (and ``ndims``
for multi-dimensional models) must be given.
"""

import json
from collections.abc import Mapping

from .errors import InvalidArgument
from .fit_function import FitFunction
from .profiles import make_fit_function
from .rendering import DEFAULT_NPOINTS


DEFAULTS = {
    'precision': 'float64',
    'render': {
        'npoints': DEFAULT_NPOINTS,
        'use_initial_parameters': False,
        'bin_width': 1.0,
    },
}

CONFIG_KEYS = (
    'profile',
    'precision',
    'ndims',
    'nparams',
    'fit_ranges',
    'parameter_names',
    'initial_parameters',
    'parameter_bounds',
    'render',
)


def _check_config(config):
    if not isinstance(config, dict):
        raise InvalidArgument(f"Configuration must be a JSON object, got {type(config).__name__}")
    unknown = set(config) - set(CONFIG_KEYS)
    if unknown:
        raise InvalidArgument(f"Unknown configuration keys: {sorted(unknown)}")
    unknown_render = set(config.get('render', {})) - set(DEFAULTS['render'])
    if unknown_render:
        raise InvalidArgument(f"Unknown render options: {sorted(unknown_render)}")


def load_fit_config(filepath):
    """
    Read a fit function configuration from a JSON file.

    Raises
    ------
    InvalidArgument
        If the file does not hold a valid configuration object
    """
    with open(filepath, 'r') as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidArgument(f"Invalid configuration file {filepath}: {e}") from e
    _check_config(config)
    return config


def _initial_values_by_name(ff, initial_parameters):
    """Values of a name to value mapping in the order of the parameter names."""
    values = {str(name): value for name, value in initial_parameters.items()}
    names = ff.parameter_names
    unknown = sorted(set(values) - set(names))
    missing = [name for name in names if name not in values]
    if unknown or missing:
        raise InvalidArgument(
            f"Initial parameters must name exactly {names}; "
            f"unknown: {unknown}, missing: {missing}")
    return [values[name] for name in names]


def _apply(ff, config):
    if 'parameter_names' in config:
        ff.set_parameter_names(config['parameter_names'])
    if 'initial_parameters' in config:
        initial = config['initial_parameters']
        # models with declared names read par by position
        if isinstance(initial, Mapping) and getattr(ff.model, 'parameter_names', None):
            ff.set_initial_parameters_from_sequence(_initial_values_by_name(ff, initial))
        else:
            ff.set_initial_parameters(initial)
    if 'parameter_bounds' in config:
        ff.set_parameter_bounds(config['parameter_bounds'])
    if 'fit_ranges' in config:
        ff.set_fit_ranges(config['fit_ranges'])


def apply_config(ff, config):
    """
    Apply the fit ranges, names, initial parameters and bounds of a
    configuration to an existing fit function.

    The configuration is first applied to a scratch fit function of the
    same shape, so ``ff`` is left untouched if any entry is rejected.
    For models that declare ``parameter_names`` (profiles), an
    ``initial_parameters`` mapping is matched by name and must name every
    parameter exactly once; other models take the mapping in order,
    renaming the parameters.
    Structural keys (``profile``, ``precision``, ``ndims``, ``nparams``)
    are ignored here.
    """
    _check_config(config)
    scratch = FitFunction(ff.model, ff.get_ndims(), ff.get_nparams(), ff.get_precision_type())
    scratch.set_parameter_names(ff.parameter_names)
    _apply(scratch, config)
    _apply(ff, config)


def fit_function_from_config(config, model=None):
    """
    Build a fit function from a configuration.

    Parameters
    ----------
    config : dict
        Configuration, e.g. from :func:`load_fit_config`
    model : callable, optional
        Model function, required when the configuration has no ``profile``

    Returns
    -------
    FitFunction
    """
    _check_config(config)
    precision = config.get('precision', DEFAULTS['precision'])

    if model is None:
        if 'profile' not in config:
            raise InvalidArgument("Configuration needs a 'profile' when no model is given")
        ff = make_fit_function(config['profile'], precision=precision)
        for key in ('ndims', 'nparams'):
            expected = getattr(ff, key)
            if config.get(key, expected) != expected:
                raise InvalidArgument(
                    f"Profile '{config['profile']}' has {key}={expected}, "
                    f"configuration says {config[key]}")
    else:
        if 'nparams' not in config:
            raise InvalidArgument("Configuration needs 'nparams' when a model is given")
        ff = FitFunction(model, config.get('ndims', 1), config['nparams'], precision=precision)

    apply_config(ff, config)
    return ff


def render_options(config=None):
    """Rendering options of a configuration merged over the defaults."""
    options = dict(DEFAULTS['render'])
    if config:
        _check_config(config)
        options.update(config.get('render', {}))
    return options
